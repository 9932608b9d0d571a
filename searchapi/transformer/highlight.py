"""
Highlight match extraction.

The backend wraps matched terms in emphasis tags inside each highlight
fragment. These helpers strip the tags and report where the matched terms sit
in the remaining text.

NB. Span bounds are UTF-8 byte offsets, not character offsets, so they differ
from ``str`` indices whenever the fragment contains non-ASCII characters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..schema.backend import ESHighlight
from ..schema.search import MatchDescription, MatchDetails, Matches

START_HIGHLIGHT_TAG = "<strong>"
END_HIGHLIGHT_TAG = "</strong>"

# (highlight attribute, match description attribute)
HIGHLIGHT_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("description_title", "title"),
    ("description_edition", "edition"),
    ("description_summary", "summary"),
    ("description_meta", "meta_description"),
    ("description_keywords", "keywords"),
    ("description_dataset_id", "dataset_id"),
)

# Fields whose spans carry the de-marked fragment as their value
VALUE_FIELDS = frozenset({"keywords"})


@dataclass(frozen=True)
class HighlightMarkers:
    """Literal tags delimiting a matched term in a highlight fragment."""

    start_tag: str = START_HIGHLIGHT_TAG
    end_tag: str = END_HIGHLIGHT_TAG


DEFAULT_MARKERS = HighlightMarkers()


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8", "surrogatepass"))


def find_matches(fragment: str, markers: HighlightMarkers = DEFAULT_MARKERS) -> Tuple[List[MatchDetails], str]:
    """
    Find every marked-up phrase in a highlight fragment.

    Args:
        fragment: Highlight text containing zero or more marked phrases
        markers: Start and end tags delimiting a phrase

    Returns:
        Tuple of the ordered match spans and the fragment with markers removed
    """
    matches: List[MatchDetails] = []
    parts: List[str] = []
    offset = 0
    pos = 0

    while True:
        start = fragment.find(markers.start_tag, pos)
        if start < 0:
            break

        mid_start = start + len(markers.start_tag)
        end = fragment.find(markers.end_tag, mid_start)
        if end < 0:
            # Unterminated marker, keep the rest of the fragment as it is
            break

        left = fragment[pos:start]
        mid = fragment[mid_start:end]
        left_len = _byte_len(left)
        mid_len = _byte_len(mid)

        # The first bound is one past the preceding text, the last bound is
        # relative to the preceding text only.
        matches.append(MatchDetails(start=offset + left_len + 1, end=offset + left_len + mid_len))

        parts.append(left)
        parts.append(mid)
        offset += left_len + mid_len
        pos = end + len(markers.end_tag)

    parts.append(fragment[pos:])
    return matches, "".join(parts)


def _collect_field_matches(
    fragments: List[str], markers: HighlightMarkers, include_value: bool
) -> List[MatchDetails]:
    field_matches: List[MatchDetails] = []
    for fragment in fragments:
        found, value = find_matches(fragment, markers)
        if include_value:
            for match in found:
                match.value = value
        field_matches.extend(found)
    return field_matches


def build_matches(highlight: Optional[ESHighlight], markers: HighlightMarkers = DEFAULT_MARKERS) -> Matches:
    """
    Build the match record for one hit from its highlight map.

    Fields with no highlight entry stay unset rather than becoming empty lists.
    """
    description = MatchDescription()
    if highlight is None:
        return Matches(description=description)

    for highlight_field, match_field in HIGHLIGHT_FIELDS:
        fragments = getattr(highlight, highlight_field)
        if fragments is None:
            continue
        setattr(
            description,
            match_field,
            _collect_field_matches(fragments, markers, include_value=match_field in VALUE_FIELDS),
        )

    return Matches(description=description)
