"""Tests for highlight match extraction."""

from searchapi.schema.backend import ESHighlight
from searchapi.transformer.highlight import HighlightMarkers, build_matches, find_matches


def spans(matches):
    return [(m.start, m.end) for m in matches]


def test_fragment_without_markers_is_unchanged():
    """Text with no markup yields no spans and comes back as is."""
    matches, text = find_matches("Retail sales index")

    assert matches == []
    assert text == "Retail sales index"


def test_single_match():
    matches, text = find_matches("abc<strong>def</strong>ghi")

    assert text == "abcdefghi"
    assert spans(matches) == [(4, 6)]
    assert matches[0].value is None


def test_match_at_start_of_fragment():
    matches, text = find_matches("<strong>Inflation</strong> rate")

    assert text == "Inflation rate"
    assert spans(matches) == [(1, 9)]


def test_multiple_matches_are_offset_by_preceding_text():
    """Later spans are shifted by the de-marked text before them."""
    matches, text = find_matches("a<strong>b</strong>c<strong>d</strong>")

    assert text == "abcd"
    assert spans(matches) == [(2, 2), (4, 4)]


def test_adjacent_matches():
    matches, text = find_matches("<strong>gross</strong> <strong>domestic</strong> product")

    assert text == "gross domestic product"
    assert spans(matches) == [(1, 5), (7, 14)]


def test_offsets_count_bytes_not_characters():
    # "£" is two bytes in UTF-8
    matches, text = find_matches("£5 <strong>cost</strong>")

    assert text == "£5 cost"
    assert spans(matches) == [(5, 8)]


def test_unterminated_marker_is_left_in_place():
    matches, text = find_matches("abc<strong>def")

    assert matches == []
    assert text == "abc<strong>def"


def test_unterminated_marker_after_a_match():
    matches, text = find_matches("a<strong>b</strong>c<strong>d")

    assert spans(matches) == [(2, 2)]
    assert text == "abc<strong>d"


def test_extracting_demarked_text_finds_nothing_more():
    _, text = find_matches("the <strong>cpi</strong> and <strong>rpi</strong> rates")
    matches, again = find_matches(text)

    assert matches == []
    assert again == text


def test_custom_markers():
    markers = HighlightMarkers(start_tag="<em>", end_tag="</em>")
    matches, text = find_matches("x<em>y</em>z<strong>w</strong>", markers)

    assert text == "xyz<strong>w</strong>"
    assert spans(matches) == [(2, 2)]


def test_long_fragment_with_many_matches():
    fragment = "<strong>a</strong>," * 5000
    matches, text = find_matches(fragment)

    assert len(matches) == 5000
    assert text == "a," * 5000
    assert spans(matches[:2]) == [(1, 1), (3, 3)]


def test_build_matches_only_sets_highlighted_fields():
    highlight = ESHighlight.model_validate({"description.title": ["<strong>Retail</strong> sales"]})

    matches = build_matches(highlight)

    assert matches.model_dump(exclude_none=True) == {"description": {"title": [{"start": 1, "end": 6}]}}


def test_build_matches_concatenates_fragments_in_order():
    highlight = ESHighlight.model_validate(
        {"description.summary": ["<strong>a</strong>", "x <strong>b</strong>"]}
    )

    matches = build_matches(highlight)

    assert spans(matches.description.summary) == [(1, 1), (3, 3)]


def test_build_matches_maps_every_tracked_field():
    highlight = ESHighlight.model_validate(
        {
            "description.title": ["<strong>t</strong>"],
            "description.edition": ["<strong>e</strong>"],
            "description.summary": ["<strong>s</strong>"],
            "description.metaDescription": ["<strong>m</strong>"],
            "description.keywords": ["<strong>k</strong>"],
            "description.datasetId": ["<strong>d</strong>"],
        }
    )

    description = build_matches(highlight).description

    for field in ("title", "edition", "summary", "meta_description", "keywords", "dataset_id"):
        assert spans(getattr(description, field)) == [(1, 1)], field


def test_keyword_value_is_whole_demarked_fragment():
    highlight = ESHighlight.model_validate({"description.keywords": ["<strong>red</strong>"]})

    keywords = build_matches(highlight).description.keywords

    assert [m.model_dump() for m in keywords] == [{"value": "red", "start": 1, "end": 3}]


def test_keyword_value_is_not_the_matched_substring():
    highlight = ESHighlight.model_validate(
        {"description.keywords": ["big <strong>red</strong> <strong>bus</strong>"]}
    )

    keywords = build_matches(highlight).description.keywords

    assert [(m.value, m.start, m.end) for m in keywords] == [
        ("big red bus", 5, 7),
        ("big red bus", 8, 10),
    ]


def test_highlight_without_markup_gives_empty_list():
    highlight = ESHighlight.model_validate({"description.title": ["Retail sales"]})

    description = build_matches(highlight).description

    assert description.title == []
    assert description.summary is None


def test_build_matches_without_highlight():
    matches = build_matches(None)

    assert matches.model_dump(exclude_none=True) == {"description": {}}
