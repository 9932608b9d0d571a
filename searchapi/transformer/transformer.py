"""
Transforms backend multi-search responses into the v1 public search response.
"""

import re
from typing import List, Optional, Union

from pydantic import ValidationError

from ..schema.backend import ESBucket, ESResponse, ESResponseHit, ESResponseItem, ESSourceDescription
from ..schema.search import Contact, ContentItem, ContentType, Description, SearchResponse
from ..utils.logging import get_logger, log_search_event
from .exceptions import DecodeError, EmptyResponseError, EncodeError
from .highlight import DEFAULT_MARKERS, HighlightMarkers, build_matches

logger = get_logger(__name__)

# A double-quoted phrase (inner text captured) or a run of non-whitespace
QUERY_TERM_PATTERN = re.compile(r'"([^"]*)"|(\S+)')


def build_description(source: ESSourceDescription) -> Description:
    """Translate a backend description into public field naming."""
    return Description(
        summary=source.summary,
        next_release=source.next_release,
        unit=source.unit,
        pre_unit=source.pre_unit,
        keywords=list(source.keywords) if source.keywords is not None else None,
        release_date=source.release_date,
        edition=source.edition,
        latest_release=source.latest_release,
        language=source.language,
        contact=Contact.model_validate(source.contact.model_dump()) if source.contact is not None else None,
        dataset_id=source.dataset_id,
        source=source.source,
        title=source.title,
        meta_description=source.meta_description,
        national_statistic=source.national_statistic,
        headline1=source.headline1,
        headline2=source.headline2,
        headline3=source.headline3,
    )


def build_content_item(hit: ESResponseHit, markers: HighlightMarkers = DEFAULT_MARKERS) -> ContentItem:
    """Map one backend hit onto a public content item."""
    return ContentItem(
        description=build_description(hit.source.description),
        type=hit.source.type,
        uri=hit.source.uri,
        matches=build_matches(hit.highlight, markers),
    )


def build_content_types(bucket: ESBucket) -> ContentType:
    return ContentType(type=bucket.key, count=bucket.count)


def collect_suggestions(response: ESResponseItem) -> List[str]:
    """Flatten suggestion options, group by group, into one list."""
    return [option.text for suggest in response.suggest.search_suggest for option in suggest.options]


def build_additional_suggestions(query: str) -> List[str]:
    """
    Split the original query into terms to offer as alternative searches.

    Quoted phrases are kept together without their quotes, everything else is
    split on whitespace.
    """
    terms: List[str] = []
    for match in QUERY_TERM_PATTERN.finditer(query or ""):
        phrase, word = match.groups()
        term = phrase if phrase is not None else word
        if term:
            terms.append(term)
    return terms


def merge_responses(source: ESResponse, markers: HighlightMarkers = DEFAULT_MARKERS) -> SearchResponse:
    """
    Merge every sub-response of a multi-search envelope into one response.

    The count comes from the first sub-response only; timings are summed and
    items, content types and suggestions are concatenated in received order.
    """
    response = SearchResponse(count=source.responses[0].hits.total)
    suggestions: List[str] = []
    took = 0

    for item in source.responses:
        for hit in item.hits.hits:
            response.items.append(build_content_item(hit, markers))
        for bucket in item.aggregations.doc_counts.buckets:
            response.content_types.append(build_content_types(bucket))
        suggestions.extend(collect_suggestions(item))
        took += item.took

    response.took = took
    if suggestions:
        response.suggestions = suggestions
    return response


class Transformer:
    """
    Transforms backend search responses into the v1 API response shape.

    Instances hold no mutable state and may be shared between concurrent
    requests.
    """

    def __init__(self, markers: Optional[HighlightMarkers] = None):
        self.markers = markers or DEFAULT_MARKERS

    def decode(self, response_data: Union[bytes, str]) -> ESResponse:
        """Decode and validate a raw backend envelope."""
        try:
            source = ESResponse.model_validate_json(response_data)
        except ValidationError as e:
            raise DecodeError(f"Failed to decode elastic search response: {e}", cause=e) from e

        if len(source.responses) < 1:
            raise EmptyResponseError("Response to be transformed contained 0 items")
        return source

    def encode(self, response: SearchResponse) -> bytes:
        """Encode a public response, omitting absent fields."""
        try:
            return response.model_dump_json(exclude_none=True).encode("utf-8")
        except ValueError as e:
            raise EncodeError(f"Failed to encode transformed response: {e}", cause=e) from e

    def transform(self, source: ESResponse, query: str) -> SearchResponse:
        """Merge a decoded envelope and add fallback suggestions if nothing matched."""
        response = merge_responses(source, self.markers)

        if response.count == 0:
            additional = build_additional_suggestions(query)
            if additional:
                response.additional_suggestions = additional
            log_search_event(logger, "fallback_suggestions_built", query=query, terms=len(additional))

        return response

    def transform_search_response(self, response_data: Union[bytes, str], query: str) -> bytes:
        """
        Transform a raw backend multi-search response into the public JSON shape.

        Args:
            response_data: Raw JSON bytes of the backend envelope
            query: Original query text, used for fallback suggestions

        Returns:
            Encoded public response

        Raises:
            DecodeError: payload is not valid JSON or not a backend envelope
            EmptyResponseError: envelope holds no sub-responses
            EncodeError: public response failed to serialize
        """
        try:
            source = self.decode(response_data)
            response = self.transform(source, query)
            transformed = self.encode(response)
        except (DecodeError, EmptyResponseError, EncodeError) as e:
            log_search_event(logger, "transform_failed", error_type=type(e).__name__, error=str(e))
            raise

        log_search_event(
            logger,
            "transform_completed",
            sub_responses=len(source.responses),
            count=response.count,
            items=len(response.items),
            took=response.took,
        )
        return transformed
