"""
Response transformer for the v1 search API.

Maps the backend's multi-search envelope onto the public response schema,
rebuilding highlight match spans and adding fallback suggestions for searches
that found nothing.
"""

from .exceptions import DecodeError, EmptyResponseError, EncodeError, TransformerException
from .highlight import END_HIGHLIGHT_TAG, START_HIGHLIGHT_TAG, HighlightMarkers, build_matches, find_matches
from .transformer import Transformer

__all__ = [
    "DecodeError",
    "EmptyResponseError",
    "EncodeError",
    "TransformerException",
    "END_HIGHLIGHT_TAG",
    "START_HIGHLIGHT_TAG",
    "HighlightMarkers",
    "build_matches",
    "find_matches",
    "Transformer",
]
