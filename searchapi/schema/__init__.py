from .backend import (
    ESBucket,
    ESContact,
    ESHighlight,
    ESResponse,
    ESResponseHit,
    ESResponseItem,
    ESSourceDescription,
    ESSourceDocument,
)
from .common import ErrorResponse, HealthStatus
from .search import (
    Contact,
    ContentItem,
    ContentType,
    Description,
    MatchDescription,
    MatchDetails,
    Matches,
    SearchResponse,
)

__all__ = [
    # backend
    "ESBucket",
    "ESContact",
    "ESHighlight",
    "ESResponse",
    "ESResponseHit",
    "ESResponseItem",
    "ESSourceDescription",
    "ESSourceDocument",
    # common
    "ErrorResponse",
    "HealthStatus",
    # search
    "Contact",
    "ContentItem",
    "ContentType",
    "Description",
    "MatchDescription",
    "MatchDetails",
    "Matches",
    "SearchResponse",
]
