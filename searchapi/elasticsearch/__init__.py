"""
Client for the search backend.

Forwards pre-built search and multi-search request bodies to the backend and
returns the raw response bytes, optionally signing requests for deployments
that require AWS SigV4 authentication.
"""

from .client import ElasticsearchClient
from .config import ElasticsearchConfig
from .exceptions import ElasticsearchException, SigningException
from .signer import RequestSigner

__all__ = [
    "ElasticsearchClient",
    "ElasticsearchConfig",
    "ElasticsearchException",
    "SigningException",
    "RequestSigner",
]
