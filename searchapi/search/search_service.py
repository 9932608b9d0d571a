"""
Search service forwarding queries to the backend and transforming the results.
"""

import logging
from typing import Optional

from ..elasticsearch.client import ElasticsearchClient
from ..elasticsearch.config import ElasticsearchConfig
from ..elasticsearch.signer import RequestSigner
from ..transformer.highlight import HighlightMarkers
from ..transformer.transformer import Transformer

logger = logging.getLogger(__name__)


class SearchService:
    """
    Runs multi-search requests and returns v1 public responses.
    """

    def __init__(
        self,
        elasticsearch_config: ElasticsearchConfig,
        markers: Optional[HighlightMarkers] = None,
        client: Optional[ElasticsearchClient] = None,
    ):
        self.elasticsearch_config = elasticsearch_config
        if client is None:
            signer = None
            if elasticsearch_config.sign_requests:
                signer = RequestSigner(elasticsearch_config.aws_region, elasticsearch_config.aws_service)
            client = ElasticsearchClient(elasticsearch_config, signer=signer)
        self.client = client
        self.transformer = Transformer(markers)

    async def search(self, body: bytes, query: str) -> bytes:
        """
        Run a multi-search and transform the backend response.

        Args:
            body: Multi-search request body, forwarded unchanged
            query: Original query text, used for fallback suggestions

        Returns:
            Public response JSON
        """
        raw = await self.client.multi_search(
            self.elasticsearch_config.index, self.elasticsearch_config.doc_type, body
        )
        logger.debug(f"Backend returned {len(raw)} bytes for query '{query}'")
        return self.transformer.transform_search_response(raw, query)

    async def health_check(self) -> bool:
        """Check if the backend is healthy."""
        return await self.client.health_check()

    async def close(self):
        """Close the search service and clean up resources."""
        if self.client:
            await self.client.close()
