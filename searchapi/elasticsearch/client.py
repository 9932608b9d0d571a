"""
Async client for the search backend.
"""

import asyncio
import logging
from typing import Dict, Optional

import aiohttp

from .config import ElasticsearchConfig
from .exceptions import ElasticsearchException, SigningException
from .signer import RequestSigner

logger = logging.getLogger(__name__)


class ElasticsearchClient:
    """
    Async search backend client.

    Request bodies are forwarded verbatim and response bodies are returned as
    raw bytes; decoding them is the transformer's job.
    """

    def __init__(self, config: ElasticsearchConfig, signer: Optional[RequestSigner] = None):
        self.config = config
        self.base_url = config.endpoint.rstrip("/")
        self.signer = signer
        self.session: Optional[aiohttp.ClientSession] = None

        # Prepare auth
        self.auth = None
        if config.username and config.password:
            self.auth = aiohttp.BasicAuth(config.username, config.password)

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session."""
        if self.session is None or self.session.closed:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout)
            connector = aiohttp.TCPConnector(ssl=self.config.verify_certs)
            self.session = aiohttp.ClientSession(timeout=timeout, connector=connector, auth=self.auth)
        return self.session

    async def close(self):
        """Close the HTTP session."""
        if self.session and not self.session.closed:
            await self.session.close()

    async def search(self, index: str, doc_type: str, body: bytes) -> bytes:
        """Run a single search request."""
        return await self._call("POST", f"{index}/{doc_type}/_search", body, "application/json")

    async def multi_search(self, index: str, doc_type: str, body: bytes) -> bytes:
        """Run a multi-search request; the body is newline-delimited JSON."""
        return await self._call("POST", f"{index}/{doc_type}/_msearch", body, "application/x-ndjson")

    async def get_status(self) -> bytes:
        """Fetch the cluster health summary."""
        return await self._call("GET", "_cat/health")

    async def health_check(self) -> bool:
        """Check if the backend is accessible."""
        try:
            await self.get_status()
            return True
        except ElasticsearchException as e:
            logger.error(f"Elasticsearch health check failed: {e}")
            return False

    def _build_headers(self, method: str, url: str, body: Optional[bytes], content_type: Optional[str]) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        if content_type:
            headers["Content-Type"] = content_type

        if self.config.sign_requests:
            if self.signer is None:
                raise SigningException("v4 signer missing. Cannot sign request")
            headers = self.signer.sign(method, url, body, headers)
        return headers

    async def _call(self, method: str, path: str, body: Optional[bytes] = None, content_type: Optional[str] = None) -> bytes:
        url = f"{self.base_url}/{path}"
        headers = self._build_headers(method, url, body, content_type)

        session = await self._get_session()
        try:
            async with session.request(method, url, data=body, headers=headers) as response:
                data = await response.read()
                if response.status >= 400:
                    error_text = data.decode("utf-8", "replace")
                    logger.error(f"{method} {url} failed: {response.status} - {error_text}")
                    raise ElasticsearchException(
                        f"Request to {path} failed with status {response.status}", status_code=response.status
                    )
                return data

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Error calling {url}: {e}")
            raise ElasticsearchException(str(e) or f"Request to {path} failed: {type(e).__name__}") from e
