"""
Search API router.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response

from ...elasticsearch.exceptions import ElasticsearchException
from ...schema.common import HealthStatus
from ...search.config import SearchServiceConfig
from ...search.search_service import SearchService
from ...transformer.exceptions import TransformerException
from ...utils.logging import setup_logger

logger = logging.getLogger(__name__)

# Global search service instance (initialized on startup)
_search_service: Optional[SearchService] = None
_service_version: Optional[str] = None

router = APIRouter(prefix="/search", tags=["search"])


def get_search_service() -> SearchService:
    """Get search service instance."""
    if _search_service is None:
        raise HTTPException(status_code=503, detail="Search service not initialized")
    return _search_service


@router.post("")
async def search(
    request: Request,
    q: str = Query("", description="Original query text, used for fallback suggestions"),
    service: SearchService = Depends(get_search_service),
) -> Response:
    """
    Run a multi-search against the backend and return the v1 response.

    The request body is the backend multi-search body and is forwarded as is.
    """
    body = await request.body()
    if not body:
        raise HTTPException(status_code=400, detail="Request body must contain a multi-search query")

    try:
        transformed = await service.search(body, q)
    except ElasticsearchException as e:
        logger.error(f"Backend search failed for query '{q}': {e}")
        raise HTTPException(status_code=502, detail=f"Search backend failed: {str(e)}")
    except TransformerException as e:
        logger.error(f"Transforming response failed for query '{q}': {e}")
        raise HTTPException(status_code=502, detail=f"Invalid search backend response: {str(e)}")

    return Response(content=transformed, media_type="application/json")


@router.get("/health", response_model=HealthStatus)
async def health_check(service: SearchService = Depends(get_search_service)) -> HealthStatus:
    """
    Health check endpoint for the search service.

    Checks connectivity to the search backend.
    """
    is_healthy = await service.health_check()
    if is_healthy:
        return HealthStatus(status="ok", version=_service_version, elasticsearch="ok")
    return HealthStatus(status="down", version=_service_version, elasticsearch="down")


# Startup and shutdown functions
async def initialize_search_service():
    """Initialize the search service on startup."""
    global _search_service, _service_version

    try:
        config = SearchServiceConfig.from_environment()
        setup_logger(config.service_name, config.log_level, config.json_logs)
        _search_service = SearchService(
            elasticsearch_config=config.elasticsearch_config, markers=config.highlight_markers
        )
        _service_version = config.service_version
        logger.info("Search service initialized successfully")

    except Exception as e:
        logger.error(f"Failed to initialize search service: {e}")
        # Start without search; endpoints report 503
        _search_service = None


async def shutdown_search_service():
    """Cleanup search service on shutdown."""
    global _search_service

    if _search_service:
        try:
            await _search_service.close()
            logger.info("Search service shutdown completed")
        except Exception as e:
            logger.error(f"Error during search service shutdown: {e}")
        finally:
            _search_service = None
