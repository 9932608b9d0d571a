from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from ..schema import HealthStatus
from .routers.search import initialize_search_service
from .routers.search import router as search_router
from .routers.search import shutdown_search_service


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Start the search service with the app and close it on shutdown."""
    await initialize_search_service()
    yield
    await shutdown_search_service()


app = FastAPI(title="Search API", lifespan=lifespan)
app.include_router(search_router)


@app.get("/health")
async def health_check() -> HealthStatus:
    return HealthStatus(status="ok")
