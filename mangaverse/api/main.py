"""
FastAPI application with assembled routers.

Builds the app, wires middleware and mounts every router under /api/v1.

Dependencies: fastapi, mangaverse.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mangaverse import __version__
from mangaverse.api.deps.dependencies import get_service_cache
from mangaverse.boundary.db import dispose_async_engine
from mangaverse.configs import get_settings
from mangaverse.observability import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
    configure_logging,
)
from .routers import (
    admin_router,
    ads_router,
    analytics_router,
    auth_router,
    blog_router,
    comments_router,
    favorites_router,
    health_router,
    image_proxy_router,
    manga_router,
    reading_progress_router,
    site_settings_router,
)

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Refuses to start in production with the development JWT secret; on
    shutdown closes catalog HTTP clients and the database pool.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    # Startup
    if settings.auth.uses_dev_secret:
        if settings.is_production:
            raise RuntimeError("AUTH_JWT_SECRET must be set in production")
        logger.warning("AUTH_JWT_SECRET is not set; using the development signing secret")
    logger.info(
        "Mangaverse API starting",
        extra={"environment": settings.environment, "version": __version__},
    )

    yield

    # Shutdown
    await get_service_cache().aclose_all()
    await dispose_async_engine()
    logger.info("Mangaverse API stopped")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    app = FastAPI(
        title="Mangaverse API",
        description="Manga reading backend aggregating MangaDex and MangaPlus",
        version=__version__,
        lifespan=lifespan,
    )

    # Credentials only with an explicit origin list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Correlation-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    # Outermost, so request log records carry the correlation ID
    app.add_middleware(CorrelationMiddleware)

    for router in (
        health_router,
        auth_router,
        manga_router,
        comments_router,
        image_proxy_router,
        favorites_router,
        reading_progress_router,
        blog_router,
        ads_router,
        site_settings_router,
        analytics_router,
        admin_router,
    ):
        app.include_router(router, prefix=API_PREFIX)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "mangaverse.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
