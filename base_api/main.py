"""
FastAPI application entry point for the base API service.
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
import structlog
import uvicorn

from .api.routes import register_routes
from .container import ServiceContainer, build_container
from .core.config import get_settings
from .core.database import create_tables
from .core.logging_config import configure_logging

logger = structlog.get_logger()


def create_app(container: Optional[ServiceContainer] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        container: Prebuilt services. When omitted the container is built from
            settings at startup and closed at shutdown.
    """
    settings = container.settings if container else get_settings()
    configure_logging(settings.DEBUG)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger.info("Starting base API", version=settings.VERSION, environment=settings.ENVIRONMENT)
        owns_container = container is None
        active = container or build_container(settings)
        app.state.container = active

        try:
            if active.engine is not None and settings.DATABASE_AUTO_CREATE:
                await create_tables(active.engine)
            if active.redis_manager is not None and not await active.redis_manager.health_check():
                logger.warning("Redis unavailable at startup, queue endpoints will fail until it recovers")

            yield

        finally:
            # Shutdown
            logger.info("Shutting down base API")
            if owns_container:
                await active.close()
            logger.info("Base API shutdown complete")

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
    )
    if container is not None:
        # Available before startup for clients that skip lifespan events
        app.state.container = container

    register_routes(app)
    return app


def run_dev():
    """Run development server."""
    uvicorn.run(
        "base_api.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="debug",
    )


def run_prod():
    """Run production server."""
    uvicorn.run(
        "base_api.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        reload=False,
        log_level="info",
        access_log=False,  # Use structured logging instead
    )


if __name__ == "__main__":
    if get_settings().DEBUG:
        run_dev()
    else:
        run_prod()
