"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, knowledge_bridge.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI

from knowledge_bridge.api.deps import get_service_cache
from knowledge_bridge.api.error_handlers import register_exception_handlers
from knowledge_bridge.configs import get_settings
from knowledge_bridge.observability.logger import configure_logging
from knowledge_bridge.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)
from .routers import health_router, retrieval_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging and pre-builds the Bedrock client on startup.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        f"{__name__}:lifespan - Starting {settings.service_name}",
        extra={"environment": settings.environment, "region": settings.bedrock.region},
    )

    cache = get_service_cache()
    _ = cache.bedrock_client
    logger.info(f"{__name__}:lifespan - Bedrock client ready")

    yield

    cache.clear()
    logger.info(f"{__name__}:lifespan - Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    app = FastAPI(
        title=f"{settings.service_name} API",
        description="External knowledge API backed by Amazon Bedrock Knowledge Bases",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Last added runs first, so correlation IDs are set before request logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(retrieval_router)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "knowledge_bridge.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
