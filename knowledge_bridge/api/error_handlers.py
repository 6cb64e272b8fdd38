"""
Exception handlers.

Renders the application's exception hierarchy, and any unhandled error, as
external knowledge API error envelopes.

Dependencies: fastapi, knowledge_bridge.core.exceptions
System role: Exception-to-HTTP mapping
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from knowledge_bridge.core.exceptions import KnowledgeBridgeException
from knowledge_bridge.models.common import ErrorResponse

logger = logging.getLogger(__name__)


async def knowledge_bridge_exception_handler(
    request: Request, exc: KnowledgeBridgeException
) -> JSONResponse:
    """Return `{error_code, error_msg}` with the exception's HTTP status."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        f"{request.method} {request.url.path} - {type(exc).__name__}: {exc}",
        extra={"error_code": exc.error_code, "status_code": exc.status_code},
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse.from_exception(exc).model_dump(),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return a generic 5000 envelope for anything the domain handlers miss."""
    logger.exception(f"{request.method} {request.url.path} - Unhandled {type(exc).__name__}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error_code=5000, error_msg="Internal server error").model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach domain and fallback exception handlers to the application."""
    app.add_exception_handler(KnowledgeBridgeException, knowledge_bridge_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
