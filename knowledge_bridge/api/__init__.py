"""
API routes module.

FastAPI routers, dependencies and exception handlers for the HTTP surface.
"""

from .routers import health_router, retrieval_router

__all__ = ["health_router", "retrieval_router"]
