"""API-specific dependencies."""

from .dependencies import (
    get_retrieval_service,
    get_service_cache,
    get_settings_dependency,
    require_api_key,
)

__all__ = [
    "get_retrieval_service",
    "get_service_cache",
    "get_settings_dependency",
    "require_api_key",
]
