"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: fastapi, knowledge_bridge.configs, knowledge_bridge.application, knowledge_bridge.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends, Header

from knowledge_bridge.application.services import RetrievalService
from knowledge_bridge.boundary.aws.bedrock_client import BedrockKnowledgeBaseClient
from knowledge_bridge.configs import Settings, get_settings
from knowledge_bridge.core.auth import authenticate


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self) -> None:
        self._bedrock_client: BedrockKnowledgeBaseClient | None = None

    @property
    def bedrock_client(self) -> BedrockKnowledgeBaseClient:
        """Get cached Bedrock knowledge base client."""
        if self._bedrock_client is None:
            settings = get_settings()
            self._bedrock_client = BedrockKnowledgeBaseClient(
                region=settings.bedrock.region,
                endpoint_url=settings.bedrock.endpoint_url,
                search_type=settings.bedrock.search_type,
            )
        return self._bedrock_client

    def clear(self) -> None:
        """Clear all cached instances."""
        self._bedrock_client = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_retrieval_service() -> RetrievalService:
    """
    Get retrieval service instance.

    Returns:
        RetrievalService: Service bound to the cached Bedrock client
    """
    return RetrievalService(client=get_service_cache().bedrock_client)


def require_api_key(
    authorization: str | None = Header(default=None),
    settings: Settings = Depends(get_settings_dependency),
) -> str:
    """
    Authenticate the request's bearer token.

    Args:
        authorization: Authorization header (injected)
        settings: Application settings (injected)

    Returns:
        str: Accepted bearer token

    Raises:
        InvalidAuthorizationHeaderError: Malformed or missing header
        AuthorizationFailedError: Token is not a configured API key
    """
    return authenticate(authorization, settings.auth.api_keys)
