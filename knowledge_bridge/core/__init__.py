"""
Core business logic module.

Contains the exception hierarchy, bearer token validation and the
provider-to-contract translation of retrieval results.
"""

from knowledge_bridge.core.exceptions import (
    AuthorizationFailedError,
    InvalidAuthorizationHeaderError,
    InvalidMetadataConditionError,
    InvalidRequestError,
    KnowledgeBridgeException,
    KnowledgeNotFoundError,
    KnowledgeProviderError,
)

__all__ = [
    "AuthorizationFailedError",
    "InvalidAuthorizationHeaderError",
    "InvalidMetadataConditionError",
    "InvalidRequestError",
    "KnowledgeBridgeException",
    "KnowledgeNotFoundError",
    "KnowledgeProviderError",
]
