"""
Exception hierarchy for Knowledge Bridge.

Provides layered exception structure for domain-specific errors.
Each exception carries the external knowledge API error code and the HTTP
status it is rendered with, so the FastAPI and Lambda entry points share
one mapping.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class KnowledgeBridgeException(Exception):
    """Base exception for all Knowledge Bridge errors."""

    error_code: int = 5000
    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidAuthorizationHeaderError(KnowledgeBridgeException):
    """Raised when the Authorization header is missing or not `Bearer <token>`."""

    error_code = 1001
    status_code = 403

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            "Invalid Authorization header format. Expected 'Bearer <api-key>' format.",
            details,
        )


class AuthorizationFailedError(KnowledgeBridgeException):
    """Raised when a well-formed bearer token is not an accepted API key."""

    error_code = 1002
    status_code = 403

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__("Authorization failed", details)


class KnowledgeNotFoundError(KnowledgeBridgeException):
    """Raised when the requested knowledge base does not exist."""

    error_code = 2001
    status_code = 404

    def __init__(self, knowledge_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize knowledge not found error.

        Args:
            knowledge_id: ID of the missing knowledge base
            details: Additional context
        """
        details = details or {}
        details["knowledge_id"] = knowledge_id
        super().__init__("The knowledge does not exist", details)


class InvalidRequestError(KnowledgeBridgeException):
    """Raised when a request body cannot be parsed or validated."""

    error_code = 3000
    status_code = 400


class InvalidMetadataConditionError(InvalidRequestError):
    """Raised when a metadata condition cannot be translated into a provider filter."""

    error_code = 3001

    def __init__(
        self,
        message: str,
        operator: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize metadata condition error.

        Args:
            message: Error message
            operator: Comparison operator that was rejected
            details: Additional context
        """
        details = details or {}
        if operator:
            details["operator"] = operator
        super().__init__(message, details)


class KnowledgeProviderError(KnowledgeBridgeException):
    """Raised when the knowledge base provider call fails."""

    error_code = 5001
    status_code = 502

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize provider error.

        Args:
            message: Error message
            operation: Provider operation that failed
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
