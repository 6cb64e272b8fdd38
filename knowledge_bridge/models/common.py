"""
Common response models.

Error envelope shared by every error path of the external knowledge API.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field

from knowledge_bridge.core.exceptions import KnowledgeBridgeException


class ErrorResponse(BaseModel):
    """Error response schema."""

    error_code: int = Field(description="External knowledge API error code")
    error_msg: str = Field(description="Error message")

    @classmethod
    def from_exception(cls, exc: KnowledgeBridgeException) -> "ErrorResponse":
        """Build the envelope from a domain exception."""
        return cls(error_code=exc.error_code, error_msg=exc.message)
