"""
API authentication settings.

Dependencies: pydantic_settings
System role: Bearer token configuration for the external knowledge API
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    """Accepted API keys for incoming retrieval calls."""

    model_config = SettingsConfigDict(
        env_prefix="KNOWLEDGE_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    keys: str = Field(
        default="",
        description="Comma-separated API keys; empty accepts any well-formed bearer token",
    )

    @property
    def api_keys(self) -> list[str]:
        """Configured keys with surrounding whitespace and blanks removed."""
        return [key.strip() for key in self.keys.split(",") if key.strip()]
