"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from knowledge_bridge.configs.auth import AuthSettings
from knowledge_bridge.configs.base import BaseSettings
from knowledge_bridge.configs.bedrock import BedrockSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    bedrock: BedrockSettings = Field(default_factory=BedrockSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from knowledge_bridge.configs import get_settings
        settings = get_settings()
    """
    return Settings()
