"""
Bedrock Knowledge Bases configuration.

Settings for the bedrock-agent-runtime client used to query knowledge bases.

Dependencies: pydantic_settings
System role: Vendor knowledge base client configuration
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BedrockSettings(BaseSettings):
    """Settings for Amazon Bedrock knowledge base retrieval."""

    model_config = SettingsConfigDict(
        env_prefix="BEDROCK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    region: str = Field(
        default="us-east-1",
        description="AWS region hosting the knowledge bases",
    )
    endpoint_url: str | None = Field(
        default=None,
        description="Override endpoint for bedrock-agent-runtime (VPC endpoint or local stub)",
    )
    search_type: Literal["HYBRID", "SEMANTIC"] | None = Field(
        default=None,
        description="Force a search type; Bedrock picks one when unset",
    )
