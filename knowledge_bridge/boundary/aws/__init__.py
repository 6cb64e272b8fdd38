"""
AWS boundary modules.

Exports: BedrockKnowledgeBaseClient
"""

from .bedrock_client import BedrockKnowledgeBaseClient

__all__ = ["BedrockKnowledgeBaseClient"]
