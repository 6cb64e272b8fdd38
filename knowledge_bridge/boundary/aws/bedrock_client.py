"""
Bedrock Knowledge Bases client.

Wraps the bedrock-agent-runtime `retrieve` operation and maps AWS errors
onto the application's exception hierarchy.

Dependencies: boto3, botocore
System role: Vendor SDK boundary for knowledge base retrieval
"""

import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from knowledge_bridge.core.exceptions import KnowledgeNotFoundError, KnowledgeProviderError

logger = logging.getLogger(__name__)


class BedrockKnowledgeBaseClient:
    """bedrock-agent-runtime client for knowledge base retrieval."""

    def __init__(
        self,
        region: str = "us-east-1",
        endpoint_url: str | None = None,
        search_type: str | None = None,
        client: Any | None = None,
    ) -> None:
        """
        Initialize Bedrock knowledge base client.

        Args:
            region: AWS region hosting the knowledge bases
            endpoint_url: Optional endpoint override
            search_type: Optional overrideSearchType (HYBRID or SEMANTIC)
            client: Pre-built boto3 client (tests inject a stubbed one)
        """
        self._region = region
        self._search_type = search_type
        self._client = client or boto3.client(
            "bedrock-agent-runtime",
            region_name=region,
            endpoint_url=endpoint_url,
        )

    @property
    def client(self) -> Any:
        """Underlying boto3 client."""
        return self._client

    def retrieve(
        self,
        knowledge_base_id: str,
        query: str,
        number_of_results: int,
        retrieval_filter: dict[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """
        Query a knowledge base.

        Args:
            knowledge_base_id: Bedrock knowledge base ID
            query: Query text
            number_of_results: Maximum candidates Bedrock returns
            retrieval_filter: Optional Bedrock RetrievalFilter

        Returns:
            list[dict]: retrievalResults entries (content, location, score, metadata)

        Raises:
            KnowledgeNotFoundError: Knowledge base does not exist
            KnowledgeProviderError: Any other AWS failure
        """
        vector_config: dict[str, Any] = {"numberOfResults": number_of_results}
        if retrieval_filter:
            vector_config["filter"] = retrieval_filter
        if self._search_type:
            vector_config["overrideSearchType"] = self._search_type

        try:
            response = self._client.retrieve(
                knowledgeBaseId=knowledge_base_id,
                retrievalQuery={"text": query},
                retrievalConfiguration={"vectorSearchConfiguration": vector_config},
            )
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "")
            if code == "ResourceNotFoundException":
                logger.warning(
                    "%s:retrieve - Knowledge base not found",
                    __name__,
                    extra={"knowledge_id": knowledge_base_id},
                )
                raise KnowledgeNotFoundError(knowledge_base_id) from e
            logger.error("%s:retrieve - ClientError %s: %s", __name__, code, e)
            raise KnowledgeProviderError(
                f"Knowledge base retrieval failed: {code or 'ClientError'}",
                operation="retrieve",
                details={"knowledge_id": knowledge_base_id},
            ) from e
        except BotoCoreError as e:
            logger.error("%s:retrieve - %s: %s", __name__, type(e).__name__, e)
            raise KnowledgeProviderError(
                f"Knowledge base retrieval failed: {type(e).__name__}",
                operation="retrieve",
                details={"knowledge_id": knowledge_base_id},
            ) from e

        results = response.get("retrievalResults", [])
        logger.info(
            "%s:retrieve - Bedrock returned %d results",
            __name__,
            len(results),
            extra={"knowledge_id": knowledge_base_id, "number_of_results": number_of_results},
        )
        return results
