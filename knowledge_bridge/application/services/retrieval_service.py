"""
Retrieval service orchestrator.

Coordinates a single external knowledge API retrieval: builds the provider
filter, queries the knowledge base and filters/maps the candidates.

Dependencies: knowledge_bridge.boundary.aws, knowledge_bridge.core.retrieval_filter
System role: Retrieval orchestration
"""

import logging

from knowledge_bridge.boundary.aws.bedrock_client import BedrockKnowledgeBaseClient
from knowledge_bridge.core.retrieval_filter import build_retrieval_filter, filter_and_map
from knowledge_bridge.models.retrieval import RetrievalRequest, RetrievalResponse
from knowledge_bridge.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class RetrievalService:
    """
    Retrieval service orchestrator.

    Delegates the search to the knowledge base client and applies the
    caller's score threshold and top-k bound to the results.
    """

    def __init__(self, client: BedrockKnowledgeBaseClient) -> None:
        """
        Initialize retrieval service.

        Args:
            client: Knowledge base client used for the provider call
        """
        self.client = client

    def retrieve(self, request: RetrievalRequest) -> RetrievalResponse:
        """
        Retrieve records for a request.

        Args:
            request: Validated retrieval request

        Returns:
            RetrievalResponse: Records scoring above the threshold, at most top_k

        Raises:
            InvalidMetadataConditionError: Metadata condition cannot be translated
            KnowledgeNotFoundError: Knowledge base does not exist
            KnowledgeProviderError: Provider call failed
        """
        setting = request.retrieval_setting
        retrieval_filter = build_retrieval_filter(request.metadata_condition)

        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:retrieve - Querying knowledge base",
            knowledge_id=request.knowledge_id,
            query=request.query,
            top_k=setting.top_k,
            score_threshold=setting.score_threshold,
            filtered=retrieval_filter is not None,
        )

        candidates = self.client.retrieve(
            knowledge_base_id=request.knowledge_id,
            query=request.query,
            number_of_results=setting.top_k,
            retrieval_filter=retrieval_filter,
        )
        records = filter_and_map(
            candidates,
            score_threshold=setting.score_threshold,
            top_k=setting.top_k,
            knowledge_id=request.knowledge_id,
        )

        logger.info(
            f"{__name__}:retrieve - Kept {len(records)}/{len(candidates)} candidates",
            extra={"knowledge_id": request.knowledge_id},
        )
        return RetrievalResponse(records=records)
