"""
External knowledge retrieval endpoint.

Routes: POST /retrieval

Dependencies: knowledge_bridge.application.services.retrieval_service
System role: External knowledge API HTTP surface
"""

import logging

from fastapi import APIRouter, Depends

from knowledge_bridge.api.deps import get_retrieval_service, require_api_key
from knowledge_bridge.application.services import RetrievalService
from knowledge_bridge.models.common import ErrorResponse
from knowledge_bridge.models.retrieval import RetrievalRequest, RetrievalResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["retrieval"])


@router.post(
    "/retrieval",
    response_model=RetrievalResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid metadata condition"},
        403: {"model": ErrorResponse, "description": "Invalid or rejected Authorization header"},
        404: {"model": ErrorResponse, "description": "Knowledge base does not exist"},
        502: {"model": ErrorResponse, "description": "Knowledge base provider failure"},
    },
)
def retrieve(
    request: RetrievalRequest,
    _token: str = Depends(require_api_key),
    retrieval_service: RetrievalService = Depends(get_retrieval_service),
) -> RetrievalResponse:
    """
    Retrieve knowledge base records for a query.

    Args:
        request: RetrievalRequest with query, knowledge_id and retrieval settings
        _token: Authenticated bearer token (injected)
        retrieval_service: Injected RetrievalService

    Returns:
        RetrievalResponse: Records scoring above the threshold, at most top_k
    """
    return retrieval_service.retrieve(request)
