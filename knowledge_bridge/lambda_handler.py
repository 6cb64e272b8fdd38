"""
Lambda handler for API Gateway retrieval requests.

Serves the external knowledge API from AWS Lambda behind API Gateway
(REST API v1 or HTTP API v2 proxy integration). Runs the same
authentication, validation and retrieval path as POST /retrieval.

Environment variables:
- BEDROCK_REGION: Region hosting the knowledge bases
- KNOWLEDGE_API_KEYS: Comma-separated accepted API keys
- LOG_LEVEL: Root logging level

Dependencies: pydantic, knowledge_bridge.application, knowledge_bridge.core
System role: Lambda entry point for the external knowledge API
"""

import base64
import binascii
import json
import logging
from typing import Any, Dict

from dotenv import load_dotenv
from pydantic import ValidationError

# Load environment variables from .env if present
load_dotenv()

from knowledge_bridge.api.deps import get_service_cache
from knowledge_bridge.application.services import RetrievalService
from knowledge_bridge.configs import get_settings
from knowledge_bridge.core.auth import authenticate
from knowledge_bridge.core.exceptions import InvalidRequestError, KnowledgeBridgeException
from knowledge_bridge.models.common import ErrorResponse
from knowledge_bridge.models.retrieval import RetrievalRequest
from knowledge_bridge.observability.correlation import clear_correlation_id, set_correlation_id
from knowledge_bridge.observability.logger import configure_logging

logger = logging.getLogger(__name__)
configure_logging(get_settings().log_level)

JSON_HEADERS = {"Content-Type": "application/json"}


def _response(status_code: int, payload: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": JSON_HEADERS,
        "body": json.dumps(payload),
    }


def get_header(event: Dict[str, Any], name: str) -> str | None:
    """
    Read a header from a proxy event, ignoring case.

    Args:
        event: API Gateway proxy event
        name: Header name

    Returns:
        str | None: Header value, or None when absent
    """
    headers = event.get("headers") or {}
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def parse_request_body(event: Dict[str, Any]) -> RetrievalRequest:
    """
    Decode and validate the proxy event body.

    Args:
        event: API Gateway proxy event

    Returns:
        RetrievalRequest: Validated request

    Raises:
        InvalidRequestError: Missing, undecodable or invalid body
    """
    body = event.get("body")
    if not body:
        raise InvalidRequestError("Request body is required")

    if event.get("isBase64Encoded"):
        try:
            body = base64.b64decode(body).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            raise InvalidRequestError(f"Invalid base64 request body: {e}") from e

    try:
        return RetrievalRequest.model_validate_json(body)
    except ValidationError as e:
        logger.warning("%s:parse_request_body - ValidationError: %s", __name__, e)
        raise InvalidRequestError(
            "Invalid request body",
            details={"errors": e.errors(include_url=False, include_context=False)},
        ) from e


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler for API Gateway proxy retrieval events.

    Args:
        event: API Gateway proxy event
        context: Lambda context object

    Returns:
        Dict with statusCode, headers and JSON body
    """
    request_id = getattr(context, "aws_request_id", None)
    set_correlation_id(get_header(event, "X-Correlation-ID") or request_id)
    try:
        settings = get_settings()
        authenticate(get_header(event, "Authorization"), settings.auth.api_keys)
        request = parse_request_body(event)

        service = RetrievalService(client=get_service_cache().bedrock_client)
        result = service.retrieve(request)

        logger.info(
            "%s:handler - Returning %d records",
            __name__,
            len(result.records),
            extra={"knowledge_id": request.knowledge_id},
        )
        return _response(200, result.model_dump())

    except KnowledgeBridgeException as e:
        logger.warning(
            "%s:handler - %s: %s",
            __name__,
            type(e).__name__,
            e,
            extra={"error_code": e.error_code},
        )
        return _response(e.status_code, ErrorResponse.from_exception(e).model_dump())
    except Exception as e:
        logger.exception("%s:handler - Unexpected %s", __name__, type(e).__name__)
        return _response(500, {"error_code": 5000, "error_msg": "Internal server error"})
    finally:
        clear_correlation_id()
