"""
Bearer token validation.

Parses the Authorization header and checks the token against configured
API keys.

Dependencies: secrets (stdlib)
System role: Request authentication for the external knowledge API
"""

import logging
import secrets

from knowledge_bridge.core.exceptions import (
    AuthorizationFailedError,
    InvalidAuthorizationHeaderError,
)

logger = logging.getLogger(__name__)


def extract_bearer_token(authorization: str | None) -> str:
    """
    Extract the token from an `Authorization: Bearer <token>` header.

    Args:
        authorization: Raw header value (None when absent)

    Returns:
        str: The bearer token

    Raises:
        InvalidAuthorizationHeaderError: Header missing, not exactly `<scheme> <token>`,
            or scheme is not Bearer
    """
    parts = (authorization or "").split()
    if len(parts) != 2:
        raise InvalidAuthorizationHeaderError()

    scheme, token = parts
    if scheme.lower() != "bearer":
        raise InvalidAuthorizationHeaderError(details={"scheme": scheme})
    return token


def verify_api_key(token: str, allowed_keys: list[str]) -> None:
    """
    Check a bearer token against the accepted API keys.

    Any token passes when no keys are configured.

    Args:
        token: Bearer token from the request
        allowed_keys: Accepted API keys

    Raises:
        AuthorizationFailedError: Token does not match any configured key
    """
    if not allowed_keys:
        return
    matched = False
    for key in allowed_keys:
        # every key is compared, even after a match
        if secrets.compare_digest(token.encode(), key.encode()):
            matched = True
    if not matched:
        logger.warning("%s:verify_api_key - Rejected bearer token", __name__)
        raise AuthorizationFailedError()


def authenticate(authorization: str | None, allowed_keys: list[str]) -> str:
    """Parse and verify the Authorization header, returning the token."""
    token = extract_bearer_token(authorization)
    verify_api_key(token, allowed_keys)
    return token
