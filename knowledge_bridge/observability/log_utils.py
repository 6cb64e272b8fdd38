"""
Logging utilities for safe structured logging.

Keeps user-supplied values (queries, metadata) bounded in log output.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

QUERY_LOG_MAX_LENGTH = 200


def safe_log_value(value: Any, max_length: int = QUERY_LOG_MAX_LENGTH) -> str:
    """
    Convert a value to a bounded string for logging.

    Collections are summarized by size rather than dumped.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    if value is None:
        return "None"
    if isinstance(value, str):
        val_str = value
    elif isinstance(value, (list, tuple)):
        val_str = f"{type(value).__name__}({len(value)} items)"
    elif isinstance(value, dict):
        val_str = f"dict({len(value)} keys)"
    else:
        val_str = str(value)

    if len(val_str) > max_length:
        return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
    return val_str


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """
    Log a message with structured context, safely converting all values.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Arbitrary key-value pairs attached as `extra`
    """
    safe_context = {key: safe_log_value(val) for key, val in context.items()}
    logger.log(level, message, extra=safe_context)
