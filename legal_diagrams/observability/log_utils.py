"""
Structured logging helpers for untrusted values.

Diagram text arrives from callers and from the extraction model, so it can
be long, multi-line and arbitrary. Values logged through these helpers are
flattened to one bounded line, and context keys never overwrite the
standard LogRecord attributes.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

# Attributes set by logging.LogRecord itself; extra= may not reuse them
RESERVED_RECORD_KEYS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


def safe_log_value(value: Any, max_length: int = 200) -> str:
    """
    Render a value as a single bounded log line.

    Args:
        value: Value to render
        max_length: Characters kept before truncating

    Returns:
        str: Newlines escaped, collections summarized by size
    """
    if value is None:
        return "None"
    if isinstance(value, Enum):
        text = str(value.value)
    elif isinstance(value, str):
        text = value.replace("\r", "\\r").replace("\n", "\\n")
    elif isinstance(value, Mapping):
        text = f"{len(value)} keys"
    elif isinstance(value, (list, tuple, set, frozenset)):
        text = f"{len(value)} items"
    else:
        text = str(value)

    if len(text) > max_length:
        return f"{text[:max_length]}... ({len(text)} chars)"
    return text


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """
    Log a message with context values rendered by ``safe_log_value``.

    Keys that clash with LogRecord attributes are prefixed with ``ctx_``.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Context key-value pairs
    """
    extra = {}
    for key, value in context.items():
        name = f"ctx_{key}" if key in RESERVED_RECORD_KEYS else key
        extra[name] = safe_log_value(value)
    logger.log(level, message, extra=extra)
