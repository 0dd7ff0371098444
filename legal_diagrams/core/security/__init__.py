"""Request throttling and input guards."""

from legal_diagrams.core.security.input_guards import (
    GuardResult,
    sanitize_input,
    validate_api_key_format,
    validate_file_count,
    validate_file_size,
    validate_text_length,
)
from legal_diagrams.core.security.rate_limiter import RateLimitDecision, RateLimiter

__all__ = [
    "GuardResult",
    "RateLimitDecision",
    "RateLimiter",
    "sanitize_input",
    "validate_api_key_format",
    "validate_file_count",
    "validate_file_size",
    "validate_text_length",
]
