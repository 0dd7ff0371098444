"""
Input guards for uploaded documents and caller-supplied values.

Business checks not covered by request schemas: upload size and count,
extracted text length, control-character stripping and model API key
format. Each guard returns a GuardResult instead of raising so callers can
collect several failures.

Dependencies: legal_diagrams.configs
System role: Boundary validation ahead of extraction
"""

import re
from dataclasses import dataclass

from legal_diagrams.configs import LimitSettings, get_settings

CONTROL_CHARACTERS_RE = re.compile(r"[\x00-\x1F\x7F]")
API_KEY_RE = re.compile(r"^[A-Za-z0-9_-]+$")


@dataclass(frozen=True)
class GuardResult:
    """Outcome of one input guard."""

    valid: bool
    error: str | None = None

    @classmethod
    def ok(cls) -> "GuardResult":
        return cls(valid=True)

    @classmethod
    def fail(cls, error: str) -> "GuardResult":
        return cls(valid=False, error=error)


def _limits(limits: LimitSettings | None) -> LimitSettings:
    return limits or get_settings().limits


def validate_file_size(size_bytes: int, limits: LimitSettings | None = None) -> GuardResult:
    """
    Check one uploaded document against the size limit.

    Args:
        size_bytes: Document size in bytes
        limits: Limit settings (defaults to application settings)

    Returns:
        GuardResult: Failure names the limit in MB
    """
    limits = _limits(limits)
    if size_bytes > limits.upload_size_bytes:
        return GuardResult.fail(f"File size exceeds limit of {limits.upload_size_mb:g}MB")
    return GuardResult.ok()


def validate_file_count(count: int, limits: LimitSettings | None = None) -> GuardResult:
    """
    Check the number of documents in one upload.

    Args:
        count: Number of files
        limits: Limit settings (defaults to application settings)

    Returns:
        GuardResult: Fails for zero files or more than the per-upload maximum
    """
    limits = _limits(limits)
    if count > limits.max_files_per_upload:
        return GuardResult.fail(f"Maximum {limits.max_files_per_upload} files allowed per upload")
    if count == 0:
        return GuardResult.fail("Please select at least one file")
    return GuardResult.ok()


def validate_text_length(text: str, limits: LimitSettings | None = None) -> GuardResult:
    """Check extracted text against the maximum character count."""
    limits = _limits(limits)
    if len(text) > limits.max_text_length:
        return GuardResult.fail(
            f"Text exceeds maximum length of {limits.max_text_length} characters"
        )
    return GuardResult.ok()


def sanitize_input(value: str) -> str:
    """Strip ASCII control characters and surrounding whitespace."""
    return CONTROL_CHARACTERS_RE.sub("", value).strip()


def validate_api_key_format(key: str, limits: LimitSettings | None = None) -> GuardResult:
    """
    Check that a model API key looks plausible before it is forwarded.

    For hosts wiring an EntityExtractionRequester to a caller-supplied key.

    Args:
        key: Raw API key from the caller
        limits: Limit settings (defaults to application settings)

    Returns:
        GuardResult: Fails when too short or containing invalid characters
    """
    limits = _limits(limits)
    sanitized = sanitize_input(key)

    if len(sanitized) < limits.min_api_key_length:
        return GuardResult.fail("API key is too short")

    if not API_KEY_RE.match(sanitized):
        return GuardResult.fail("API key contains invalid characters")

    return GuardResult.ok()
