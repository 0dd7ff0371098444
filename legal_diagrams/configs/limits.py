"""
Request and upload limit settings.

Rate limits for the diagram API and size limits for uploaded documents
and extracted text.

Dependencies: pydantic, pydantic_settings
System role: Abuse protection thresholds
"""

from pydantic import Field

from legal_diagrams.configs.base import BaseSettings, section_config


class LimitSettings(BaseSettings):
    """Rate limiting and input size configuration."""

    model_config = section_config("LIMITS_")

    api_calls_per_minute: int = Field(default=10, gt=0, description="Diagram API calls per client per window")
    rate_limit_window_seconds: float = Field(default=60.0, gt=0, description="Rate limit window length in seconds")
    rate_limit_prune_interval_seconds: float = Field(
        default=300.0,
        gt=0,
        description="How often the server prunes expired rate limit entries",
    )

    upload_size_mb: float = Field(default=10.0, gt=0, description="Maximum size of one uploaded document in MB")
    max_files_per_upload: int = Field(default=5, gt=0, description="Maximum documents per upload")
    max_text_length: int = Field(default=100_000, gt=0, description="Maximum characters of extracted text")
    min_api_key_length: int = Field(default=20, gt=0, description="Minimum length of a model API key")

    @property
    def upload_size_bytes(self) -> int:
        """Maximum upload size in bytes."""
        return int(self.upload_size_mb * 1024 * 1024)
