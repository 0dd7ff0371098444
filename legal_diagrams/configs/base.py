"""
Shared settings base.

Every settings section reads the same ``.env`` file with case-insensitive
variable names. Sections differ only in their environment prefix.

Dependencies: pydantic, pydantic_settings
System role: Common ancestor of all settings sections
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

ENV_FILE = ".env"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def section_config(env_prefix: str = "") -> SettingsConfigDict:
    """
    Build the settings config used by every section.

    Args:
        env_prefix: Prefix for the section's environment variables

    Returns:
        SettingsConfigDict: Config reading ``.env`` and ignoring unknown keys
    """
    return SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        env_prefix=env_prefix,
        case_sensitive=False,
        extra="ignore",
    )


class BaseSettings(PydanticBaseSettings):
    """Runtime environment shared by all settings sections."""

    model_config = section_config()

    environment: str = Field(
        default="development",
        description="Deployment environment name, reported at startup",
    )
    log_level: str = Field(
        default="INFO",
        description=f"Root log level ({', '.join(LOG_LEVELS)})",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level
