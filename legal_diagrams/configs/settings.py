"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from legal_diagrams.configs.base import BaseSettings
from legal_diagrams.configs.limits import LimitSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    app_name: str = Field(default="Legal Diagram API", description="Application title")

    # Aggregated settings
    limits: LimitSettings = Field(default_factory=LimitSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from legal_diagrams.configs import get_settings
        settings = get_settings()
    """
    return Settings()
