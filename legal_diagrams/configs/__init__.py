"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from legal_diagrams.configs.limits import LimitSettings
from legal_diagrams.configs.settings import Settings, get_settings

__all__ = ["LimitSettings", "Settings", "get_settings"]
