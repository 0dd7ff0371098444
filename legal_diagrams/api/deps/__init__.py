"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    enforce_rate_limit,
    get_diagram_service,
    get_rate_limiter,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "enforce_rate_limit",
    "get_diagram_service",
    "get_rate_limiter",
    "get_service_cache",
    "get_settings_dependency",
]
