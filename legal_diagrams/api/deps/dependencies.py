"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: legal_diagrams.configs, legal_diagrams.application, legal_diagrams.core.security
System role: DI container for service injection
"""

import math
from functools import lru_cache

from fastapi import Depends, HTTPException, Request, status

from legal_diagrams.application.services import DiagramService
from legal_diagrams.configs import Settings, get_settings
from legal_diagrams.core.security import RateLimitDecision, RateLimiter


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._diagram_service = None
        self._rate_limiter = None

    @property
    def diagram_service(self) -> DiagramService:
        """Get cached diagram service."""
        if self._diagram_service is None:
            self._diagram_service = DiagramService()
        return self._diagram_service

    @property
    def rate_limiter(self) -> RateLimiter:
        """Get cached rate limiter (shared by all requests)."""
        if self._rate_limiter is None:
            self._rate_limiter = RateLimiter()
        return self._rate_limiter

    def clear(self) -> None:
        """Clear all cached instances."""
        self._diagram_service = None
        self._rate_limiter = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_diagram_service() -> DiagramService:
    """
    Get diagram service instance.

    Returns:
        DiagramService: Shared stateless diagram orchestrator
    """
    return get_service_cache().diagram_service


def get_rate_limiter() -> RateLimiter:
    """Get the process-wide rate limiter."""
    return get_service_cache().rate_limiter


def enforce_rate_limit(
    request: Request,
    limiter: RateLimiter = Depends(get_rate_limiter),
    settings: Settings = Depends(get_settings_dependency),
) -> RateLimitDecision:
    """
    Consume one request from the caller's window.

    Args:
        request: Incoming request (client host is the caller key)
        limiter: Rate limiter (injected)
        settings: Application settings (injected)

    Returns:
        RateLimitDecision: Allowed decision for the request

    Raises:
        HTTPException(429): When the caller's window is exhausted
    """
    key = request.client.host if request.client else "anonymous"
    decision = limiter.check_and_consume(
        key,
        settings.limits.api_calls_per_minute,
        settings.limits.rate_limit_window_seconds,
    )
    if not decision.allowed:
        retry_after = max(0, math.ceil(decision.reset_time - limiter.now()))
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail={"error": "Rate limit exceeded", "retry_after": retry_after},
            headers={"Retry-After": str(retry_after)},
        )
    return decision
