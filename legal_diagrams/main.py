"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, legal_diagrams.api, legal_diagrams.observability, legal_diagrams.configs
System role: Application initialization and configuration
"""

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from legal_diagrams import __version__
from legal_diagrams.api.deps import get_service_cache
from legal_diagrams.api.routers import diagrams_router, health_router
from legal_diagrams.configs import get_settings
from legal_diagrams.core.security import RateLimiter
from legal_diagrams.observability.logger import configure_logging
from legal_diagrams.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


async def prune_rate_limits_periodically(limiter: RateLimiter, interval_seconds: float) -> None:
    """
    Prune expired rate limit entries until cancelled.

    Args:
        limiter: Shared rate limiter
        interval_seconds: Delay between prune passes
    """
    while True:
        await asyncio.sleep(interval_seconds)
        limiter.prune()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    Configures logging and schedules rate limit pruning.
    """
    settings = get_settings()

    # Startup
    configure_logging(settings.log_level)
    logger.info(
        "Application startup: logging configured",
        extra={"environment": settings.environment},
    )

    cache = get_service_cache()
    prune_task = asyncio.create_task(
        prune_rate_limits_periodically(
            cache.rate_limiter,
            settings.limits.rate_limit_prune_interval_seconds,
        )
    )
    logger.info(
        "Rate limit pruning scheduled",
        extra={"interval_seconds": settings.limits.rate_limit_prune_interval_seconds},
    )

    yield

    # Shutdown
    prune_task.cancel()
    try:
        await prune_task
    except asyncio.CancelledError:
        pass
    cache.clear()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Validation, statistics and merging of legal entity diagrams",
        version=__version__,
        lifespan=lifespan,
    )

    # Add observability middleware (added first = last to execute)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(diagrams_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "legal_diagrams.main:app",
        host="localhost",
        port=8082,
        reload=True,
    )
