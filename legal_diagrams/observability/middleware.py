"""
FastAPI middleware for observability.

CorrelationMiddleware binds a correlation ID to each request so every log
line written while serving it carries the same ID. RequestLoggingMiddleware
writes one completion line per request, at a level chosen from the status
code.

Dependencies: fastapi, starlette, legal_diagrams.observability.correlation
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from legal_diagrams.observability.correlation import clear_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


def _status_log_level(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration of each request."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        route = f"{request.method} {request.url.path}"

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{route} - unhandled {type(e).__name__}",
                extra={"duration_ms": round((time.perf_counter() - started) * 1000, 2)},
            )
            raise

        logger.log(
            _status_log_level(response.status_code),
            f"{route} - {response.status_code}",
            extra={
                "status_code": response.status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
                "client_host": request.client.host if request.client else None,
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Binds the caller's correlation ID, or a new one, to the request."""

    async def dispatch(self, request: Request, call_next):
        """
        Set the correlation ID for the request and echo it in the response.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response carrying the ``X-Correlation-ID`` header
        """
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
