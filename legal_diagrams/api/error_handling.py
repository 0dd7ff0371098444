"""
Diagram API error handling utilities.

Provides a decorator for consistent error handling across diagram
endpoints. Diagram content problems never reach this layer as exceptions;
only invalid call shapes, rejected publications and collaborator failures do.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from legal_diagrams.core.exceptions import (
    DiagramRejectedError,
    ExtractionFailedError,
    InvalidArgumentError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_diagram_errors(func: F) -> F:
    """
    Decorator to handle diagram errors and transform them into HTTPExceptions.

    This centralizes:
    - Logging of errors with context
    - Mapping domain exceptions to HTTP status codes
    - Ensuring uniform error response formats
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except DiagramRejectedError as e:
            logger.warning(
                "Diagram rejected",
                extra={"errors": e.errors, "error": e.message},
            )
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={"error": e.message, "errors": e.errors},
            )

        except InvalidArgumentError as e:
            logger.warning("Invalid diagram request", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=e.message,
            )

        except ExtractionFailedError as e:
            logger.warning("Entity extraction failed", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=e.message,
            )

        except HTTPException:
            raise

        except Exception as e:
            logger.exception(
                "Unexpected failure in diagram operation",
                extra={"error": str(e)},
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"An internal error occurred during diagram operation: {str(e)}",
            )

    return wrapper  # type: ignore
