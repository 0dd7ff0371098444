"""
Exception hierarchy for the Legal Diagram application.

Diagram content problems are never raised: they are reported as data inside
a validation verdict. The exceptions below cover invalid call shapes and
failures of the collaborators around the diagram engine.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class LegalDiagramException(Exception):
    """Base exception for all Legal Diagram application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidArgumentError(LegalDiagramException):
    """Raised when a core operation is called with an argument of the wrong shape."""

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid argument error.

        Args:
            message: Error message
            argument: Name of the offending argument
            details: Additional context
        """
        details = details or {}
        if argument:
            details["argument"] = argument
        super().__init__(message, details)


class DiagramRejectedError(LegalDiagramException):
    """Raised when an invalid diagram is submitted for an operation that needs a valid one."""

    def __init__(
        self,
        message: str,
        errors: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize diagram rejected error.

        Args:
            message: Error message
            errors: Validation errors that caused the rejection
            details: Additional context
        """
        details = details or {}
        self.errors = list(errors or [])
        if self.errors:
            details["errors"] = self.errors
        super().__init__(message, details)


class ExtractionFailedError(LegalDiagramException):
    """Raised when the entity-extraction requester cannot produce a diagram."""

    pass

