"""
Core business logic module.

Contains the diagram engine, the exception hierarchy, and request guards.
All business rules and domain-specific logic reside here.
"""

from legal_diagrams.core.exceptions import (
    LegalDiagramException,
    InvalidArgumentError,
    DiagramRejectedError,
    ExtractionFailedError,
)

__all__ = [
    # Exceptions
    "LegalDiagramException",
    "InvalidArgumentError",
    "DiagramRejectedError",
    "ExtractionFailedError",
]
