"""Service orchestrators."""

from .diagram_service import DiagramReport, DiagramService
from .extraction_service import DocumentIntake, ExtractionService, UploadedFile

__all__ = [
    "DiagramReport",
    "DiagramService",
    "DocumentIntake",
    "ExtractionService",
    "UploadedFile",
]
