"""
Boundary layer for external collaborators.

Interfaces for the services around the diagram engine: document text
extraction, model-backed entity extraction and diagram publishing. The
diagram engine never calls these; application services receive
implementations by injection.
"""

from legal_diagrams.boundary.document_extractor import (
    DocumentTextExtractor,
    ExtractedDocument,
    PlainTextExtractor,
    is_supported_file_type,
)
from legal_diagrams.boundary.extraction_requester import (
    EntityExtractionRequester,
    ExtractionResult,
    SourceDocument,
)
from legal_diagrams.boundary.publisher import DiagramPublisher, PublicationResult

__all__ = [
    "DocumentTextExtractor",
    "ExtractedDocument",
    "PlainTextExtractor",
    "is_supported_file_type",
    "EntityExtractionRequester",
    "ExtractionResult",
    "SourceDocument",
    "DiagramPublisher",
    "PublicationResult",
]
