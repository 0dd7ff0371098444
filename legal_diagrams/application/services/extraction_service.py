"""
Extraction service orchestrator.

Coordinates the path from uploaded legal documents to a trusted diagram:
upload guards and text extraction, the text-length guard, the external
entity-extraction request, then merge/validate/measure through the
diagram service. Every external call goes through an injected boundary
implementation.

This is library API for hosts that supply a concrete requester (and, for
PDF or Word uploads, a richer extractor). The HTTP app does not mount an
extraction route because it ships no model client.

Dependencies: legal_diagrams.boundary, legal_diagrams.core.security,
    legal_diagrams.application.services.diagram_service
System role: Document -> diagram use case orchestration
"""

import logging
from dataclasses import dataclass, field

from legal_diagrams.application.services.diagram_service import DiagramReport, DiagramService
from legal_diagrams.boundary.document_extractor import (
    DocumentTextExtractor,
    PlainTextExtractor,
    is_supported_file_type,
)
from legal_diagrams.boundary.extraction_requester import (
    EntityExtractionRequester,
    SourceDocument,
)
from legal_diagrams.configs import LimitSettings, get_settings
from legal_diagrams.core.exceptions import ExtractionFailedError, InvalidArgumentError
from legal_diagrams.core.security import (
    validate_file_count,
    validate_file_size,
    validate_text_length,
)

logger = logging.getLogger(__name__)


@dataclass
class UploadedFile:
    """Raw uploaded document."""

    file_name: str
    content: bytes


@dataclass
class DocumentIntake:
    """Documents whose text was extracted, plus per-file failures."""

    documents: list[SourceDocument] = field(default_factory=list)
    failures: list[dict[str, str]] = field(default_factory=list)


class ExtractionService:
    """Extraction service orchestrator."""

    def __init__(
        self,
        requester: EntityExtractionRequester,
        diagram_service: DiagramService | None = None,
        extractor: DocumentTextExtractor | None = None,
        limits: LimitSettings | None = None,
    ) -> None:
        """
        Initialize extraction service.

        Args:
            requester: Client for the external entity-extraction model
            diagram_service: Diagram orchestrator (created if omitted)
            extractor: Document text extractor (plain text if omitted)
            limits: Upload and text limits (application settings if omitted)
        """
        self.requester = requester
        self.diagram_service = diagram_service or DiagramService()
        self.extractor = extractor or PlainTextExtractor()
        self.limits = limits or get_settings().limits

    def intake_documents(self, uploads: list[UploadedFile]) -> DocumentIntake:
        """
        Extract text from uploaded files, collecting per-file failures.

        Args:
            uploads: Uploaded files

        Returns:
            DocumentIntake: Extracted documents and failures by file name

        Raises:
            InvalidArgumentError: If the upload count is out of bounds or no
                file yields text
        """
        count_check = validate_file_count(len(uploads), self.limits)
        if not count_check.valid:
            raise InvalidArgumentError(count_check.error, argument="uploads")

        intake = DocumentIntake()
        for upload in uploads:
            if not is_supported_file_type(upload.file_name):
                intake.failures.append(
                    {"file": upload.file_name, "error": f"Invalid file type: {upload.file_name}"}
                )
                continue

            size_check = validate_file_size(len(upload.content), self.limits)
            if not size_check.valid:
                intake.failures.append({"file": upload.file_name, "error": size_check.error})
                continue

            extracted = self.extractor.extract(upload.content, upload.file_name)
            if not extracted.success:
                intake.failures.append({"file": upload.file_name, "error": extracted.error or ""})
                continue

            intake.documents.append(SourceDocument(file_name=upload.file_name, text=extracted.text))

        if not intake.documents:
            raise InvalidArgumentError(
                "Failed to extract text from any files",
                argument="uploads",
                details={"failures": intake.failures},
            )

        logger.info(
            "Documents extracted",
            extra={"document_count": len(intake.documents), "failure_count": len(intake.failures)},
        )
        return intake

    def extract_diagram(self, documents: list[SourceDocument]) -> DiagramReport:
        """
        Request one diagram per document and analyze the merged result.

        Args:
            documents: Extracted document texts

        Returns:
            DiagramReport: Merged diagram with verdict and stats

        Raises:
            InvalidArgumentError: If no documents are given or text is too long
            ExtractionFailedError: If the model fails for any document
        """
        if not documents:
            raise InvalidArgumentError("No documents provided", argument="documents")

        total_text = "".join(document.text for document in documents)
        length_check = validate_text_length(total_text, self.limits)
        if not length_check.valid:
            raise InvalidArgumentError(length_check.error, argument="documents")

        diagrams: list[str] = []
        for document in documents:
            result = self.requester.request_diagram([document])
            if not result.success:
                logger.warning(
                    "Entity extraction failed",
                    extra={"file_name": document.file_name, "error": result.error},
                )
                raise ExtractionFailedError(
                    result.error or "Entity extraction failed",
                    details={"file_name": document.file_name},
                )
            diagrams.append(result.diagram)

        return self.diagram_service.analyze(diagrams)
