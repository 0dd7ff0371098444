"""
Diagram service orchestrator.

Coordinates the diagram engine for a request: merge when several diagrams
arrive, validate the result, and always measure it so callers can show
partial information on failure. Also prepares validated diagrams for the
external publisher.

Dependencies: legal_diagrams.core.diagram, legal_diagrams.boundary.publisher
System role: Diagram use case orchestration
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from collections.abc import Sequence

from legal_diagrams.boundary.publisher import DiagramPublisher, PublicationResult
from legal_diagrams.core.diagram import (
    DiagramStats,
    PublicationPayload,
    ValidationVerdict,
    build_publication_payload,
    compute_stats,
    merge_diagrams,
    validate_diagram,
)
from legal_diagrams.core.exceptions import DiagramRejectedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiagramReport:
    """Merged diagram together with its verdict and statistics."""

    diagram: str
    verdict: ValidationVerdict
    stats: DiagramStats
    source_count: int

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "diagram": self.diagram,
            "source_count": self.source_count,
            **self.verdict.to_dict(),
            "stats": self.stats.to_dict(),
        }


class DiagramService:
    """Diagram service orchestrator."""

    def validate(self, diagram: str) -> ValidationVerdict:
        """Validate one diagram."""
        return validate_diagram(diagram)

    def stats(self, diagram: str) -> DiagramStats:
        """Compute entity and relationship counts for one diagram."""
        return compute_stats(diagram)

    def merge(self, diagrams: Sequence[str]) -> str:
        """Merge diagrams from several source documents."""
        return merge_diagrams(diagrams)

    def analyze(self, diagrams: Sequence[str]) -> DiagramReport:
        """
        Merge, validate and measure diagrams for one request.

        Args:
            diagrams: One diagram per source document

        Returns:
            DiagramReport: Merged diagram, verdict and stats

        Raises:
            InvalidArgumentError: If diagrams is not a sequence of strings
        """
        diagram = merge_diagrams(diagrams)
        verdict = validate_diagram(diagram)
        stats = compute_stats(diagram)

        logger.info(
            "Diagram analyzed",
            extra={
                "source_count": len(diagrams),
                "is_valid": verdict.is_valid,
                "total_entities": stats.total_entities,
                "total_relationships": stats.total_relationships,
            },
        )
        return DiagramReport(
            diagram=diagram,
            verdict=verdict,
            stats=stats,
            source_count=len(diagrams),
        )

    def prepare_publication(
        self,
        diagram: str,
        file_name: str,
        now: datetime | None = None,
    ) -> PublicationPayload:
        """
        Build the publication payload for a diagram that passes validation.

        Args:
            diagram: Diagram text
            file_name: Base name for the published file
            now: Timestamp for the file name (defaults to current UTC time)

        Returns:
            PublicationPayload: Path, markdown content and commit message

        Raises:
            DiagramRejectedError: If the diagram is invalid
            InvalidArgumentError: If the file name is empty
        """
        verdict = validate_diagram(diagram)
        if not verdict.is_valid:
            logger.warning(
                "Refusing to publish invalid diagram",
                extra={"file_name": file_name, "errors": list(verdict.errors)},
            )
            raise DiagramRejectedError(
                "Diagram failed validation and cannot be published",
                errors=list(verdict.errors),
            )
        return build_publication_payload(diagram, file_name, now=now)

    def publish(
        self,
        diagram: str,
        file_name: str,
        publisher: DiagramPublisher,
        now: datetime | None = None,
    ) -> PublicationResult:
        """
        Validate a diagram and hand its payload to an external publisher.

        Called by hosts that supply a DiagramPublisher; the HTTP app only
        exposes ``prepare_publication``.

        Args:
            diagram: Diagram text
            file_name: Base name for the published file
            publisher: Storage adapter that performs the upload
            now: Timestamp for the file name

        Returns:
            PublicationResult: Publisher outcome

        Raises:
            DiagramRejectedError: If the diagram is invalid
        """
        payload = self.prepare_publication(diagram, file_name, now=now)
        result = publisher.publish(payload)
        if result.success:
            logger.info("Diagram published", extra={"path": payload.path, "url": result.url})
        else:
            logger.warning(
                "Diagram publication failed",
                extra={"path": payload.path, "error": result.error},
            )
        return result
