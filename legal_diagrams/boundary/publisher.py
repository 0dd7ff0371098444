"""
Diagram publishing boundary.

Interface to external storage that receives validated diagrams as
markdown files.

Dependencies: abc (stdlib), legal_diagrams.core.diagram
System role: Publishing adapter interface
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from legal_diagrams.core.diagram.publication import PublicationPayload


@dataclass(frozen=True)
class PublicationResult:
    """Location of a published diagram, or the failure reason."""

    success: bool
    url: str | None = None
    error: str | None = None


class DiagramPublisher(ABC):
    """Uploads a publication payload to external storage."""

    @abstractmethod
    def publish(self, payload: PublicationPayload) -> PublicationResult:
        """Write the payload and return where it landed."""
        pass
