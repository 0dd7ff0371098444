"""
Entity extraction boundary.

Interface to the external language model that reads legal document text
and answers with one diagram in the diagram language.

Dependencies: abc (stdlib)
System role: Model client interface
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class SourceDocument:
    """Named document text sent for entity extraction."""

    file_name: str
    text: str


@dataclass(frozen=True)
class ExtractionResult:
    """Diagram returned by the model, or the reason it could not be produced."""

    success: bool
    diagram: str = ""
    error: str | None = None


class EntityExtractionRequester(ABC):
    """Asks an external model for an entity/relationship diagram."""

    @abstractmethod
    def request_diagram(self, documents: list[SourceDocument]) -> ExtractionResult:
        """Return the model's diagram for the given documents."""
        pass
