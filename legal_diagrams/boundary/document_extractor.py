"""
Document text extraction boundary.

Turns uploaded document bytes into plain UTF-8 text. Binary formats are
handled by external implementations; only plain text is decoded here.

Dependencies: abc (stdlib)
System role: Upload -> text adapter interface
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import PurePath

SUPPORTED_EXTENSIONS = frozenset({"txt", "pdf", "docx"})


@dataclass(frozen=True)
class ExtractedDocument:
    """Plain text extracted from one uploaded document, or the failure reason."""

    file_name: str
    text: str = ""
    success: bool = True
    error: str | None = None

    @classmethod
    def failed(cls, file_name: str, error: str) -> "ExtractedDocument":
        return cls(file_name=file_name, text="", success=False, error=error)


def file_extension(file_name: str) -> str:
    """Lower-cased extension without the dot ("" when absent)."""
    return PurePath(file_name.lower()).suffix.lstrip(".")


def is_supported_file_type(file_name: str) -> bool:
    """Return True for document types the extraction pipeline accepts."""
    return file_extension(file_name) in SUPPORTED_EXTENSIONS


class DocumentTextExtractor(ABC):
    """Extracts plain text from raw document bytes."""

    @abstractmethod
    def extract(self, content: bytes, file_name: str) -> ExtractedDocument:
        """Extract text, reporting failures in the result instead of raising."""
        pass


class PlainTextExtractor(DocumentTextExtractor):
    """Extractor for ``.txt`` documents."""

    def extract(self, content: bytes, file_name: str) -> ExtractedDocument:
        """
        Decode a text document as UTF-8.

        Args:
            content: Raw document bytes
            file_name: Original file name

        Returns:
            ExtractedDocument: Decoded text, or a failure for other types or bad bytes
        """
        extension = file_extension(file_name)
        if extension != "txt":
            return ExtractedDocument.failed(file_name, f"Unsupported file type: .{extension}")

        try:
            text = content.decode("utf-8")
        except UnicodeDecodeError as e:
            return ExtractedDocument.failed(file_name, f"Failed to read TXT file: {e}")

        return ExtractedDocument(file_name=file_name, text=text)
