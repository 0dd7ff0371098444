"""
Publication payload builder.

Turns diagram text into the file a publisher uploads to external storage:
a markdown document holding a fenced ``mermaid`` block under
``diagrams/<name>_<timestamp>.md``.

Dependencies: datetime, re (stdlib)
System role: Payload preparation for the external publisher
"""

import re
from dataclasses import dataclass
from datetime import datetime, timezone

from legal_diagrams.core.exceptions import InvalidArgumentError

PUBLICATION_DIRECTORY = "diagrams"


@dataclass(frozen=True)
class PublicationPayload:
    """File a publisher should write to external storage."""

    path: str
    content: str
    commit_message: str

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "path": self.path,
            "content": self.content,
            "commit_message": self.commit_message,
        }


def _timestamp_slug(moment: datetime) -> str:
    iso = moment.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return re.sub(r"[:.]", "-", iso.replace("+00:00", "Z"))


def build_publication_payload(
    diagram: str,
    file_name: str,
    now: datetime | None = None,
) -> PublicationPayload:
    """
    Build the markdown payload for publishing a diagram.

    Args:
        diagram: Diagram text (validated by the caller)
        file_name: Human-chosen base name; whitespace runs become underscores
        now: Timestamp for the file name (defaults to current UTC time)

    Returns:
        PublicationPayload: Target path, markdown content and commit message

    Raises:
        InvalidArgumentError: If the file name is empty
    """
    if not file_name or not file_name.strip():
        raise InvalidArgumentError("file_name must not be empty", argument="file_name")

    moment = now or datetime.now(timezone.utc)
    safe_name = re.sub(r"\s+", "_", file_name.strip())
    path = f"{PUBLICATION_DIRECTORY}/{safe_name}_{_timestamp_slug(moment)}.md"

    return PublicationPayload(
        path=path,
        content=f"```mermaid\n{diagram}\n```",
        commit_message=f"Add legal entity extraction diagram: {file_name.strip()}",
    )
