"""
Diagram merger.

Combines diagrams produced from several source documents into one diagram.

Merge policy:
- The header comes from the first diagram (``graph TD`` when it has none)
- Groups are identified by name only; the first group with a given name is
  kept verbatim and later groups with that name are dropped entirely
- Top-level relationship lines and ``classDef`` lines are deduplicated by
  their trimmed text

The merger extracts sections line by line and never validates. A malformed
source diagram simply contributes nothing to the sections it lacks; an
unterminated ``subgraph`` block is skipped.

Dependencies: legal_diagrams.core.diagram.grammar
System role: Multi-document diagram consolidation
"""

import logging
import textwrap
from collections.abc import Sequence
from dataclasses import dataclass, field

from legal_diagrams.core.diagram.grammar import (
    CLASSDEF_RE,
    DEFAULT_HEADER,
    GROUP_END_RE,
    GROUP_OPEN_RE,
    HEADER_RE,
    RELATIONSHIP_RE,
    match_header,
)
from legal_diagrams.core.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

INDENT = "    "


@dataclass
class DiagramSections:
    """Mergeable sections extracted from one diagram."""

    groups: list[tuple[str, str]] = field(default_factory=list)
    relationships: list[str] = field(default_factory=list)
    class_definitions: list[str] = field(default_factory=list)
    unterminated_groups: list[str] = field(default_factory=list)


def extract_header(diagram: str) -> str:
    """
    Return the normalized ``graph``/``flowchart`` header line of a diagram.

    Args:
        diagram: Diagram text

    Returns:
        str: Header such as ``flowchart LR``, or ``graph TD`` when absent
    """
    match = match_header(diagram)
    if match is None:
        return DEFAULT_HEADER
    return f"{match.group('keyword')} {match.group('orientation')}"


def _strip_header(line: str) -> str:
    """Drop a leading graph declaration from a one-line diagram statement."""
    header = HEADER_RE.match(line)
    if header is None:
        return line
    return line[header.end():].lstrip(" \t;")


def _match_group_ends(lines: list[str]) -> dict[int, int]:
    """
    Pair each ``subgraph`` line with the ``end`` line closing it.

    Openers still unclosed at end of input have no entry.

    Args:
        lines: Diagram lines

    Returns:
        dict[int, int]: Opener line index -> closing ``end`` line index
    """
    group_ends: dict[int, int] = {}
    open_groups: list[int] = []
    for index, line in enumerate(lines):
        stripped = _strip_header(line.strip())
        if GROUP_OPEN_RE.match(stripped):
            open_groups.append(index)
        elif GROUP_END_RE.match(stripped) and open_groups:
            group_ends[open_groups.pop()] = index
    return group_ends


def extract_sections(diagram: str) -> DiagramSections:
    """
    Split a diagram into group blocks, relationship lines and class definitions.

    Group blocks are returned dedented, with their inner lines otherwise as
    written. Relationship lines inside a group travel with the group block.

    Args:
        diagram: Diagram text, well-formed or not

    Returns:
        DiagramSections: Sections in order of appearance
    """
    sections = DiagramSections()
    lines = diagram.splitlines()
    group_ends = _match_group_ends(lines)

    index = 0
    while index < len(lines):
        stripped = _strip_header(lines[index].strip())

        opener = GROUP_OPEN_RE.match(stripped)
        if opener:
            end = group_ends.get(index)
            if end is None:
                sections.unterminated_groups.append(opener.group("name"))
                index += 1
                continue
            block_lines = [line.rstrip() for line in lines[index : end + 1]]
            if stripped != block_lines[0].strip():
                block_lines[0] = stripped
            block = "\n".join(block_lines)
            sections.groups.append((opener.group("name"), textwrap.dedent(block)))
            index = end + 1
            continue

        if CLASSDEF_RE.match(stripped):
            sections.class_definitions.append(stripped)
        elif RELATIONSHIP_RE.search(stripped):
            sections.relationships.append(stripped)

        index += 1

    return sections


def _ensure_diagram_sequence(diagrams: object) -> None:
    if isinstance(diagrams, (str, bytes)) or not isinstance(diagrams, Sequence):
        raise InvalidArgumentError(
            "diagrams must be a sequence of diagram strings",
            argument="diagrams",
            details={"received_type": type(diagrams).__name__},
        )
    for position, diagram in enumerate(diagrams):
        if not isinstance(diagram, str):
            raise InvalidArgumentError(
                f"diagram at position {position} is not a string",
                argument="diagrams",
                details={"position": position, "received_type": type(diagram).__name__},
            )


def merge_diagrams(diagrams: Sequence[str]) -> str:
    """
    Merge an ordered collection of diagrams into one diagram.

    Args:
        diagrams: Diagram texts, one per source document

    Returns:
        str: Merged diagram; ``""`` for no input, the diagram itself for one

    Raises:
        InvalidArgumentError: If ``diagrams`` is not a sequence of strings
    """
    _ensure_diagram_sequence(diagrams)

    if not diagrams:
        return ""
    if len(diagrams) == 1:
        return diagrams[0]

    header = extract_header(diagrams[0])
    groups: dict[str, str] = {}
    relationships: dict[str, None] = {}
    class_definitions: dict[str, None] = {}

    for position, diagram in enumerate(diagrams):
        sections = extract_sections(diagram)

        if sections.unterminated_groups:
            logger.warning(
                "Skipping unterminated groups during merge",
                extra={"position": position, "groups": sections.unterminated_groups},
            )

        for name, block in sections.groups:
            if name in groups:
                logger.debug(
                    "Dropping duplicate group",
                    extra={"position": position, "group": name},
                )
                continue
            groups[name] = block

        for relationship in sections.relationships:
            relationships.setdefault(relationship, None)
        for class_definition in sections.class_definitions:
            class_definitions.setdefault(class_definition, None)

    parts = [f"{header}\n"]
    for block in groups.values():
        parts.append(f"{textwrap.indent(block, INDENT)}\n\n")
    for relationship in relationships:
        parts.append(f"{INDENT}{relationship}\n")
    parts.append("\n")
    for class_definition in class_definitions:
        parts.append(f"{INDENT}{class_definition}\n")

    logger.info(
        "Merged diagrams",
        extra={
            "source_count": len(diagrams),
            "group_count": len(groups),
            "relationship_count": len(relationships),
            "class_definition_count": len(class_definitions),
        },
    )
    return "".join(parts)
