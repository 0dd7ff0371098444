"""
Lexical scanner for diagram text.

Walks the text once, left to right, and records the lexical facts the
validator and statistics extractor need. No backtracking: cost is linear in
the input length whatever the input looks like.

Dependencies: legal_diagrams.core.diagram.grammar
System role: Shared tokenizer for validation and statistics
"""

from dataclasses import dataclass

from legal_diagrams.core.diagram.grammar import (
    CATEGORY_MARKER,
    CLASSDEF_KEYWORD,
    GROUP_KEYWORD,
    LABEL_CLOSE,
    LABEL_OPEN,
    RELATIONSHIP_PREFIX,
    RELATIONSHIP_SUFFIXES,
    is_word_char,
)


@dataclass(frozen=True)
class ScanResult:
    """Lexical facts gathered from one pass over diagram text."""

    category_tokens: tuple[str, ...] = ()
    relationship_markers: int = 0
    open_brackets: int = 0
    close_brackets: int = 0
    closed_labels: int = 0
    group_declarations: int = 0
    class_definitions: int = 0

    @property
    def brackets_balanced(self) -> bool:
        return self.open_brackets == self.close_brackets


def _read_word(text: str, start: int) -> int:
    """Return the index just past the identifier beginning at ``start``."""
    end = start
    while end < len(text) and is_word_char(text[end]):
        end += 1
    return end


def _named_keyword_follows(text: str, position: int) -> bool:
    """True when whitespace then a name follow a keyword ending at ``position``."""
    cursor = position
    while cursor < len(text) and text[cursor].isspace():
        cursor += 1
    return cursor > position and cursor < len(text) and is_word_char(text[cursor])


def scan_diagram(text: str | None) -> ScanResult:
    """
    Scan diagram text into lexical facts.

    Never fails: any string, including garbage, produces a result.

    Args:
        text: Diagram text (None is treated as empty)

    Returns:
        ScanResult: Counts and category tokens in order of appearance
    """
    if not text:
        return ScanResult()

    category_tokens: list[str] = []
    relationship_markers = 0
    open_brackets = 0
    close_brackets = 0
    closed_labels = 0
    group_declarations = 0
    class_definitions = 0
    label_start: int | None = None

    length = len(text)
    index = 0
    while index < length:
        char = text[index]

        if text.startswith(CATEGORY_MARKER, index):
            token_start = index + len(CATEGORY_MARKER)
            token_end = _read_word(text, token_start)
            if token_end > token_start:
                category_tokens.append(text[token_start:token_end])
                index = token_end
            else:
                index += 1
            continue

        if (
            text.startswith(RELATIONSHIP_PREFIX, index)
            and index + 2 < length
            and text[index + 2] in RELATIONSHIP_SUFFIXES
        ):
            relationship_markers += 1
            index += 3
            continue

        if char == LABEL_OPEN:
            open_brackets += 1
            label_start = index + 1
        elif char == LABEL_CLOSE:
            close_brackets += 1
            if label_start is not None and text[label_start:index].strip():
                closed_labels += 1
            label_start = None
        elif is_word_char(char):
            word_end = _read_word(text, index)
            keyword = text[index:word_end].lower()
            if keyword == GROUP_KEYWORD and _named_keyword_follows(text, word_end):
                group_declarations += 1
            elif keyword == CLASSDEF_KEYWORD and _named_keyword_follows(text, word_end):
                class_definitions += 1
            index = word_end
            continue

        index += 1

    return ScanResult(
        category_tokens=tuple(category_tokens),
        relationship_markers=relationship_markers,
        open_brackets=open_brackets,
        close_brackets=close_brackets,
        closed_labels=closed_labels,
        group_declarations=group_declarations,
        class_definitions=class_definitions,
    )
