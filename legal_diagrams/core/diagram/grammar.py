"""
Diagram grammar definitions.

Closed vocabularies and lexical constants of the diagram language shared by
the validator, the statistics extractor and the merger:

    <diagram>      ::= <header> <body>
    <header>       ::= ("graph" | "flowchart") <orientation>
    <orientation>  ::= "TD" | "LR" | "BT" | "RL"
    <body>         ::= (<group> | <relationship> | <classdef>)*
    <group>        ::= "subgraph" <name> <node>* "end"
    <node>         ::= <identifier> "[" <label> "]" (":::" <category>)?
    <relationship> ::= <identifier> "-->" ("|" <label> "|")? <identifier>
    <classdef>     ::= "classDef" <category> <style-attrs>

Dependencies: re, enum (stdlib)
System role: Shared grammar vocabulary for the diagram engine
"""

import re
from enum import Enum


class EntityCategory(str, Enum):
    """Semantic tag a node may carry."""

    CASE = "case"
    PERSON = "person"
    ORGANISATION = "organisation"
    LEGAL_ISSUE = "legal_issue"
    EVENT = "event"
    DOCUMENT = "document"
    LOCATION = "location"

    @classmethod
    def from_token(cls, token: str) -> "EntityCategory | None":
        """
        Resolve a raw category token found in untrusted text.

        Args:
            token: Text following a category marker

        Returns:
            EntityCategory | None: Matching category, or None when unknown
        """
        try:
            return cls(token)
        except ValueError:
            return None


class GraphOrientation(str, Enum):
    """Layout direction declared in the diagram header."""

    TOP_DOWN = "TD"
    LEFT_RIGHT = "LR"
    BOTTOM_TOP = "BT"
    RIGHT_LEFT = "RL"


ALLOWED_CATEGORIES: tuple[str, ...] = tuple(category.value for category in EntityCategory)

HEADER_KEYWORDS: tuple[str, ...] = ("graph", "flowchart")
DEFAULT_HEADER = f"graph {GraphOrientation.TOP_DOWN.value}"

CATEGORY_MARKER = ":::"
RELATIONSHIP_PREFIX = "--"
RELATIONSHIP_SUFFIXES = frozenset(">|-")
LABEL_OPEN = "["
LABEL_CLOSE = "]"

GROUP_KEYWORD = "subgraph"
GROUP_END_KEYWORD = "end"
CLASSDEF_KEYWORD = "classdef"

# Anchored header match, applied to left-stripped text only
HEADER_RE = re.compile(
    rf"(?P<keyword>{'|'.join(HEADER_KEYWORDS)})[ \t]+"
    rf"(?P<orientation>{'|'.join(orientation.value for orientation in GraphOrientation)})"
    r"(?![A-Za-z0-9_])",
    re.IGNORECASE,
)
GROUP_OPEN_RE = re.compile(rf"^{GROUP_KEYWORD}\s+(?P<name>\w+)", re.IGNORECASE)
GROUP_END_RE = re.compile(rf"^{GROUP_END_KEYWORD}\s*;?$", re.IGNORECASE)
CLASSDEF_RE = re.compile(r"^classDef\s+\w+", re.IGNORECASE)
RELATIONSHIP_RE = re.compile(r"--[>|\-]")


def is_word_char(char: str) -> bool:
    """Return True for characters allowed in identifiers and category tokens."""
    return char.isalnum() or char == "_"


def match_header(text: str) -> re.Match | None:
    """
    Match the graph declaration at the start of a diagram.

    Args:
        text: Diagram text (leading whitespace is ignored)

    Returns:
        re.Match | None: Match exposing ``keyword`` and ``orientation`` groups
    """
    return HEADER_RE.match(text.lstrip())
