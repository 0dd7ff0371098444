"""
Diagram grammar validator.

Checks a candidate diagram against the structural and semantic rules of the
diagram language and reports every violation as data. Validation never
raises on malformed content and never modifies the diagram.

Rules, in detection order:
1. Header declares ``graph``/``flowchart`` with a TD, LR, BT or RL orientation (error)
2. Every ``:::category`` tag names a known entity category (error per distinct name)
3. At least one bracketed node label exists (error)
4. Opening and closing label brackets balance (error)
5. Entities are grouped with ``subgraph`` (warning)
6. At least one relationship exists (warning)
7. ``classDef`` styling is present (warning)

Dependencies: legal_diagrams.core.diagram.grammar, legal_diagrams.core.diagram.scanner
System role: Trust gate for model-produced diagrams
"""

import logging

from legal_diagrams.core.diagram.grammar import ALLOWED_CATEGORIES, EntityCategory, match_header
from legal_diagrams.core.diagram.results import ValidationVerdict
from legal_diagrams.core.diagram.scanner import ScanResult, scan_diagram

logger = logging.getLogger(__name__)

EMPTY_DIAGRAM_ERROR = "diagram is empty"
ORIENTATION_ERROR = (
    'Diagram must start with "graph TD", "graph LR", "graph BT", or "graph RL"'
)
NO_ENTITIES_ERROR = "No entities defined in diagram"
UNBALANCED_BRACKETS_ERROR = "Unbalanced brackets in diagram"

NO_GROUPS_WARNING = "No subgraphs found. Consider organizing entities by type."
NO_RELATIONSHIPS_WARNING = "No relationships defined. Diagram may only show isolated entities."
NO_STYLING_WARNING = "No CSS class definitions found. Diagram may not render with colors."


def invalid_category_error(category: str) -> str:
    """Build the error message for an unknown category token."""
    return f"Invalid entity class: {category}. Allowed: {', '.join(ALLOWED_CATEGORIES)}"


def unknown_categories(scan: ScanResult) -> list[str]:
    """
    Distinct unknown category tokens in order of first appearance.

    Args:
        scan: Lexical scan of the diagram

    Returns:
        list[str]: Raw tokens that are not entity categories
    """
    seen: dict[str, None] = {}
    for token in scan.category_tokens:
        if EntityCategory.from_token(token) is None:
            seen.setdefault(token, None)
    return list(seen)


def validate_diagram(text: str | None) -> ValidationVerdict:
    """
    Validate diagram text against the grammar rules.

    Args:
        text: Candidate diagram text (None counts as empty)

    Returns:
        ValidationVerdict: Errors and warnings in detection order
    """
    if not text or not text.strip():
        return ValidationVerdict(errors=(EMPTY_DIAGRAM_ERROR,))

    code = text.strip()
    scan = scan_diagram(code)
    errors: list[str] = []
    warnings: list[str] = []

    if match_header(code) is None:
        errors.append(ORIENTATION_ERROR)

    for category in unknown_categories(scan):
        errors.append(invalid_category_error(category))

    if scan.group_declarations == 0:
        warnings.append(NO_GROUPS_WARNING)

    if scan.relationship_markers == 0:
        warnings.append(NO_RELATIONSHIPS_WARNING)

    if scan.closed_labels == 0:
        errors.append(NO_ENTITIES_ERROR)

    if not scan.brackets_balanced:
        errors.append(UNBALANCED_BRACKETS_ERROR)

    if scan.class_definitions == 0:
        warnings.append(NO_STYLING_WARNING)

    verdict = ValidationVerdict(errors=tuple(errors), warnings=tuple(warnings))
    logger.debug(
        "Diagram validated",
        extra={
            "is_valid": verdict.is_valid,
            "error_count": len(verdict.errors),
            "warning_count": len(verdict.warnings),
        },
    )
    return verdict
