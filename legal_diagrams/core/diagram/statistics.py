"""
Diagram statistics extractor.

Purely lexical counts over diagram text: how many nodes carry each entity
category tag and how many relationship markers appear. Works on any text,
valid diagram or not, and never raises.

Dependencies: legal_diagrams.core.diagram.scanner
System role: Reporting counts for diagrams regardless of validity
"""

from legal_diagrams.core.diagram.grammar import EntityCategory
from legal_diagrams.core.diagram.results import DiagramStats
from legal_diagrams.core.diagram.scanner import scan_diagram


def compute_stats(text: str | None) -> DiagramStats:
    """
    Count entities by category and relationships in diagram text.

    Repeated tags on the same node are all counted; unknown category tokens
    are ignored. A tag counts only when its whole token is a category name,
    so ``:::personnel`` is not a person (substring counting would say it is).

    Args:
        text: Diagram text (None or empty yields all-zero stats)

    Returns:
        DiagramStats: Counts for all seven categories plus relationships
    """
    scan = scan_diagram(text)

    entities_by_type = {category: 0 for category in EntityCategory}
    for token in scan.category_tokens:
        category = EntityCategory.from_token(token)
        if category is not None:
            entities_by_type[category] += 1

    return DiagramStats(
        total_relationships=scan.relationship_markers,
        entities_by_type=entities_by_type,
    )
