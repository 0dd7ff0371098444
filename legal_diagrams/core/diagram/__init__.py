"""
Diagram engine.

Grammar validation, statistics and merging for the node/edge diagram
language produced by entity extraction. Pure functions over text.
"""

from legal_diagrams.core.diagram.grammar import EntityCategory, GraphOrientation
from legal_diagrams.core.diagram.merger import merge_diagrams
from legal_diagrams.core.diagram.publication import PublicationPayload, build_publication_payload
from legal_diagrams.core.diagram.results import DiagramStats, ValidationVerdict
from legal_diagrams.core.diagram.statistics import compute_stats
from legal_diagrams.core.diagram.validator import validate_diagram

__all__ = [
    "EntityCategory",
    "GraphOrientation",
    "ValidationVerdict",
    "DiagramStats",
    "PublicationPayload",
    "validate_diagram",
    "compute_stats",
    "merge_diagrams",
    "build_publication_payload",
]
