"""
Result data classes for the diagram engine.

Contains pure data containers for:
- ValidationVerdict: pass/fail plus errors and advisory warnings
- DiagramStats: entity counts by category and relationship count

All containers are immutable and rebuilt from text on every call.
"""

from dataclasses import dataclass, field

from legal_diagrams.core.diagram.grammar import EntityCategory


@dataclass(frozen=True)
class ValidationVerdict:
    """Structured outcome of validating one diagram.

    Errors make the diagram invalid; warnings are advisory only.
    """

    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "is_valid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


def _empty_category_counts() -> dict[EntityCategory, int]:
    return {category: 0 for category in EntityCategory}


@dataclass(frozen=True)
class DiagramStats:
    """Entity and relationship counts for one diagram.

    ``entities_by_type`` always holds every category; its values sum to
    ``total_entities``.
    """

    total_relationships: int = 0
    entities_by_type: dict[EntityCategory, int] = field(default_factory=_empty_category_counts)

    @property
    def total_entities(self) -> int:
        return sum(self.entities_by_type.values())

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "total_entities": self.total_entities,
            "total_relationships": self.total_relationships,
            "entities_by_type": {
                category.value: self.entities_by_type.get(category, 0)
                for category in EntityCategory
            },
        }
