"""
Diagram domain models and schemas.

Request/response schemas for diagram validation, statistics, merging and
publication.

Dependencies: pydantic
System role: Diagram API contracts
"""

from pydantic import BaseModel, Field

from legal_diagrams.core.diagram.grammar import ALLOWED_CATEGORIES


class DiagramRequest(BaseModel):
    """Request schema carrying one diagram."""

    diagram: str = Field(description="Diagram text to validate or measure")


class MergeRequest(BaseModel):
    """Request schema carrying one diagram per source document."""

    diagrams: list[str] = Field(description="Diagrams in source document order")


class PublicationRequest(BaseModel):
    """Request schema for preparing a diagram for publication."""

    diagram: str = Field(description="Diagram text to publish")
    file_name: str = Field(min_length=1, description="Base name of the published file")


class StatsResponse(BaseModel):
    """Entity and relationship counts."""

    total_entities: int = Field(description="Nodes tagged with a known category")
    total_relationships: int = Field(description="Relationship markers found")
    entities_by_type: dict[str, int] = Field(
        description=f"Counts per category ({', '.join(ALLOWED_CATEGORIES)})"
    )


class ValidationResponse(BaseModel):
    """Validation verdict with statistics."""

    is_valid: bool
    errors: list[str] = Field(default_factory=list, description="Rule violations")
    warnings: list[str] = Field(default_factory=list, description="Advisory findings")
    stats: StatsResponse


class MergeResponse(BaseModel):
    """Merged diagram."""

    diagram: str = Field(description="Merged diagram text")


class AnalysisResponse(ValidationResponse):
    """Merged diagram with its verdict and statistics."""

    diagram: str = Field(description="Merged diagram text")
    source_count: int = Field(description="Number of diagrams merged")


class PublicationResponse(BaseModel):
    """File a publisher should write."""

    path: str = Field(description="Target path in external storage")
    content: str = Field(description="Markdown content with a fenced diagram")
    commit_message: str = Field(description="Message recorded with the upload")
