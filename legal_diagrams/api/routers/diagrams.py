"""
Diagram API endpoints.

Routes:
- POST /diagrams/validate - Validate one diagram and report its statistics
- POST /diagrams/stats - Count entities and relationships in one diagram
- POST /diagrams/merge - Merge diagrams from several source documents
- POST /diagrams/analyze - Merge, validate and measure in one call
- POST /diagrams/publication - Build the publication payload for a valid diagram

Every route is rate limited per client host.

Dependencies: legal_diagrams.application.services.diagram_service, legal_diagrams.models.diagram
System role: Diagram validation and merge HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from legal_diagrams.api.deps import enforce_rate_limit, get_diagram_service
from legal_diagrams.api.error_handling import handle_diagram_errors
from legal_diagrams.application.services import DiagramService
from legal_diagrams.models.diagram import (
    AnalysisResponse,
    DiagramRequest,
    MergeRequest,
    MergeResponse,
    PublicationRequest,
    PublicationResponse,
    StatsResponse,
    ValidationResponse,
)
from legal_diagrams.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/diagrams",
    tags=["diagrams"],
    dependencies=[Depends(enforce_rate_limit)],
)


@router.post("/validate", response_model=ValidationResponse)
@handle_diagram_errors
async def validate_diagram(
    request: DiagramRequest,
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> ValidationResponse:
    """
    Validate a diagram against the grammar rules.

    Statistics are computed even when the diagram is invalid so the caller
    can show partial information.

    Args:
        request: Diagram to validate
        diagram_service: Injected diagram orchestrator

    Returns:
        ValidationResponse: Verdict, errors, warnings and statistics
    """
    verdict = diagram_service.validate(request.diagram)
    stats = diagram_service.stats(request.diagram)

    if not verdict.is_valid:
        log_with_context(
            logger,
            logging.INFO,
            "Diagram failed validation",
            errors=verdict.errors,
            diagram_preview=request.diagram[:200],
        )

    return ValidationResponse(**verdict.to_dict(), stats=StatsResponse(**stats.to_dict()))


@router.post("/stats", response_model=StatsResponse)
@handle_diagram_errors
async def diagram_stats(
    request: DiagramRequest,
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> StatsResponse:
    """Count entities by category and relationships in a diagram."""
    return StatsResponse(**diagram_service.stats(request.diagram).to_dict())


@router.post("/merge", response_model=MergeResponse)
@handle_diagram_errors
async def merge_diagrams(
    request: MergeRequest,
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> MergeResponse:
    """
    Merge diagrams from several source documents.

    Merging is best effort: a malformed source diagram contributes nothing
    to the sections it lacks instead of failing the request. The first group
    with a given name wins; relationship order is not guaranteed.
    """
    return MergeResponse(diagram=diagram_service.merge(request.diagrams))


@router.post("/analyze", response_model=AnalysisResponse)
@handle_diagram_errors
async def analyze_diagrams(
    request: MergeRequest,
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> AnalysisResponse:
    """Merge diagrams, then validate and measure the merged result."""
    report = diagram_service.analyze(request.diagrams)
    return AnalysisResponse(
        diagram=report.diagram,
        source_count=report.source_count,
        **report.verdict.to_dict(),
        stats=StatsResponse(**report.stats.to_dict()),
    )


@router.post("/publication", response_model=PublicationResponse)
@handle_diagram_errors
async def prepare_publication(
    request: PublicationRequest,
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> PublicationResponse:
    """
    Build the markdown payload a publisher uploads for a diagram.

    Raises:
        HTTPException(400): The diagram fails validation or the file name is blank
    """
    payload = diagram_service.prepare_publication(request.diagram, request.file_name)
    return PublicationResponse(**payload.to_dict())
