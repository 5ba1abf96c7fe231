"""
Readiness endpoints — daily estimates and history summary.
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_readiness_service
from app.schemas.readiness import (
    ReadinessEstimate,
    ReadinessEstimateRequest,
    ReadinessSummary,
    ReadinessSummaryRequest,
)
from app.services.readiness_service import ReadinessService

router = APIRouter()


@router.post(
    "/estimate",
    summary="Estimate VO2max, power and readiness score for one entry.",
    response_model=ReadinessEstimate,
)
def estimate(
    request: ReadinessEstimateRequest,
    service: ReadinessService = Depends(get_readiness_service),
):
    return service.estimate(request.record, birth_date=request.birth_date, as_of=request.as_of)


@router.post(
    "/summary",
    summary="Summarize a readiness history (current, average, min, max).",
    response_model=ReadinessSummary,
)
def summary(
    request: ReadinessSummaryRequest,
    service: ReadinessService = Depends(get_readiness_service),
):
    return service.summary(request.records, birth_date=request.birth_date)
