"""
Analytics endpoints — training load series, summary and batch.
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_analytics_service
from app.schemas.training_state import (
    BatchTrainingLoadRequest,
    BatchTrainingLoadResponse,
    TrainingLoadRequest,
    TrainingLoadResponse,
)
from app.services.analytics_service import AnalyticsService

router = APIRouter()


@router.post(
    "/training-load",
    summary="Compute the daily CTL / ATL / TSB / ACWR series of one athlete.",
    response_model=TrainingLoadResponse,
)
def compute_training_load(
    request: TrainingLoadRequest,
    service: AnalyticsService = Depends(get_analytics_service),
):
    return service.training_load(request)


@router.post(
    "/training-load/batch",
    summary="Compute the training load of several athletes at once.",
    response_model=BatchTrainingLoadResponse,
)
def compute_training_load_batch(
    request: BatchTrainingLoadRequest,
    service: AnalyticsService = Depends(get_analytics_service),
):
    return service.training_load_batch(request.athletes)
