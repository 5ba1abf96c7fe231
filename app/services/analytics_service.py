"""
Training load analytics service.

Builds the load model configuration from the application settings and
translates engine errors into HTTP errors.
"""

from typing import Any, Iterable, Mapping

from fastapi import HTTPException, status

from app.core.config import Settings, settings as default_settings
from app.engine.batch import compute_many
from app.engine.errors import InvalidInputError
from app.engine.metrics import TrainingLoadConfig, compute_training_load, summarize_training_load
from app.schemas.training_state import BatchTrainingLoadResponse, TrainingLoadRequest, TrainingLoadResponse


class AnalyticsService:
    """Service for training load computations."""

    def __init__(self, settings: Settings = default_settings):
        self.settings = settings
        self.config = TrainingLoadConfig.from_settings(settings)

    def training_load(self, request: TrainingLoadRequest) -> TrainingLoadResponse:
        try:
            states = compute_training_load(request.sessions, start=request.start, end=request.end,
                                           config=self.config, )
        except InvalidInputError as e:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
        return TrainingLoadResponse(series=states, summary=summarize_training_load(states))

    def training_load_batch(self, athletes: Mapping[str, Iterable[Mapping[str, Any]]], ) -> BatchTrainingLoadResponse:
        results = compute_many(athletes, config=self.config, max_workers=self.settings.BATCH_MAX_WORKERS)
        return BatchTrainingLoadResponse(results=results)
