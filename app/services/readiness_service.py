"""
Readiness service.

Per-entry estimates and history summaries; nothing is stored.
"""

import datetime
from typing import Optional

from fastapi import HTTPException, status

from app.core.config import Settings, settings as default_settings
from app.engine.errors import InvalidInputError
from app.engine.readiness import estimate_readiness, summarize_readiness
from app.schemas.readiness import ReadinessEstimate, ReadinessRecord, ReadinessSummary


class ReadinessService:
    """Service for readiness estimates."""

    def __init__(self, settings: Settings = default_settings):
        self.assumed_age = settings.DEFAULT_ASSUMED_AGE

    def estimate(self, record: ReadinessRecord, birth_date: Optional[datetime.date] = None,
                 as_of: Optional[datetime.date] = None, ) -> ReadinessEstimate:
        try:
            return estimate_readiness(record, birth_date=birth_date, as_of=as_of, assumed_age=self.assumed_age)
        except InvalidInputError as e:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    def summary(self, records: list[ReadinessRecord],
                birth_date: Optional[datetime.date] = None, ) -> ReadinessSummary:
        estimates = [self.estimate(r, birth_date=birth_date) for r in records]
        return summarize_readiness(estimates)
