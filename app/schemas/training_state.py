"""
Training state schemas — the per-day output of the load pipeline.

For every day of a dense load series the engine reports:

- ``ctl``  — Chronic Training Load ("Fitness"), 42-day EWMA
- ``atl``  — Acute Training Load ("Fatigue"), 7-day EWMA
- ``tsb``  — Training Stress Balance ("Form") = ``ctl - atl``
- ``tsb_percent`` — ``tsb / ctl * 100`` clamped to [-40, 40]
- ``ramp`` — day-over-day CTL change
- ``acute_load`` / ``chronic_load`` — 7 / 28-day trailing mean load
- ``acwr`` — ``acute_load / chronic_load`` (0 when chronic is 0)

Zone labels are *operational categories*, not diagnoses.
"""

import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from app.schemas.training_session import TrainingSession


class FormZone(str, Enum):
    """Readiness zone derived from ``tsb_percent``."""

    HIGH_RISK = "high_risk"
    OPTIMAL_TRAINING = "optimal_training"
    GREY_ZONE = "grey_zone"
    FRESH = "fresh"
    TRANSITION_DETRAINING = "transition_detraining"

    @property
    def label(self) -> str:
        return _FORM_ZONE_LABELS[self]


class ACWRZone(str, Enum):
    """Workload risk zone derived from the ACWR."""

    LOW = "low"
    SAFE = "safe"
    HIGH = "high"

    @property
    def label(self) -> str:
        return _ACWR_ZONE_LABELS[self]


_FORM_ZONE_LABELS: dict[FormZone, str] = {
    FormZone.HIGH_RISK: "High Risk",
    FormZone.OPTIMAL_TRAINING: "Optimal Training",
    FormZone.GREY_ZONE: "Grey Zone",
    FormZone.FRESH: "Fresh",
    FormZone.TRANSITION_DETRAINING: "Transition/Detraining",
}

_ACWR_ZONE_LABELS: dict[ACWRZone, str] = {
    ACWRZone.LOW: "Low — insufficient stimulus",
    ACWRZone.SAFE: "Safe/moderate",
    ACWRZone.HIGH: "High — reduce load",
}


class TrainingState(BaseModel):
    """Derived training state for a single day."""

    date: datetime.date
    load: float = Field(..., ge=0.0, description="Daily training load")
    ctl: float = Field(..., description="Chronic Training Load (Fitness)")
    atl: float = Field(..., description="Acute Training Load (Fatigue)")
    tsb: float = Field(..., description="Training Stress Balance (Form) = CTL - ATL")
    tsb_percent: float = Field(..., ge=-40.0, le=40.0, description="TSB as percentage of CTL, clamped", )
    ramp: float = Field(..., description="CTL change versus the previous day")
    acute_load: float = Field(..., ge=0.0, description="Trailing 7-day mean load")
    chronic_load: float = Field(..., ge=0.0, description="Trailing 28-day mean load")
    acwr: float = Field(..., ge=0.0, description="Acute:Chronic Workload Ratio (0 if undefined)")
    form_zone: FormZone
    acwr_zone: ACWRZone


class TrainingLoadSummary(BaseModel):
    """Headline values for the most recent day of a series."""

    as_of: datetime.date
    ctl: float
    atl: float
    tsb: float
    tsb_percent: float
    ramp: float
    acute_load: float
    chronic_load: float
    acwr: float
    form_zone: FormZone
    acwr_zone: ACWRZone
    days_of_data: int = Field(..., description="Number of days in the dense series")
    training_days: int = Field(..., description="Days with non-zero load")


class TrainingLoadResponse(BaseModel):
    """Full training load analysis returned by the analytics endpoint."""

    series: list[TrainingState]
    summary: Optional[TrainingLoadSummary] = Field(None, description="None when no sessions were provided", )


class AthleteLoadResult(BaseModel):
    """Per-athlete outcome of a batch computation.

    Exactly one of ``series`` / ``error`` is meaningful: a failing
    athlete reports its error instead of aborting the whole batch.
    """

    athlete_id: str
    series: list[TrainingState] = Field(default_factory=list)
    summary: Optional[TrainingLoadSummary] = None
    error: Optional[str] = None
    error_type: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# ======================================================================
# Request / response bodies
# ======================================================================


class TrainingLoadRequest(BaseModel):
    """Sessions of one athlete, optionally restricted to a date range."""

    sessions: list[TrainingSession] = Field(default_factory=list)
    start: Optional[datetime.date] = None
    end: Optional[datetime.date] = None


class BatchTrainingLoadRequest(BaseModel):
    """Raw session rows per athlete; each athlete is validated on its own."""

    athletes: dict[str, list[dict[str, Any]]] = Field(default_factory=dict)


class BatchTrainingLoadResponse(BaseModel):
    results: dict[str, AthleteLoadResult] = Field(default_factory=dict)
