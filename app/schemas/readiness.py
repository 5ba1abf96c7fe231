"""
Daily readiness schemas.

Athletes record a morning resting heart rate and a vertical jump.  From
these the engine derives three *distinct* quantities:

    vo2max          = 15.3 × (220 − age) / resting_heart_rate
    power           = 2.5 × vertical_jump
    readiness_score = 0.6 × (VJ / 50 × 100) + 0.4 × (60 / RHR × 100)

``power`` is a simplified jump-power index and is **not** the Sayers
peak power (``60.7 × VJ + 45.3 × mass − 2055``); the two are reported
under different names and never substituted for one another.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MetricLevel(str, Enum):
    """Coarse level of a readiness metric against fixed reference bands."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ReadinessRecord(BaseModel):
    """One daily readiness entry (one per athlete per date)."""

    model_config = ConfigDict(frozen=True)

    date: datetime.date = Field(..., description="Calendar date of the entry (YYYY-MM-DD)")
    resting_heart_rate: int = Field(..., ge=30, le=220, description="Morning resting heart rate (bpm)", )
    vertical_jump: float = Field(..., gt=0.0, le=200.0, description="Vertical jump height (cm)", )


class ReadinessEstimate(BaseModel):
    """Quantities derived from a single :class:`ReadinessRecord`."""

    date: datetime.date
    vo2max: float = Field(..., description="Estimated VO2max (ml/kg/min)")
    power: float = Field(..., description="Simplified jump power index (2.5 × VJ)")
    readiness_score: float = Field(..., description="Composite readiness score (100 = baseline)")
    assumed_age: int = Field(..., description="Age used for the HRmax estimate")


class MetricStats(BaseModel):
    """Current value and history statistics for one readiness metric."""

    current: float = 0.0
    average: float = 0.0
    minimum: float = 0.0
    maximum: float = 0.0
    level: MetricLevel = MetricLevel.LOW


class ReadinessSummary(BaseModel):
    """Readiness history summary returned to the reporting layer."""

    latest_date: Optional[datetime.date] = Field(None, description="Date of the most recent record")
    record_count: int = 0
    readiness_score: MetricStats = Field(default_factory=MetricStats)
    vo2max: MetricStats = Field(default_factory=MetricStats)
    power: MetricStats = Field(default_factory=MetricStats)


# ======================================================================
# Request bodies
# ======================================================================


class ReadinessEstimateRequest(BaseModel):
    record: ReadinessRecord
    birth_date: Optional[datetime.date] = None
    as_of: Optional[datetime.date] = None


class ReadinessSummaryRequest(BaseModel):
    """Readiness history of one athlete (any order)."""

    records: list[ReadinessRecord] = Field(default_factory=list)
    birth_date: Optional[datetime.date] = None
