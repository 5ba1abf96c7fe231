"""
Training session schemas.

A training session is the raw input of the load pipeline: a calendar
day, the athlete's perceived exertion (RPE 1-10) and the session
duration.  Sessions are immutable once recorded.

Invalid RPE or duration is rejected at construction time by pydantic,
never silently mapped to a zero load.
"""

import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.engine.load import session_load


class TrainingSession(BaseModel):
    """A single recorded training session for one athlete."""

    model_config = ConfigDict(frozen=True)

    date: datetime.date = Field(..., description="Calendar day of the session (YYYY-MM-DD)")
    rpe: int = Field(..., ge=1, le=10, description="Rate of perceived exertion (1-10)", )
    duration_minutes: float = Field(..., gt=0, le=1440, description="Session duration in minutes", )

    @property
    def load(self) -> float:
        """Training load of this session (RPE base load scaled by duration)."""
        return session_load(self.rpe, self.duration_minutes)


class DailyLoad(BaseModel):
    """Total training load of one calendar day (zero on rest days)."""

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    load: float = Field(..., ge=0.0, description="Summed load of all sessions that day")
