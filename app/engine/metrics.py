"""
Derived training load metrics — CTL, ATL, TSB, ramp and ACWR.

This is the single place where the fitness / fatigue / form model is
computed.  Every consumer (athlete dashboard, per-athlete chart, athlete
comparison, batch reports) goes through :func:`compute_training_load`
so that all of them see the same numbers.

Definitions, for every day ``d`` of a dense daily series
-------------------------------------------------------

::

    CTL_d         = EWMA(load, tau=42)[d]
    ATL_d         = EWMA(load, tau=7)[d]
    TSB_d         = CTL_d - ATL_d
    TSB_percent_d = clamp(TSB_d / CTL_d * 100, -40, 40)   (0 if CTL_d <= 0)
    RAMP_d        = CTL_d - CTL_{d-1}                      (0 on the first day)
    ACUTE_d       = mean(load over the trailing 7 days, available days only)
    CHRONIC_d     = mean(load over the trailing 28 days, available days only)
    ACWR_d        = ACUTE_d / CHRONIC_d                    (0 if CHRONIC_d <= 0)

Key design choices
------------------

1. **EWMA for CTL / ATL, rolling mean for ACWR** — CTL / ATL follow the
   textbook impulse-response model, while ACWR keeps the rolling-average
   convention used in sports-science literature.
2. **No rounding** — values are reported at full precision so that
   ``tsb == ctl - atl`` holds exactly.  Presentation layers round.
3. **Guards, not NaN** — a zero CTL or zero chronic load yields 0 rather
   than propagating NaN / infinity to the zone classifiers.
4. **Encapsulated parameters** — time constants and windows live in
   :class:`TrainingLoadConfig`.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Optional, Sequence

from loguru import logger
from pydantic import BaseModel, Field, model_validator

from app.engine.errors import InvalidInputError
from app.engine.ewma import ATL_TAU_DAYS, CTL_TAU_DAYS, ewma
from app.engine.resample import MAX_SERIES_DAYS, build_load_series
from app.engine.zones import classify_acwr, classify_form
from app.schemas.training_session import DailyLoad, TrainingSession
from app.schemas.training_state import TrainingLoadSummary, TrainingState

# ======================================================================
# Configuration
# ======================================================================

ACUTE_WINDOW_DAYS = 7
CHRONIC_WINDOW_DAYS = 28
TSB_PERCENT_LIMIT = 40.0


class TrainingLoadConfig(BaseModel):
    """Parameters of the training load model.

    Different configs can be injected for testing; the service layer
    builds one from the application settings.
    """

    ctl_tau_days: float = Field(CTL_TAU_DAYS, gt=0)
    atl_tau_days: float = Field(ATL_TAU_DAYS, gt=0)
    acute_window_days: int = Field(ACUTE_WINDOW_DAYS, ge=1, le=28)
    chronic_window_days: int = Field(CHRONIC_WINDOW_DAYS, ge=7, le=120)
    tsb_percent_limit: float = Field(TSB_PERCENT_LIMIT, gt=0, le=TSB_PERCENT_LIMIT)
    max_series_days: int = Field(MAX_SERIES_DAYS, ge=1)

    @model_validator(mode="after")
    def _acute_within_chronic(self) -> TrainingLoadConfig:
        if self.acute_window_days > self.chronic_window_days:
            raise ValueError("acute_window_days must not exceed chronic_window_days")
        return self

    @classmethod
    def from_settings(cls, settings) -> TrainingLoadConfig:
        """Build a config from :class:`app.core.config.Settings`."""
        return cls(
            ctl_tau_days=settings.CTL_TAU_DAYS,
            atl_tau_days=settings.ATL_TAU_DAYS,
            acute_window_days=settings.ACWR_ACUTE_DAYS,
            chronic_window_days=settings.ACWR_CHRONIC_DAYS,
            tsb_percent_limit=settings.TSB_PERCENT_LIMIT,
            max_series_days=settings.MAX_SERIES_DAYS,
        )


DEFAULT_CONFIG = TrainingLoadConfig()

# ======================================================================
# Scalar helpers
# ======================================================================


def rolling_mean(values: Sequence[float], window: int) -> list[float]:
    """Trailing mean over at most *window* values ending at each index.

    At the start of the series, where fewer than *window* values are
    available, the mean is taken over the available values only.
    """
    if window < 1:
        raise InvalidInputError(f"Rolling window must be at least 1 day, got {window!r}")
    out: list[float] = []
    for i in range(len(values)):
        start = max(0, i - window + 1)
        chunk = values[start:i + 1]
        out.append(sum(chunk) / len(chunk))
    return out


def tsb_percent(ctl: float, tsb: float, limit: float = TSB_PERCENT_LIMIT) -> float:
    """TSB as a percentage of CTL, clamped to ``[-limit, limit]``."""
    if ctl <= 0:
        return 0.0
    return max(-limit, min(limit, tsb / ctl * 100.0))


def acwr(acute: float, chronic: float) -> float:
    """Acute:chronic ratio, 0 when the chronic mean is not positive."""
    if chronic <= 0:
        return 0.0
    return acute / chronic


# ======================================================================
# Series computation
# ======================================================================


def _check_dense(series: Sequence[DailyLoad]) -> None:
    for prev, cur in zip(series, series[1:]):
        if cur.date - prev.date != datetime.timedelta(days=1):
            raise InvalidInputError(f"Load series must be contiguous and ascending; found {prev.date} followed by "
                                    f"{cur.date}")


def compute_training_states(series: Sequence[DailyLoad],
                            config: Optional[TrainingLoadConfig] = None, ) -> list[TrainingState]:
    """Derive a :class:`TrainingState` for every day of a dense series.

    Args:
        series: Dense, ascending daily loads (see
            :func:`~app.engine.resample.build_load_series`).
        config: Optional :class:`TrainingLoadConfig` override (uses
            ``DEFAULT_CONFIG`` if ``None``).

    Returns:
        One state per input day, in the same order.
    """
    cfg = config or DEFAULT_CONFIG
    _check_dense(series)

    loads = [d.load for d in series]
    ctl = ewma(loads, cfg.ctl_tau_days)
    atl = ewma(loads, cfg.atl_tau_days)
    acute = rolling_mean(loads, cfg.acute_window_days)
    chronic = rolling_mean(loads, cfg.chronic_window_days)

    states: list[TrainingState] = []
    for i, day in enumerate(series):
        tsb = ctl[i] - atl[i]
        pct = tsb_percent(ctl[i], tsb, cfg.tsb_percent_limit)
        ratio = acwr(acute[i], chronic[i])
        states.append(TrainingState(date=day.date, load=day.load, ctl=ctl[i], atl=atl[i], tsb=tsb, tsb_percent=pct,
                                    ramp=ctl[i] - ctl[i - 1] if i > 0 else 0.0, acute_load=acute[i],
                                    chronic_load=chronic[i], acwr=ratio, form_zone=classify_form(pct),
                                    acwr_zone=classify_acwr(ratio), ))
    return states


def compute_training_load(sessions: Iterable[TrainingSession], start: Optional[datetime.date] = None,
                          end: Optional[datetime.date] = None,
                          config: Optional[TrainingLoadConfig] = None, ) -> list[TrainingState]:
    """Full pipeline: sessions → daily series → training states.

    An empty session set yields an empty list.
    """
    cfg = config or DEFAULT_CONFIG
    series = build_load_series(sessions, start=start, end=end, max_days=cfg.max_series_days)
    states = compute_training_states(series, config=cfg)
    if states:
        last = states[-1]
        logger.debug(f"Training load computed over {len(states)} days: ctl={last.ctl:.2f} atl={last.atl:.2f} "
                     f"acwr={last.acwr:.2f}")
    return states


def summarize_training_load(states: Sequence[TrainingState]) -> Optional[TrainingLoadSummary]:
    """Headline values of the most recent day, or ``None`` for an empty series."""
    if not states:
        return None
    last = states[-1]
    return TrainingLoadSummary(as_of=last.date, ctl=last.ctl, atl=last.atl, tsb=last.tsb, tsb_percent=last.tsb_percent,
                               ramp=last.ramp, acute_load=last.acute_load, chronic_load=last.chronic_load,
                               acwr=last.acwr, form_zone=last.form_zone, acwr_zone=last.acwr_zone,
                               days_of_data=len(states), training_days=sum(1 for s in states if s.load > 0), )
