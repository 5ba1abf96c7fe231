"""
Readiness estimator — VO2max, jump power and composite readiness.

Each daily readiness entry (morning resting heart rate + vertical jump)
is turned into three quantities:

    vo2max          = 15.3 × HRmax / RHR,   HRmax = 220 − age
    power           = 2.5 × VJ
    readiness_score = 0.6 × (VJ / 50 × 100) + 0.4 × (60 / RHR × 100)

The readiness score is 100 when both inputs sit exactly on the
reference values (VJ 50 cm, RHR 60 bpm): a higher jump or a lower
resting heart rate pushes it above 100.

Age
---
HRmax needs an age.  When the athlete's birth date is known, the
calendar age on the entry date is used; the configured default (25)
applies **only** when the birth date is unavailable.

Sayers peak power
-----------------
:func:`estimate_peak_power_sayers` computes the Sayers peak power in
watts (``60.7 × VJ + 45.3 × mass − 2055``).  It measures a different
quantity than ``power`` and requires body mass; the two are never used
interchangeably.
"""

from __future__ import annotations

import datetime
from typing import Optional, Sequence

from app.core.config import settings
from app.engine.errors import InvalidInputError
from app.engine.norms import calculate_age
from app.engine.zones import classify_metric_level
from app.schemas.readiness import MetricStats, ReadinessEstimate, ReadinessRecord, ReadinessSummary

# ======================================================================
# Constants
# ======================================================================

VO2MAX_COEFFICIENT = 15.3
HRMAX_INTERCEPT = 220
POWER_PER_CM = 2.5

BASELINE_VERTICAL_JUMP_CM = 50.0
BASELINE_RESTING_HR_BPM = 60.0
VERTICAL_JUMP_WEIGHT = 0.6
RESTING_HR_WEIGHT = 0.4

_SAYERS_JUMP_COEFFICIENT = 60.7
_SAYERS_MASS_COEFFICIENT = 45.3
_SAYERS_INTERCEPT = 2055.0


# ======================================================================
# Single-entry estimators
# ======================================================================


def estimate_vo2max(resting_heart_rate: float, assumed_age: int = 25) -> float:
    """Estimated VO2max (ml/kg/min) from resting heart rate."""
    if resting_heart_rate <= 0:
        raise InvalidInputError(f"Resting heart rate must be positive, got {resting_heart_rate!r}")
    hr_max = HRMAX_INTERCEPT - assumed_age
    if hr_max <= 0:
        raise InvalidInputError(f"Age {assumed_age} gives a non-positive HRmax")
    return VO2MAX_COEFFICIENT * hr_max / resting_heart_rate


def estimate_power(vertical_jump: float) -> float:
    """Simplified jump power index (2.5 × VJ)."""
    if vertical_jump < 0:
        raise InvalidInputError(f"Vertical jump must not be negative, got {vertical_jump!r}")
    return POWER_PER_CM * vertical_jump


def estimate_peak_power_sayers(vertical_jump: float, body_mass_kg: float) -> float:
    """Sayers peak power (W), floored at zero."""
    if vertical_jump < 0:
        raise InvalidInputError(f"Vertical jump must not be negative, got {vertical_jump!r}")
    if body_mass_kg <= 0:
        raise InvalidInputError(f"Body mass must be positive, got {body_mass_kg!r}")
    watts = _SAYERS_JUMP_COEFFICIENT * vertical_jump + _SAYERS_MASS_COEFFICIENT * body_mass_kg - _SAYERS_INTERCEPT
    return max(0.0, watts)


def compute_readiness_score(vertical_jump: float, resting_heart_rate: float,
                            baseline_vj: float = BASELINE_VERTICAL_JUMP_CM,
                            baseline_rhr: float = BASELINE_RESTING_HR_BPM, ) -> float:
    """Composite readiness score (VJ 60 %, RHR 40 %), 100 at baseline."""
    if resting_heart_rate <= 0:
        raise InvalidInputError(f"Resting heart rate must be positive, got {resting_heart_rate!r}")
    if baseline_vj <= 0:
        raise InvalidInputError(f"Baseline vertical jump must be positive, got {baseline_vj!r}")
    vj_score = vertical_jump / baseline_vj * 100.0
    rhr_score = baseline_rhr / resting_heart_rate * 100.0
    return VERTICAL_JUMP_WEIGHT * vj_score + RESTING_HR_WEIGHT * rhr_score


def estimate_readiness(record: ReadinessRecord, birth_date: Optional[datetime.date] = None,
                       as_of: Optional[datetime.date] = None, assumed_age: Optional[int] = None, ) -> ReadinessEstimate:
    """Derive VO2max, power and readiness score for one entry.

    Args:
        record: The validated daily entry.
        birth_date: Athlete's birth date, if known.  Takes precedence
            over *assumed_age*.
        as_of: Date the age is taken on (the entry date by default).
        assumed_age: Age to use when *birth_date* is unknown (defaults
            to ``settings.DEFAULT_ASSUMED_AGE``).
    """
    if birth_date is not None:
        age = calculate_age(birth_date, as_of=as_of or record.date)
    elif assumed_age is not None:
        age = assumed_age
    else:
        age = settings.DEFAULT_ASSUMED_AGE

    return ReadinessEstimate(date=record.date,
                             vo2max=estimate_vo2max(record.resting_heart_rate, assumed_age=age),
                             power=estimate_power(record.vertical_jump),
                             readiness_score=compute_readiness_score(record.vertical_jump,
                                                                     record.resting_heart_rate),
                             assumed_age=age, )


# ======================================================================
# History summary
# ======================================================================


def _metric_stats(current: float, history: Sequence[float], metric: str) -> MetricStats:
    # Zero / missing values are excluded from the history statistics.
    values = [v for v in history if v > 0]
    if not values:
        return MetricStats(current=current, level=classify_metric_level(current, metric))
    return MetricStats(current=current, average=sum(values) / len(values), minimum=min(values), maximum=max(values),
                       level=classify_metric_level(current, metric), )


def summarize_readiness(estimates: Sequence[ReadinessEstimate]) -> ReadinessSummary:
    """Current / average / min / max for each readiness metric.

    ``current`` is taken from the most recent entry.  An empty history
    yields an all-zero summary with ``latest_date=None``.
    """
    if not estimates:
        return ReadinessSummary()

    ordered = sorted(estimates, key=lambda e: e.date)
    latest = ordered[-1]
    return ReadinessSummary(
        latest_date=latest.date,
        record_count=len(ordered),
        readiness_score=_metric_stats(latest.readiness_score, [e.readiness_score for e in ordered],
                                      "readiness_score"),
        vo2max=_metric_stats(latest.vo2max, [e.vo2max for e in ordered], "vo2max"),
        power=_metric_stats(latest.power, [e.power for e in ordered], "power"),
    )
