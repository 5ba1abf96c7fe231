"""
Fixed-threshold zone classifiers.

Two independent classifiers, each a pure function of a scalar:

Form zone (on ``tsb_percent``)::

    < -30          high_risk
    [-30, -10)     optimal_training
    [-10,   5)     grey_zone
    [  5,  20)     fresh
    >= 20          transition_detraining

ACWR zone::

    < 0.8          low    — insufficient stimulus
    [0.8, 1.5]     safe   — moderate
    > 1.5          high   — reduce load

Intervals are closed on the lower bound and open on the upper bound,
except the ACWR ``safe`` band which includes 1.5.  There is no
hysteresis: every day is classified on its own.

The readiness metric levels (low / medium / high) used by the readiness
summary live here as well.
"""

from __future__ import annotations

import math

from app.engine.errors import InvalidInputError
from app.schemas.readiness import MetricLevel
from app.schemas.training_state import ACWRZone, FormZone

# ======================================================================
# Thresholds
# ======================================================================

_FORM_THRESHOLDS: list[tuple[FormZone, float, float]] = [
    (FormZone.HIGH_RISK, float("-inf"), -30.0),
    (FormZone.OPTIMAL_TRAINING, -30.0, -10.0),
    (FormZone.GREY_ZONE, -10.0, 5.0),
    (FormZone.FRESH, 5.0, 20.0),
    (FormZone.TRANSITION_DETRAINING, 20.0, float("inf")),
]

ACWR_LOW_THRESHOLD = 0.8
ACWR_HIGH_THRESHOLD = 1.5

# (low, high) reference bands for the readiness cards.
METRIC_LEVEL_BANDS: dict[str, tuple[float, float]] = {
    "readiness_score": (60.0, 80.0),
    "vo2max": (35.0, 50.0),
    "power": (1500.0, 2500.0),
}


def _require_finite(value: float, name: str) -> None:
    if value is None or math.isnan(value) or math.isinf(value):
        raise InvalidInputError(f"{name} must be a finite number, got {value!r}")


# ======================================================================
# Classifiers
# ======================================================================


def classify_form(tsb_percent: float) -> FormZone:
    """Map a TSB percentage to its :class:`FormZone`."""
    _require_finite(tsb_percent, "tsb_percent")
    for zone, low, high in _FORM_THRESHOLDS:
        if low <= tsb_percent < high:
            return zone
    return FormZone.TRANSITION_DETRAINING


def classify_acwr(acwr: float) -> ACWRZone:
    """Map an ACWR value to its :class:`ACWRZone`."""
    _require_finite(acwr, "acwr")
    if acwr > ACWR_HIGH_THRESHOLD:
        return ACWRZone.HIGH
    if acwr < ACWR_LOW_THRESHOLD:
        return ACWRZone.LOW
    return ACWRZone.SAFE


def classify_metric_level(value: float, metric: str) -> MetricLevel:
    """Level of a readiness metric (``readiness_score``, ``vo2max`` or ``power``)."""
    try:
        low, high = METRIC_LEVEL_BANDS[metric]
    except KeyError:
        raise InvalidInputError(f"Unknown readiness metric '{metric}'. Available: {sorted(METRIC_LEVEL_BANDS)}") from None
    _require_finite(value, metric)
    if value < low:
        return MetricLevel.LOW
    if value < high:
        return MetricLevel.MEDIUM
    return MetricLevel.HIGH
