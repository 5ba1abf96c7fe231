"""
Exponentially weighted moving average over a daily series.

Standard recursive smoothing with time constant ``tau`` (days)::

    alpha     = 1 - exp(-1 / tau)
    state[0]  = initial            (0.0 by default)
    state[i]  = state[i-1] + alpha * (value[i] - state[i-1])

Applied with ``tau = 42`` it yields CTL ("Fitness"), with ``tau = 7``
ATL ("Fatigue").  The output is causal: ``state[i]`` depends only on
``value[0..i]``.

Start convention
----------------
The recursion starts from zero, so early values under-estimate the
athlete's true load.  A single 60-unit day gives::

    CTL = (1 - exp(-1/42)) * 60 ≈ 1.4117
    ATL = (1 - exp(-1/7))  * 60 ≈ 7.9873

This matches the behaviour athletes already see in their history and
is kept deliberately.  Pass ``initial`` to seed the state differently.
"""

from __future__ import annotations

import math
from typing import Sequence

from app.engine.errors import InvalidInputError

CTL_TAU_DAYS = 42.0
ATL_TAU_DAYS = 7.0


def smoothing_factor(tau_days: float) -> float:
    """Return ``alpha = 1 - exp(-1 / tau_days)``."""
    if tau_days <= 0:
        raise InvalidInputError(f"EWMA time constant must be positive, got {tau_days!r}")
    return 1.0 - math.exp(-1.0 / tau_days)


def ewma(values: Sequence[float], tau_days: float, initial: float = 0.0) -> list[float]:
    """Exponentially weighted moving average of *values*.

    Returns one smoothed value per input value.
    """
    alpha = smoothing_factor(tau_days)
    out: list[float] = []
    state = initial
    for value in values:
        state = state + alpha * (value - state)
        out.append(state)
    return out
