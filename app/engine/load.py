"""
Session load — RPE × duration.

Each RPE level maps to a fixed base load assumed for a 60-minute
reference session.  The session load scales linearly with duration::

    load = RPE_BASE_LOAD[rpe] × duration_minutes / 60

The table is monotonic, so the load never decreases when either RPE or
duration increases.  The value is **not** rounded: rounding here would
leak into CTL / ATL and break the ``tsb == ctl - atl`` identity
downstream.
"""

from __future__ import annotations

from app.engine.errors import InvalidInputError

# Base load for a 60-minute session at each RPE level.
RPE_BASE_LOAD: dict[int, float] = {
    1: 20.0,
    2: 30.0,
    3: 40.0,
    4: 50.0,
    5: 60.0,
    6: 70.0,
    7: 80.0,
    8: 100.0,
    9: 120.0,
    10: 140.0,
}

REFERENCE_SESSION_MINUTES = 60.0


def base_load(rpe: int) -> float:
    """Return the 60-minute base load for *rpe*.

    Raises :class:`InvalidInputError` if *rpe* is not an integer in 1-10.
    """
    if isinstance(rpe, bool) or not isinstance(rpe, int) or rpe not in RPE_BASE_LOAD:
        raise InvalidInputError(f"RPE must be an integer between 1 and 10, got {rpe!r}")
    return RPE_BASE_LOAD[rpe]


def session_load(rpe: int, duration_minutes: float) -> float:
    """Training load of a session of *duration_minutes* at *rpe*.

    A zero duration yields zero load; a negative duration is rejected.
    """
    if duration_minutes < 0:
        raise InvalidInputError(f"Duration must not be negative, got {duration_minutes!r}")
    return base_load(rpe) * duration_minutes / REFERENCE_SESSION_MINUTES
