"""
Daily resampling of training sessions.

Sessions arrive sparse and in arbitrary order.  The EWMA and rolling
window computations need one value per calendar day, so this module
turns them into a dense :class:`~app.schemas.training_session.DailyLoad`
series:

- the series spans from the first to the last session date, inclusive;
- days without a session get a load of ``0.0``;
- several sessions on the same day **accumulate**.

An empty input produces an empty series, which is a valid state
("no data yet"), not an error.
"""

from __future__ import annotations

import datetime
from collections import defaultdict
from typing import Iterable, Optional

from loguru import logger

from app.engine.errors import InvalidInputError
from app.schemas.training_session import DailyLoad, TrainingSession

# About ten years of daily entries
MAX_SERIES_DAYS = 3660


def _date_range(start: datetime.date, end: datetime.date) -> list[datetime.date]:
    days = (end - start).days
    return [start + datetime.timedelta(days=i) for i in range(days + 1)]


def _densify(load_by_date: dict[datetime.date, float], max_days: int = MAX_SERIES_DAYS) -> list[DailyLoad]:
    if not load_by_date:
        return []
    first, last = min(load_by_date), max(load_by_date)
    span = (last - first).days + 1
    if span > max_days:
        raise InvalidInputError(f"Sessions from {first} to {last} span {span} days; at most {max_days} are allowed")
    return [DailyLoad(date=day, load=load_by_date.get(day, 0.0)) for day in _date_range(first, last)]


def build_load_series(
    sessions: Iterable[TrainingSession],
    start: Optional[datetime.date] = None,
    end: Optional[datetime.date] = None,
    max_days: int = MAX_SERIES_DAYS,
) -> list[DailyLoad]:
    """Resample *sessions* into a dense daily load series.

    Args:
        sessions: Sessions of a single athlete, in any order.
        start: Optional inclusive lower bound on session dates.
        end: Optional inclusive upper bound on session dates.
        max_days: Longest series allowed, first to last day inclusive.

    Returns:
        One :class:`DailyLoad` per day from the earliest to the latest
        retained session date.  Empty if no session is retained.

    Raises:
        InvalidInputError: *start* is after *end*, or the retained
            sessions span more than *max_days* days.
    """
    if start is not None and end is not None and start > end:
        raise InvalidInputError(f"Range start {start} is after range end {end}")

    load_by_date: dict[datetime.date, float] = defaultdict(float)
    for s in sorted(sessions, key=lambda s: s.date):
        if start is not None and s.date < start:
            continue
        if end is not None and s.date > end:
            continue
        load_by_date[s.date] += s.load

    series = _densify(load_by_date, max_days)
    logger.debug(f"Resampled {len(load_by_date)} training days into {len(series)} daily entries")
    return series


def resample_daily_loads(loads: Iterable[DailyLoad], max_days: int = MAX_SERIES_DAYS) -> list[DailyLoad]:
    """Re-densify an existing daily series.

    Duplicate dates are summed and gaps are zero-filled.  Applying this to
    an already-dense series returns an equal series.
    """
    load_by_date: dict[datetime.date, float] = defaultdict(float)
    for entry in loads:
        load_by_date[entry.date] += entry.load
    return _densify(load_by_date, max_days)
