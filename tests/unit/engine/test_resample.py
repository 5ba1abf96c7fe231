"""Tests for daily resampling of training sessions."""

import datetime

import pytest

from app.engine.errors import InvalidInputError
from app.engine.resample import MAX_SERIES_DAYS, build_load_series, resample_daily_loads
from app.schemas.training_session import DailyLoad, TrainingSession

D0 = datetime.date(2024, 1, 1)


# ======================================================================
# Helpers
# ======================================================================


def _make_session(day_offset: int, rpe: int = 5, minutes: float = 60) -> TrainingSession:
    return TrainingSession(date=D0 + datetime.timedelta(days=day_offset), rpe=rpe, duration_minutes=minutes)


def _make_series(loads: list[float], start: datetime.date = D0) -> list[DailyLoad]:
    return [DailyLoad(date=start + datetime.timedelta(days=i), load=v) for i, v in enumerate(loads)]


# ======================================================================
# build_load_series
# ======================================================================


class TestBuildLoadSeries:
    def test_empty_input_gives_empty_series(self):
        assert build_load_series([]) == []

    def test_single_session(self):
        series = build_load_series([_make_session(0)])
        assert series == [DailyLoad(date=D0, load=60.0)]

    def test_gaps_are_zero_filled(self):
        series = build_load_series([_make_session(0), _make_session(3, rpe=8)])
        assert [d.date for d in series] == [D0 + datetime.timedelta(days=i) for i in range(4)]
        assert [d.load for d in series] == [60.0, 0.0, 0.0, 100.0]

    def test_same_day_sessions_accumulate(self):
        series = build_load_series([_make_session(0, rpe=5, minutes=60), _make_session(0, rpe=8, minutes=30)])
        assert len(series) == 1
        assert series[0].load == pytest.approx(60.0 + 50.0)

    def test_input_order_does_not_matter(self):
        sessions = [_make_session(5), _make_session(0), _make_session(2, rpe=9)]
        assert build_load_series(sessions) == build_load_series(list(reversed(sessions)))

    def test_series_is_dense_and_ascending(self):
        series = build_load_series([_make_session(10), _make_session(0), _make_session(4)])
        for prev, cur in zip(series, series[1:]):
            assert cur.date - prev.date == datetime.timedelta(days=1)

    def test_range_filter(self):
        sessions = [_make_session(i) for i in range(10)]
        series = build_load_series(sessions, start=D0 + datetime.timedelta(days=2),
                                   end=D0 + datetime.timedelta(days=5))
        assert series[0].date == D0 + datetime.timedelta(days=2)
        assert series[-1].date == D0 + datetime.timedelta(days=5)
        assert len(series) == 4

    def test_range_excluding_everything(self):
        series = build_load_series([_make_session(0)], start=D0 + datetime.timedelta(days=1))
        assert series == []

    def test_inverted_range_rejected(self):
        with pytest.raises(InvalidInputError):
            build_load_series([_make_session(0)], start=D0 + datetime.timedelta(days=1), end=D0)

    def test_span_limit_is_inclusive(self):
        series = build_load_series([_make_session(0), _make_session(9)], max_days=10)
        assert len(series) == 10

        with pytest.raises(InvalidInputError):
            build_load_series([_make_session(0), _make_session(10)], max_days=10)

    def test_default_span_limit(self):
        sessions = [_make_session(0), _make_session(MAX_SERIES_DAYS)]
        with pytest.raises(InvalidInputError):
            build_load_series(sessions)

    def test_span_measured_after_range_filter(self):
        sessions = [_make_session(0), _make_session(5), _make_session(20000)]
        series = build_load_series(sessions, end=D0 + datetime.timedelta(days=5), max_days=10)
        assert len(series) == 6


# ======================================================================
# resample_daily_loads
# ======================================================================


class TestResampleDailyLoads:
    def test_idempotent_on_dense_series(self):
        series = _make_series([60.0, 0.0, 30.0, 100.0])
        assert resample_daily_loads(series) == series
        assert resample_daily_loads(resample_daily_loads(series)) == series

    def test_duplicates_summed_and_gaps_filled(self):
        loads = [
            DailyLoad(date=D0, load=10.0),
            DailyLoad(date=D0, load=5.0),
            DailyLoad(date=D0 + datetime.timedelta(days=2), load=7.0),
        ]
        assert resample_daily_loads(loads) == _make_series([15.0, 0.0, 7.0])

    def test_empty(self):
        assert resample_daily_loads([]) == []

    def test_span_limit(self):
        loads = [DailyLoad(date=D0, load=1.0), DailyLoad(date=D0 + datetime.timedelta(days=30), load=1.0)]
        with pytest.raises(InvalidInputError):
            resample_daily_loads(loads, max_days=30)
