"""Tests for the CTL / ATL / TSB / ACWR training load model.

Pure unit tests: daily series are built in memory, either from
sessions or directly as :class:`DailyLoad` lists.
"""

import datetime
import math

import pytest
from pydantic import ValidationError

from app.core.config import Settings
from app.engine.errors import InvalidInputError
from app.engine.metrics import (
    DEFAULT_CONFIG,
    TrainingLoadConfig,
    acwr,
    compute_training_load,
    compute_training_states,
    rolling_mean,
    summarize_training_load,
    tsb_percent,
)
from app.schemas.training_session import DailyLoad, TrainingSession
from app.schemas.training_state import ACWRZone, FormZone

D0 = datetime.date(2024, 1, 1)


# ======================================================================
# Helpers
# ======================================================================


def _make_series(loads: list[float], start: datetime.date = D0) -> list[DailyLoad]:
    return [DailyLoad(date=start + datetime.timedelta(days=i), load=v) for i, v in enumerate(loads)]


def _make_session(day_offset: int, rpe: int = 5, minutes: float = 60) -> TrainingSession:
    return TrainingSession(date=D0 + datetime.timedelta(days=day_offset), rpe=rpe, duration_minutes=minutes)


# ======================================================================
# TrainingLoadConfig
# ======================================================================


class TestTrainingLoadConfig:
    def test_default_values(self):
        cfg = TrainingLoadConfig()
        assert cfg.ctl_tau_days == 42.0
        assert cfg.atl_tau_days == 7.0
        assert cfg.acute_window_days == 7
        assert cfg.chronic_window_days == 28
        assert cfg.tsb_percent_limit == 40.0
        assert cfg.max_series_days == 3660

    def test_default_config_singleton(self):
        assert DEFAULT_CONFIG == TrainingLoadConfig()

    def test_acute_longer_than_chronic_rejected(self):
        with pytest.raises(ValidationError):
            TrainingLoadConfig(acute_window_days=21, chronic_window_days=14)

    def test_non_positive_tau_rejected(self):
        with pytest.raises(ValidationError):
            TrainingLoadConfig(ctl_tau_days=0)

    def test_from_settings(self):
        settings = Settings(CTL_TAU_DAYS=28.0, ATL_TAU_DAYS=5.0, ACWR_ACUTE_DAYS=5, ACWR_CHRONIC_DAYS=21,
                            MAX_SERIES_DAYS=400)
        cfg = TrainingLoadConfig.from_settings(settings)
        assert cfg.ctl_tau_days == 28.0
        assert cfg.atl_tau_days == 5.0
        assert cfg.acute_window_days == 5
        assert cfg.chronic_window_days == 21
        assert cfg.max_series_days == 400


# ======================================================================
# Scalar helpers
# ======================================================================


class TestRollingMean:
    def test_early_days_use_available_values(self):
        assert rolling_mean([10.0, 20.0, 30.0], 7) == [10.0, 15.0, 20.0]

    def test_full_window(self):
        assert rolling_mean([1.0, 2.0, 3.0, 4.0], 2) == [1.0, 1.5, 2.5, 3.5]

    def test_invalid_window(self):
        with pytest.raises(InvalidInputError):
            rolling_mean([1.0], 0)


class TestTSBPercent:
    @pytest.mark.parametrize(
        "ctl, tsb, expected",
        [
            (0.0, 5.0, 0.0),
            (-1.0, 5.0, 0.0),
            (50.0, 10.0, 20.0),
            (50.0, -10.0, -20.0),
            (10.0, 10.0, 40.0),
            (10.0, -50.0, -40.0),
        ],
    )
    def test_values(self, ctl, tsb, expected):
        assert tsb_percent(ctl, tsb) == pytest.approx(expected)


class TestACWR:
    def test_zero_chronic_gives_zero(self):
        assert acwr(100.0, 0.0) == 0.0

    def test_ratio(self):
        assert acwr(100.0, 50.0) == 2.0


# ======================================================================
# compute_training_states
# ======================================================================


class TestComputeTrainingStates:
    def test_empty_series(self):
        assert compute_training_states([]) == []

    def test_single_day(self):
        [state] = compute_training_states(_make_series([60.0]))
        assert state.load == 60.0
        assert state.ctl == pytest.approx((1 - math.exp(-1 / 42)) * 60)
        assert state.atl == pytest.approx((1 - math.exp(-1 / 7)) * 60)
        assert state.ctl == pytest.approx(1.4117, abs=1e-4)
        assert state.atl == pytest.approx(7.9873, abs=1e-4)
        assert state.ramp == 0.0
        # TSB / CTL is far below -40 % and is clamped
        assert state.tsb_percent == -40.0
        assert state.form_zone == FormZone.HIGH_RISK
        assert state.acute_load == 60.0
        assert state.chronic_load == 60.0
        assert state.acwr == 1.0
        assert state.acwr_zone == ACWRZone.SAFE

    def test_tsb_identity_and_bounds(self):
        loads = [0, 120, 60, 0, 0, 200, 80, 10, 0, 140, 0, 0, 0, 0, 90] * 4
        for s in compute_training_states(_make_series([float(v) for v in loads])):
            assert s.tsb == s.ctl - s.atl
            assert -40.0 <= s.tsb_percent <= 40.0
            assert s.acwr >= 0.0

    def test_ramp_is_ctl_delta(self):
        states = compute_training_states(_make_series([60.0, 0.0, 100.0, 30.0]))
        for prev, cur in zip(states, states[1:]):
            assert cur.ramp == pytest.approx(cur.ctl - prev.ctl)

    def test_zero_loads_give_zero_ratios(self):
        states = compute_training_states(_make_series([0.0] * 10))
        for s in states:
            assert s.ctl == 0.0
            assert s.tsb_percent == 0.0
            assert s.acwr == 0.0
            assert s.form_zone == FormZone.GREY_ZONE
            assert s.acwr_zone == ACWRZone.LOW

    def test_constant_load_converges(self):
        states = compute_training_states(_make_series([60.0] * 200))
        for n in (1, 50, 100, 200):
            assert states[n - 1].ctl == pytest.approx(60 * (1 - math.exp(-n / 42)))
        assert states[-1].ctl == pytest.approx(60.0, rel=0.01)
        assert states[20].atl == pytest.approx(60.0, rel=0.05)
        assert abs(states[-1].tsb) < 1.0
        assert all(s.acwr == pytest.approx(1.0) for s in states)

    def test_acwr_spike(self):
        """7-day mean 100 against a 28-day mean 50 gives ACWR 2.0."""
        loads = [700.0] + [0.0] * 20 + [100.0] * 7
        last = compute_training_states(_make_series(loads))[-1]
        assert last.acute_load == pytest.approx(100.0)
        assert last.chronic_load == pytest.approx(50.0)
        assert last.acwr == pytest.approx(2.0)
        assert last.acwr_zone == ACWRZone.HIGH

    def test_custom_windows(self):
        cfg = TrainingLoadConfig(acute_window_days=2, chronic_window_days=7)
        last = compute_training_states(_make_series([0.0] * 5 + [35.0, 35.0]), config=cfg)[-1]
        assert last.acute_load == 35.0
        assert last.chronic_load == pytest.approx(10.0)
        assert last.acwr == pytest.approx(3.5)

    def test_gap_in_series_rejected(self):
        series = [DailyLoad(date=D0, load=10.0), DailyLoad(date=D0 + datetime.timedelta(days=2), load=10.0)]
        with pytest.raises(InvalidInputError):
            compute_training_states(series)

    def test_unsorted_series_rejected(self):
        with pytest.raises(InvalidInputError):
            compute_training_states(list(reversed(_make_series([10.0, 20.0]))))


# ======================================================================
# compute_training_load / summarize_training_load
# ======================================================================


class TestComputeTrainingLoad:
    def test_empty_sessions(self):
        states = compute_training_load([])
        assert states == []
        assert summarize_training_load(states) is None

    def test_single_session_pipeline(self):
        [state] = compute_training_load([_make_session(0)])
        assert state.date == D0
        assert state.ctl == pytest.approx(1.4117, abs=1e-4)

    def test_acwr_spike_from_sessions(self):
        sessions = [_make_session(0, rpe=10, minutes=300)]
        sessions += [_make_session(d, rpe=8, minutes=60) for d in range(21, 28)]
        states = compute_training_load(sessions)
        assert len(states) == 28
        assert states[-1].acwr == pytest.approx(2.0)
        assert states[-1].acwr_zone == ACWRZone.HIGH

    def test_summary_reflects_last_day(self):
        sessions = [_make_session(0), _make_session(2, rpe=8), _make_session(2, rpe=3, minutes=30)]
        states = compute_training_load(sessions)
        summary = summarize_training_load(states)
        assert summary.as_of == D0 + datetime.timedelta(days=2)
        assert summary.ctl == states[-1].ctl
        assert summary.acwr == states[-1].acwr
        assert summary.days_of_data == 3
        assert summary.training_days == 2

    def test_date_range(self):
        sessions = [_make_session(d) for d in range(30)]
        states = compute_training_load(sessions, start=D0 + datetime.timedelta(days=10))
        assert states[0].date == D0 + datetime.timedelta(days=10)
        assert len(states) == 20

    def test_span_limit_from_config(self):
        sessions = [_make_session(0), _make_session(60)]
        assert len(compute_training_load(sessions, config=TrainingLoadConfig(max_series_days=61))) == 61
        with pytest.raises(InvalidInputError):
            compute_training_load(sessions, config=TrainingLoadConfig(max_series_days=60))
