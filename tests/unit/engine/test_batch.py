"""Tests for the per-athlete batch computation."""

import datetime
import math

import pytest

from app.engine.batch import compute_athlete, compute_many
from app.engine.metrics import TrainingLoadConfig, compute_training_load
from app.schemas.training_session import TrainingSession

D0 = datetime.date(2024, 1, 1)


def _make_rows(n_days: int, rpe: int = 6, minutes: float = 45) -> list[dict]:
    return [
        {"date": (D0 + datetime.timedelta(days=i)).isoformat(), "rpe": rpe, "duration_minutes": minutes}
        for i in range(n_days)
    ]


class TestComputeAthlete:
    def test_valid_rows(self):
        result = compute_athlete("a1", _make_rows(10))
        assert result.ok
        assert len(result.series) == 10
        assert result.summary.days_of_data == 10

    def test_accepts_session_objects(self):
        sessions = [TrainingSession(date=D0, rpe=5, duration_minutes=60)]
        result = compute_athlete("a1", sessions)
        assert result.series[0].load == 60.0

    def test_invalid_row_captured(self):
        rows = _make_rows(3) + [{"date": "2024-01-05", "rpe": 12, "duration_minutes": 30}]
        result = compute_athlete("bad", rows)
        assert not result.ok
        assert result.series == []
        assert result.summary is None
        assert result.error_type == "ValidationError"

    def test_empty_rows(self):
        result = compute_athlete("new", [])
        assert result.ok
        assert result.series == []
        assert result.summary is None

    @pytest.mark.parametrize("rows", [None, 42, "2024-01-01", {"date": "2024-01-01", "rpe": 5}])
    def test_non_list_rows_captured(self, rows):
        result = compute_athlete("bad", rows)
        assert not result.ok
        assert result.error_type == "InvalidInputError"
        assert "bad" in result.error


class TestComputeMany:
    def test_empty_batch(self):
        assert compute_many({}) == {}

    def test_matches_single_athlete_computation(self):
        rows = _make_rows(40, rpe=7, minutes=50)
        results = compute_many({"a1": rows, "a2": _make_rows(5)})
        expected = compute_training_load([TrainingSession.model_validate(r) for r in rows])
        assert results["a1"].series == expected
        assert len(results["a2"].series) == 5

    def test_failure_is_isolated(self):
        athletes = {
            "good": _make_rows(14),
            "bad": [{"date": "2024-01-01", "rpe": 0, "duration_minutes": 30}],
            "also_good": _make_rows(7),
        }
        results = compute_many(athletes, max_workers=2)
        assert list(results) == ["good", "bad", "also_good"]
        assert results["good"].ok
        assert results["also_good"].ok
        assert not results["bad"].ok
        assert "rpe" in results["bad"].error

    def test_missing_rows_do_not_abort_batch(self):
        results = compute_many({"bad": None, "good": _make_rows(5)}, max_workers=2)
        assert list(results) == ["bad", "good"]
        assert not results["bad"].ok
        assert results["good"].ok
        assert len(results["good"].series) == 5

    def test_shared_config(self):
        cfg = TrainingLoadConfig(ctl_tau_days=10.0)
        results = compute_many({"a1": _make_rows(1)}, config=cfg)
        assert results["a1"].series[0].ctl == pytest.approx(45 / 60 * 70 * (1 - math.exp(-1 / 10)))
