"""Tests for the form, ACWR and readiness-level classifiers."""

import math

import pytest

from app.engine.errors import InvalidInputError
from app.engine.zones import classify_acwr, classify_form, classify_metric_level
from app.schemas.readiness import MetricLevel
from app.schemas.training_state import ACWRZone, FormZone


class TestClassifyForm:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (-40.0, FormZone.HIGH_RISK),
            (-30.01, FormZone.HIGH_RISK),
            (-30.0, FormZone.OPTIMAL_TRAINING),
            (-20.0, FormZone.OPTIMAL_TRAINING),
            (-10.01, FormZone.OPTIMAL_TRAINING),
            (-10.0, FormZone.GREY_ZONE),
            (0.0, FormZone.GREY_ZONE),
            (4.99, FormZone.GREY_ZONE),
            (5.0, FormZone.FRESH),
            (19.99, FormZone.FRESH),
            (20.0, FormZone.TRANSITION_DETRAINING),
            (40.0, FormZone.TRANSITION_DETRAINING),
        ],
    )
    def test_boundaries(self, value, expected):
        assert classify_form(value) == expected

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_rejected(self, value):
        with pytest.raises(InvalidInputError):
            classify_form(value)

    def test_labels(self):
        assert FormZone.HIGH_RISK.label == "High Risk"
        assert FormZone.TRANSITION_DETRAINING.label == "Transition/Detraining"


class TestClassifyACWR:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (0.0, ACWRZone.LOW),
            (0.79, ACWRZone.LOW),
            (0.8, ACWRZone.SAFE),
            (1.0, ACWRZone.SAFE),
            (1.5, ACWRZone.SAFE),
            (1.51, ACWRZone.HIGH),
            (2.0, ACWRZone.HIGH),
        ],
    )
    def test_boundaries(self, value, expected):
        assert classify_acwr(value) == expected

    def test_nan_rejected(self):
        with pytest.raises(InvalidInputError):
            classify_acwr(math.nan)


class TestClassifyMetricLevel:
    @pytest.mark.parametrize(
        "metric, value, expected",
        [
            ("readiness_score", 59.9, MetricLevel.LOW),
            ("readiness_score", 60.0, MetricLevel.MEDIUM),
            ("readiness_score", 80.0, MetricLevel.HIGH),
            ("vo2max", 34.0, MetricLevel.LOW),
            ("vo2max", 49.725, MetricLevel.MEDIUM),
            ("vo2max", 50.0, MetricLevel.HIGH),
            ("power", 125.0, MetricLevel.LOW),
            ("power", 2000.0, MetricLevel.MEDIUM),
            ("power", 2500.0, MetricLevel.HIGH),
        ],
    )
    def test_levels(self, metric, value, expected):
        assert classify_metric_level(value, metric) == expected

    def test_unknown_metric(self):
        with pytest.raises(InvalidInputError):
            classify_metric_level(50.0, "lactate")
