"""
Biomotor test schemas.

A biomotor test result (sprint time, jump height, 1RM, ...) is judged
against a **norm table**: for every ``(test_id, sex, age_bracket)`` the
table holds five ordered bands, from ``very_low`` to ``very_good``.

Categories, sexes, age brackets and tiers are closed enums, so an
unknown string fails when the model is built rather than deep inside a
lookup.
"""

from __future__ import annotations

from enum import Enum
import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TestCategory(str, Enum):
    """Biomotor ability a test measures."""

    __test__ = False  # not a pytest class

    STRENGTH = "strength"
    SPEED = "speed"
    ENDURANCE = "endurance"
    FLEXIBILITY = "flexibility"
    POWER = "power"
    AGILITY = "agility"


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"


class AgeBracket(str, Enum):
    """Age group used to select norms.

    * ``youth``        — under 18
    * ``young_adult``  — 18-25
    * ``adult``        — 26-35
    * ``senior``       — over 35
    """

    YOUTH = "youth"
    YOUNG_ADULT = "young_adult"
    ADULT = "adult"
    SENIOR = "senior"


class NormTier(str, Enum):
    """Five ordered performance tiers (worst first)."""

    VERY_LOW = "very_low"
    LOW = "low"
    FAIR = "fair"
    GOOD = "good"
    VERY_GOOD = "very_good"

    @property
    def rank(self) -> int:
        """0 for ``very_low`` up to 4 for ``very_good``."""
        return list(NormTier).index(self)


class BiomotorTest(BaseModel):
    """Catalog entry describing one biomotor test."""

    model_config = ConfigDict(frozen=True)

    test_id: str = Field(..., description="Unique slug, e.g. 'sprint_30m'")
    name: str = Field(..., description="Human-readable name")
    category: TestCategory
    unit: str
    description: str = ""
    higher_is_better: bool = Field(..., description="False for timed tests (lower is better)")
    relative_to_body_weight: bool = Field(False, description="Result is divided by body weight before evaluation (1RM tests)", )
    dynamometer: bool = False


class BiomotorTestResult(BaseModel):
    """A recorded test result for one athlete."""

    model_config = ConfigDict(frozen=True)

    category: TestCategory
    test_id: str
    raw_value: float = Field(..., allow_inf_nan=False)
    body_weight_at_test: Optional[float] = Field(None, gt=0.0, le=500.0, description="Body weight (kg) on test day", )


class NormRange(BaseModel):
    """Five ``(low, high)`` bands for one test / sex / age bracket."""

    model_config = ConfigDict(frozen=True)

    very_low: tuple[float, float]
    low: tuple[float, float]
    fair: tuple[float, float]
    good: tuple[float, float]
    very_good: tuple[float, float]

    def band(self, tier: NormTier) -> tuple[float, float]:
        return getattr(self, tier.value)

    def scaled(self, factor: float) -> NormRange:
        """Return a new range with every bound multiplied by *factor*."""
        return NormRange(**{
            tier.value: (self.band(tier)[0] * factor, self.band(tier)[1] * factor) for tier in NormTier
        })


class NormTable(BaseModel):
    """Versioned lookup ``(test_id, sex, age_bracket) -> NormRange``."""

    version: str
    entries: dict[str, dict[Sex, dict[AgeBracket, NormRange]]] = Field(default_factory=dict)

    def get(self, test_id: str, sex: Sex, bracket: AgeBracket) -> Optional[NormRange]:
        """Return the norm range, or ``None`` if the key is unknown."""
        return self.entries.get(test_id, {}).get(sex, {}).get(bracket)

    def test_ids(self) -> list[str]:
        return sorted(self.entries.keys())


class TierEvaluation(BaseModel):
    """Outcome of evaluating one test result against the norm table."""

    test_id: str
    category: TestCategory
    sex: Sex
    age_bracket: AgeBracket
    raw_value: float
    evaluated_value: float = Field(..., description="Raw value, or raw / body weight for relative tests", )
    higher_is_better: bool
    tier: NormTier
    norm_table_version: str



class BiomotorEvaluateRequest(BaseModel):
    result: BiomotorTestResult
    sex: Sex
    birth_date: datetime.date
    as_of: Optional[datetime.date] = Field(None, description="Test date (defaults to today)")
