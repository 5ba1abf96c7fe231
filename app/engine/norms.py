"""
Norm-referenced evaluation of biomotor test results.

A result is placed in one of five tiers by comparing it with the norm
bands for the athlete's sex and age bracket.

Higher-is-better tests (jumps, reps, distances) walk the band **lower**
bounds from ``very_good`` downwards and stop at the first band whose
lower bound the value reaches.  Lower-is-better tests (sprint and
agility times) walk the band **upper** bounds the same way.  A value
below every band falls through to ``very_low``.

Relative tests (1RM lifts) are evaluated on ``raw / body weight``.
"""

from __future__ import annotations

import datetime
import math
from typing import Optional

from loguru import logger

from app.biomotor.catalog import BIOMOTOR_TESTS, DEFAULT_NORM_TABLE
from app.engine.errors import InvalidInputError, UnknownTestError
from app.schemas.biomotor import (
    AgeBracket,
    BiomotorTest,
    BiomotorTestResult,
    NormTable,
    NormTier,
    Sex,
    TierEvaluation,
)

# Best tier first
_TIERS_DESCENDING: list[NormTier] = list(reversed(NormTier))


# ======================================================================
# Age
# ======================================================================


def calculate_age(birth_date: datetime.date, as_of: Optional[datetime.date] = None) -> int:
    """Whole years between *birth_date* and *as_of* (today by default)."""
    as_of = as_of or datetime.date.today()
    if birth_date > as_of:
        raise InvalidInputError(f"Birth date {birth_date} is after {as_of}")
    age = as_of.year - birth_date.year
    if (as_of.month, as_of.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def age_bracket_for_age(age: int) -> AgeBracket:
    if age < 0:
        raise InvalidInputError(f"Age must not be negative, got {age!r}")
    if age < 18:
        return AgeBracket.YOUTH
    if age <= 25:
        return AgeBracket.YOUNG_ADULT
    if age <= 35:
        return AgeBracket.ADULT
    return AgeBracket.SENIOR


def age_bracket(birth_date: datetime.date, as_of: Optional[datetime.date] = None) -> AgeBracket:
    """Age bracket of an athlete born on *birth_date*, on *as_of*."""
    return age_bracket_for_age(calculate_age(birth_date, as_of))


# ======================================================================
# Tier classification
# ======================================================================


def classify(test_id: str, value: float, sex: Sex, bracket: AgeBracket, higher_is_better: bool,
             table: NormTable = DEFAULT_NORM_TABLE, ) -> NormTier:
    """Tier of *value* for *test_id* in the given sex / age bracket.

    Raises:
        UnknownTestError: the table has no norms for this key.
        InvalidInputError: *value* is NaN or infinite.
    """
    if value is None or not math.isfinite(value):
        raise InvalidInputError(f"Test '{test_id}' value must be a finite number, got {value!r}")

    norms = table.get(test_id, sex, bracket)
    if norms is None:
        raise UnknownTestError(f"No norms for test '{test_id}' ({sex.value}, {bracket.value}) "
                               f"in norm table {table.version}")

    for tier in _TIERS_DESCENDING[:-1]:
        low, high = norms.band(tier)
        if higher_is_better and value >= low:
            return tier
        if not higher_is_better and value <= high:
            return tier
    return NormTier.VERY_LOW


def evaluated_value(test: BiomotorTest, raw_value: float, body_weight: Optional[float] = None) -> float:
    """Value compared against the norms: raw, or raw / body weight for relative tests."""
    if not test.relative_to_body_weight:
        return raw_value
    if body_weight is None or body_weight <= 0:
        raise InvalidInputError(f"Test '{test.test_id}' is relative to body weight; a positive body weight is "
                                f"required")
    return raw_value / body_weight


def evaluate_test_result(result: BiomotorTestResult, sex: Sex, birth_date: datetime.date,
                         as_of: Optional[datetime.date] = None, table: NormTable = DEFAULT_NORM_TABLE,
                         catalog: Optional[dict[str, BiomotorTest]] = None, ) -> TierEvaluation:
    """Evaluate one recorded result against the norm table.

    Args:
        result: The recorded result.
        sex: Athlete's sex.
        birth_date: Athlete's birth date, used for the age bracket.
        as_of: Date the result was recorded (today if ``None``).
        table: Norm table override (the built-in table by default).
        catalog: Test catalog override (the built-in catalog by default).

    Raises:
        UnknownTestError: the test is not catalogued or has no norms.
        InvalidInputError: category mismatch, or a relative test without
            body weight.
    """
    catalog = BIOMOTOR_TESTS if catalog is None else catalog

    test = catalog.get(result.test_id)
    if test is None:
        raise UnknownTestError(f"Unknown biomotor test '{result.test_id}'")
    if test.category != result.category:
        raise InvalidInputError(f"Test '{test.test_id}' belongs to category '{test.category.value}', "
                                f"not '{result.category.value}'")

    bracket = age_bracket(birth_date, as_of)
    value = evaluated_value(test, result.raw_value, result.body_weight_at_test)
    tier = classify(test.test_id, value, sex, bracket, test.higher_is_better, table=table)
    logger.debug(f"Evaluated {test.test_id}={value:.3f} ({sex.value}, {bracket.value}) as {tier.value}")

    return TierEvaluation(test_id=test.test_id, category=test.category, sex=sex, age_bracket=bracket,
                          raw_value=result.raw_value, evaluated_value=value, higher_is_better=test.higher_is_better,
                          tier=tier, norm_table_version=table.version, )
