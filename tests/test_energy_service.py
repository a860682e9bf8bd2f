"""Tests for energy estimators."""

import math
from dataclasses import replace

import pytest

from fitind.domain.profile import ActivityLevel, Gender, Goal
from fitind.services.energy import (
    ACTIVITY_MULTIPLIERS,
    calculate_bmr,
    calculate_bmr_katch,
    calculate_target_calories,
    calculate_tdee,
)


def test_bmr_mifflin_male(reference_profile) -> None:
    expected = 10 * 70 + 6.25 * 170 - 5 * 25 + 5
    assert math.isclose(calculate_bmr(reference_profile), expected)
    assert calculate_bmr(reference_profile) == 1642.5


def test_bmr_male_female_offset(reference_profile) -> None:
    female = replace(reference_profile, gender=Gender.FEMALE)
    assert calculate_bmr(reference_profile) - calculate_bmr(female) == 166


def test_bmr_is_linear_in_inputs(reference_profile) -> None:
    heavier = replace(reference_profile, weight=reference_profile.weight + 1)
    taller = replace(reference_profile, height=reference_profile.height + 1)
    older = replace(reference_profile, age=reference_profile.age + 1)
    base = calculate_bmr(reference_profile)

    assert math.isclose(calculate_bmr(heavier) - base, 10)
    assert math.isclose(calculate_bmr(taller) - base, 6.25)
    assert math.isclose(calculate_bmr(older) - base, -5)


def test_bmr_katch_uses_lean_mass() -> None:
    # 80 kg at 20% fat -> 64 kg lean mass
    assert math.isclose(calculate_bmr_katch(80, 20), 370 + 21.6 * 64)


@pytest.mark.parametrize(
    ("level", "multiplier"),
    [
        (ActivityLevel.SEDENTARY, 1.2),
        (ActivityLevel.LIGHT, 1.375),
        (ActivityLevel.MODERATE, 1.55),
        (ActivityLevel.VERY, 1.725),
        (ActivityLevel.EXTRA, 1.9),
    ],
)
def test_tdee_multipliers(level, multiplier) -> None:
    assert math.isclose(calculate_tdee(1500, level), 1500 * multiplier)
    assert ACTIVITY_MULTIPLIERS[level.value] == multiplier


def test_tdee_accepts_plain_strings() -> None:
    assert math.isclose(calculate_tdee(1642.5, "moderate"), 2545.875)


def test_tdee_unknown_level_falls_back_to_sedentary() -> None:
    assert math.isclose(calculate_tdee(1500, "couch"), 1500 * 1.2)


def test_target_calories_offsets() -> None:
    assert calculate_target_calories(2500, Goal.DEFICIT) == 2000
    assert calculate_target_calories(2500, Goal.SURPLUS) == 2800
    assert calculate_target_calories(2500, Goal.MAINTAIN) == 2500
    assert calculate_target_calories(2500, "unknown") == 2500
