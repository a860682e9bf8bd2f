"""Meal selection and calorie scaling."""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import replace

from fitind.domain.catalog import (
    FALLBACK_ALTERNATIVES,
    MEAL_ALTERNATIVES,
    NON_VEGETARIAN_MEALS,
    VEGETARIAN_MEALS,
)
from fitind.domain.nutrition import Meal, WeeklyMealPlan
from fitind.domain.profile import DietType
from fitind.services.rounding import round_half_up

_logger = logging.getLogger(__name__)


def meals_for_diet(diet_type: str) -> Sequence[Meal]:
    """Return the base catalog for a single-diet plan."""
    if diet_type == DietType.VEG:
        return VEGETARIAN_MEALS
    return NON_VEGETARIAN_MEALS


def scale_meals(meals: Sequence[Meal], target_calories: float) -> list[Meal]:
    """Return copies of the meals scaled to sum to the target calories."""
    total_calories = sum(meal.calories for meal in meals)
    if not total_calories:
        raise ValueError("Cannot scale a meal catalog with no calories")
    scale_factor = target_calories / total_calories
    _logger.debug("Scaling %s meals by %.3f", len(meals), scale_factor)
    return [
        replace(
            meal,
            calories=round_half_up(meal.calories * scale_factor),
            protein=round_half_up(meal.protein * scale_factor),
            carbs=round_half_up(meal.carbs * scale_factor),
            fats=round_half_up(meal.fats * scale_factor),
        )
        for meal in meals
    ]


def flexi_plan_note(non_veg_days: Iterable[str] | None = None) -> str:
    """Describe which weekdays get the non-veg meal set."""
    days = [str(getattr(day, "value", day)) for day in non_veg_days or ()]
    if not days:
        return (
            "🥬 Flexitarian: Abhi aapne koi Non-Veg din select nahi kiya hai, "
            "toh sab din Veg dikhadenge."
        )
    return f"🍖 Flexitarian: {', '.join(days)} ko Non-Veg meals, aur baaki din Pure Veg."


def get_flexitarian_weekly_plan(
    target_calories: float, non_veg_days: Iterable[str] | None = None
) -> WeeklyMealPlan:
    """Scale both catalogs to the same target and attach the weekday note."""
    return WeeklyMealPlan(
        non_veg_meals=scale_meals(NON_VEGETARIAN_MEALS, target_calories),
        veg_meals=scale_meals(VEGETARIAN_MEALS, target_calories),
        note=flexi_plan_note(non_veg_days),
    )


def get_meal_alternatives(meal_name: str) -> list[str]:
    """Suggest swaps for a meal by its category keyword."""
    lowered = meal_name.lower()
    for category, options in MEAL_ALTERNATIVES.items():
        if category.lower() in lowered:
            return list(options)
    return list(FALLBACK_ALTERNATIVES)
