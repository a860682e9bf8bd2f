"""Macronutrient allocation."""

from fitind.domain.nutrition import MacroNutrients
from fitind.domain.profile import Goal, MacroDistribution
from fitind.services.rounding import round_half_up

# (protein, carbs, fat) fractions of daily calories.
DISTRIBUTION_SPLITS: dict[str, tuple[float, float, float]] = {
    MacroDistribution.KETO: (0.25, 0.05, 0.70),
    MacroDistribution.HIGHCARB: (0.20, 0.60, 0.20),
    MacroDistribution.ATHLETE: (0.30, 0.45, 0.25),
}
GOAL_SPLITS: dict[str, tuple[float, float, float]] = {
    Goal.SURPLUS: (0.25, 0.50, 0.25),
    Goal.DEFICIT: (0.30, 0.40, 0.30),
    Goal.MAINTAIN: (0.25, 0.45, 0.30),
}

PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9


def macro_split(goal: str, distribution: str | None = None) -> tuple[float, float, float]:
    """Return the calorie fractions for a distribution policy or goal.

    An explicit non-standard distribution wins over the goal default.
    """
    if distribution in DISTRIBUTION_SPLITS:
        return DISTRIBUTION_SPLITS[distribution]
    return GOAL_SPLITS.get(goal, GOAL_SPLITS[Goal.MAINTAIN])


def calculate_macros(
    calories: float, goal: str, distribution: str | None = None
) -> MacroNutrients:
    """Split calories into protein, carb and fat grams.

    Each value is rounded on its own, so the grams may be a few kcal off
    the rounded calorie total.
    """
    protein_pc, carbs_pc, fat_pc = macro_split(goal, distribution)
    return MacroNutrients(
        calories=round_half_up(calories),
        protein=round_half_up(calories * protein_pc / PROTEIN_KCAL_PER_G),
        carbs=round_half_up(calories * carbs_pc / CARBS_KCAL_PER_G),
        fats=round_half_up(calories * fat_pc / FAT_KCAL_PER_G),
    )
