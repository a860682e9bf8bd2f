"""Energy expenditure estimators."""

from fitind.domain.profile import ActivityLevel, Gender, Goal, Profile

ACTIVITY_MULTIPLIERS: dict[str, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.VERY: 1.725,
    ActivityLevel.EXTRA: 1.9,
}
DEFAULT_ACTIVITY_MULTIPLIER = 1.2

DEFICIT_CALORIES = 500
SURPLUS_CALORIES = 300


def calculate_bmr(profile: Profile) -> float:
    """Mifflin-St Jeor BMR.

    Inputs are not range-checked; callers validate weight, height and age.
    """
    base = 10 * profile.weight + 6.25 * profile.height - 5 * profile.age
    if profile.gender == Gender.MALE:
        return base + 5
    return base - 161


def calculate_bmr_katch(weight: float, body_fat_percentage: float) -> float:
    """Katch-McArdle BMR from lean body mass."""
    lean_mass = weight * (1 - body_fat_percentage / 100)
    return 370 + 21.6 * lean_mass


def calculate_tdee(bmr: float, activity_level: str) -> float:
    """Scale BMR by the activity multiplier; unknown levels count as sedentary."""
    return bmr * ACTIVITY_MULTIPLIERS.get(activity_level, DEFAULT_ACTIVITY_MULTIPLIER)


def calculate_target_calories(tdee: float, goal: str) -> float:
    """Apply the fixed goal offset to TDEE."""
    if goal == Goal.DEFICIT:
        return tdee - DEFICIT_CALORIES
    if goal == Goal.SURPLUS:
        return tdee + SURPLUS_CALORIES
    return tdee
