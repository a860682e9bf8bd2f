"""Auxiliary estimators: BMI, hydration, goal timeline and guidance."""

from datetime import date, timedelta

from fitind.domain.nutrition import (
    GoalTimeline,
    HealthStatus,
    MealTiming,
    SupplementPriority,
    SupplementRecommendation,
)
from fitind.domain.profile import (
    ADVANCED_TRAINING_LEVELS,
    ActivityLevel,
    DietType,
    Goal,
    TrainingLevel,
)
from fitind.services.rounding import round_half_up, round_tenth

KCAL_PER_KG = 7700
WATER_LITERS_PER_KG = 0.033

WATER_ACTIVITY_MULTIPLIERS: dict[str, float] = {
    ActivityLevel.SEDENTARY: 1.0,
    ActivityLevel.LIGHT: 1.1,
    ActivityLevel.MODERATE: 1.2,
    ActivityLevel.VERY: 1.3,
    ActivityLevel.EXTRA: 1.4,
}

# Realistic weekly change in kg, inclusive.
DEFICIT_PACE = (0.3, 1.0)
SURPLUS_PACE = (0.2, 0.5)

_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def calculate_bmi(weight: float, height: float) -> float:
    """Body mass index from kg and cm."""
    return weight / (height / 100) ** 2


def get_health_status(bmi: float, goal: str) -> HealthStatus:
    """Label the BMI band, phrased for the user's goal."""
    if bmi < 18.5:
        if goal == Goal.SURPLUS:
            return HealthStatus("Building Strength 💪", "text-amber-500")
        return HealthStatus("Need More Energy 🌱", "text-amber-500")
    if bmi < 25:
        return HealthStatus("Fit & Active 🌟", "text-emerald-500")
    if bmi < 30:
        if goal == Goal.DEFICIT:
            return HealthStatus("On Track to Wellness 🎯", "text-blue-500")
        return HealthStatus("Building Power 💫", "text-blue-500")
    return HealthStatus("Focus on Longevity 🌿", "text-orange-500")


def calculate_water_intake(weight: float, activity_level: str) -> float:
    """Daily water in liters, one decimal."""
    multiplier = WATER_ACTIVITY_MULTIPLIERS.get(activity_level, 1.0)
    return round_tenth(weight * WATER_LITERS_PER_KG * multiplier)


def format_long_date(value: date) -> str:
    """Format as e.g. ``18 October 2026``."""
    return f"{value.day} {_MONTHS[value.month - 1]} {value.year}"


def calculate_goal_timeline(
    current_weight: float,
    goal_weight: float,
    goal: str,
    tdee: float,
    target_calories: float,
    today: date | None = None,
) -> GoalTimeline:
    """Project when the goal weight is reached at the planned calorie delta.

    Raises ``ValueError`` when target calories equal TDEE (maintenance) or the
    weights are equal, since no finite projection exists.
    """
    weight_difference = abs(current_weight - goal_weight)
    calorie_delta = abs(tdee - target_calories)
    if not calorie_delta:
        raise ValueError("Goal timeline needs a calorie deficit or surplus")
    if not weight_difference:
        raise ValueError("Goal timeline needs a goal weight different from the current one")

    weeks_to_goal = weight_difference * KCAL_PER_KG / (calorie_delta * 7)
    weekly_change = weight_difference / weeks_to_goal

    if goal == Goal.DEFICIT:
        low, high = DEFICIT_PACE
    else:
        low, high = SURPLUS_PACE
    is_realistic = low <= weekly_change <= high

    if not is_realistic and goal == Goal.DEFICIT:
        if weekly_change > high:
            recommendation = "⚠️ Too aggressive! Slow down to prevent muscle loss"
        else:
            recommendation = (
                "💡 Progress might be slow. Consider increasing calorie deficit slightly"
            )
    elif not is_realistic and goal == Goal.SURPLUS:
        if weekly_change > high:
            recommendation = "⚠️ Too fast! Risk of excess fat gain"
        else:
            recommendation = "💡 Very slow bulk. Consider small calorie increase"
    else:
        recommendation = "✅ Perfect pace for sustainable results!"

    weeks = round_half_up(weeks_to_goal)
    target_date = (today or date.today()) + timedelta(days=weeks * 7)
    return GoalTimeline(
        weeks_to_goal=weeks,
        target_date=format_long_date(target_date),
        weekly_weight_change=round_tenth(weekly_change),
        is_realistic=is_realistic,
        recommendation=recommendation,
    )


def get_supplement_recommendations(
    goal: str, training_level: str | None = None, diet_type: str | None = None
) -> list[SupplementRecommendation]:
    """Build the supplement list in display order."""
    advanced = training_level in ADVANCED_TRAINING_LEVELS
    recommendations: list[SupplementRecommendation] = []

    if advanced:
        recommendations.append(
            SupplementRecommendation(
                name="Whey/Plant Protein",
                purpose="Muscle recovery & growth",
                timing="Post-workout within 30 mins",
                priority=SupplementPriority.ESSENTIAL,
            )
        )
    else:
        recommendations.append(
            SupplementRecommendation(
                name="Protein Powder",
                purpose="Meet daily protein goals",
                timing="Anytime (post-workout ideal)",
                priority=SupplementPriority.RECOMMENDED,
            )
        )

    if goal == Goal.SURPLUS or training_level == TrainingLevel.ATHLETE:
        recommendations.append(
            SupplementRecommendation(
                name="Creatine Monohydrate",
                purpose="Strength & power output",
                timing="5g daily (timing doesn't matter)",
                priority=SupplementPriority.ESSENTIAL,
            )
        )

    if diet_type in (DietType.VEG, DietType.FLEXITARIAN):
        recommendations.append(
            SupplementRecommendation(
                name="Multivitamin + B12",
                purpose="Fill micronutrient gaps",
                timing="Morning with breakfast",
                priority=SupplementPriority.RECOMMENDED,
            )
        )

    recommendations.append(
        SupplementRecommendation(
            name="Omega-3 (Fish Oil/Algae)",
            purpose="Heart health & inflammation",
            timing="With any meal",
            priority=(
                SupplementPriority.ESSENTIAL
                if diet_type == DietType.VEG
                else SupplementPriority.RECOMMENDED
            ),
        )
    )

    if advanced:
        recommendations.append(
            SupplementRecommendation(
                name="Pre-Workout",
                purpose="Energy & focus",
                timing="20-30 mins before training",
                priority=SupplementPriority.OPTIONAL,
            )
        )

    if goal == Goal.DEFICIT:
        recommendations.append(
            SupplementRecommendation(
                name="Green Tea Extract",
                purpose="Metabolism support",
                timing="Morning or pre-workout",
                priority=SupplementPriority.OPTIONAL,
            )
        )

    return recommendations


def protein_per_kg(goal: str, training_level: str | None = None) -> float:
    """Daily protein target in g per kg body weight."""
    if training_level in ADVANCED_TRAINING_LEVELS:
        target = 2.2 if goal == Goal.SURPLUS else 2.0
    elif goal == Goal.SURPLUS:
        target = 1.8
    elif goal == Goal.DEFICIT:
        target = 2.0
    else:
        target = 1.6
    return round_tenth(target)


def get_meal_timing(goal: str, training_level: str | None = None) -> MealTiming:
    """Pick the meal timing template for the training level."""
    protein = f"{protein_per_kg(goal, training_level):g}"
    if training_level in ADVANCED_TRAINING_LEVELS:
        return MealTiming(
            preworkout=(
                "🥖 1-2 hours before: 30-40g carbs + 10-15g protein "
                "(e.g., banana + peanut butter, oats)"
            ),
            postworkout=(
                "🍗 Within 30 mins: 20-40g protein + 40-60g carbs "
                "(e.g., protein shake + rice, chicken + roti)"
            ),
            daily_meals=(
                "🍽️ 5-6 meals: Spread protein evenly "
                "(every 3-4 hours for muscle protein synthesis)"
            ),
            protein_distribution=(
                f"📊 {protein}g protein per kg body weight - spread across all meals"
            ),
        )
    return MealTiming(
        preworkout="🍌 30-60 mins before: Light snack (fruit, energy bar)",
        postworkout="🥤 Within 1 hour: Protein shake or meal with protein + carbs",
        daily_meals="🍽️ 3-4 meals: Focus on hitting daily targets, timing is flexible",
        protein_distribution=f"📊 {protein}g protein per kg - 3-4 meals is fine",
    )
