"""Plan assembly from a profile snapshot."""

import logging
import math
from dataclasses import dataclass
from datetime import date

from fitind.domain.nutrition import PlanResult, WeeklyMealPlan
from fitind.domain.profile import (
    ActivityLevel,
    DietType,
    Goal,
    MacroDistribution,
    Profile,
    TrainingLevel,
)
from fitind.services.energy import (
    calculate_bmr,
    calculate_bmr_katch,
    calculate_target_calories,
    calculate_tdee,
)
from fitind.services.macros import calculate_macros
from fitind.services.meals import get_flexitarian_weekly_plan, meals_for_diet, scale_meals
from fitind.services.rounding import round_half_up
from fitind.services.wellness import (
    calculate_bmi,
    calculate_goal_timeline,
    calculate_water_intake,
    get_health_status,
    get_meal_timing,
    get_supplement_recommendations,
)

_logger = logging.getLogger(__name__)

QUICK_PLAN_ACTIVITY_MULTIPLIER = 1.55
QUICK_PLAN_YOUNG_AGE = 30


def _require_positive(label: str, value: float) -> None:
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{label} must be positive, got {value}")


def validate_profile(profile: Profile, goal_weight: float | None = None) -> None:
    """Reject non-positive or non-finite body measurements before any calculation."""
    _require_positive("Age", profile.age)
    _require_positive("Weight", profile.weight)
    _require_positive("Height", profile.height)
    if goal_weight is not None:
        _require_positive("Goal weight", goal_weight)


@dataclass
class PlanService:
    """Builds complete nutrition plans."""

    debug: bool = False

    def build_plan(
        self,
        profile: Profile,
        goal_weight: float | None = None,
        today: date | None = None,
    ) -> PlanResult:
        """Compute the full plan for one profile snapshot."""
        validate_profile(profile, goal_weight)

        bmr = calculate_bmr(profile)
        tdee = calculate_tdee(bmr, profile.activity_level)
        target_calories = calculate_target_calories(tdee, profile.goal)
        macros = calculate_macros(
            target_calories, profile.goal, profile.macro_distribution
        )
        bmi = calculate_bmi(profile.weight, profile.height)

        weekly_plan: WeeklyMealPlan | None = None
        if profile.diet_type == DietType.FLEXITARIAN:
            weekly_plan = get_flexitarian_weekly_plan(
                target_calories, profile.non_veg_days
            )
            meal_plan = weekly_plan.non_veg_meals
        else:
            meal_plan = scale_meals(meals_for_diet(profile.diet_type), target_calories)

        goal_timeline = None
        if (
            goal_weight is not None
            and profile.goal != Goal.MAINTAIN
            and goal_weight != profile.weight
        ):
            goal_timeline = calculate_goal_timeline(
                profile.weight, goal_weight, profile.goal, tdee, target_calories, today
            )

        bmr_katch = None
        if profile.body_fat_percentage is not None:
            bmr_katch = calculate_bmr_katch(profile.weight, profile.body_fat_percentage)

        if self.debug:
            _logger.info(
                "Plan built: goal=%s diet=%s bmr=%.1f tdee=%.1f target=%.1f",
                profile.goal.value,
                profile.diet_type.value,
                bmr,
                tdee,
                target_calories,
            )

        return PlanResult(
            bmr=bmr,
            tdee=tdee,
            target_calories=target_calories,
            macros=macros,
            bmi=bmi,
            health_status=get_health_status(bmi, profile.goal),
            meal_plan=meal_plan,
            weekly_plan=weekly_plan,
            water_intake=calculate_water_intake(profile.weight, profile.activity_level),
            goal_timeline=goal_timeline,
            supplements=get_supplement_recommendations(
                profile.goal, profile.training_level, profile.diet_type
            ),
            meal_timing=get_meal_timing(profile.goal, profile.training_level),
            bmr_katch=bmr_katch,
        )

    def quick_plan(
        self, weight: float, age: int, bmi: float, diet_type: DietType
    ) -> PlanResult:
        """Rough plan from weight, age and a known BMI.

        Assumes moderate activity, maintenance and a beginner trainee.
        """
        _require_positive("Weight", weight)
        _require_positive("Age", age)
        _require_positive("BMI", bmi)
        if diet_type == DietType.FLEXITARIAN:
            raise ValueError("Quick plan supports veg or nonveg diets only")

        per_kg = 24 if age < QUICK_PLAN_YOUNG_AGE else 22
        bmr = weight * per_kg
        tdee = round_half_up(bmr * QUICK_PLAN_ACTIVITY_MULTIPLIER)
        target_calories = tdee

        if self.debug:
            _logger.info("Quick plan built: diet=%s target=%s", diet_type.value, tdee)

        return PlanResult(
            bmr=round_half_up(bmr),
            tdee=tdee,
            target_calories=target_calories,
            macros=calculate_macros(
                target_calories, Goal.MAINTAIN, MacroDistribution.STANDARD
            ),
            bmi=bmi,
            health_status=get_health_status(bmi, Goal.MAINTAIN),
            meal_plan=scale_meals(meals_for_diet(diet_type), target_calories),
            water_intake=calculate_water_intake(weight, ActivityLevel.MODERATE),
            supplements=get_supplement_recommendations(
                Goal.MAINTAIN, TrainingLevel.BEGINNER, diet_type
            ),
            meal_timing=get_meal_timing(Goal.MAINTAIN, TrainingLevel.BEGINNER),
        )
