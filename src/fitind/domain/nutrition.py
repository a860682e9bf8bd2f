"""Nutrition plan domain models."""

from dataclasses import dataclass
from enum import Enum


class MealType(str, Enum):
    """Diet tag of a catalog meal."""

    VEG = "veg"
    NONVEG = "nonveg"


class SupplementPriority(str, Enum):
    """How strongly a supplement is recommended."""

    ESSENTIAL = "essential"
    RECOMMENDED = "recommended"
    OPTIONAL = "optional"


@dataclass(frozen=True)
class MacroNutrients:
    """Daily calories and macro grams, rounded to whole numbers."""

    calories: int
    protein: int
    carbs: int
    fats: int


@dataclass(frozen=True)
class Meal:
    """A catalog meal or a scaled copy of one."""

    name: str
    localized_name: str
    portion: str
    calories: float
    protein: float
    carbs: float
    fats: float
    meal_type: MealType


@dataclass(frozen=True)
class WeeklyMealPlan:
    """Both scaled meal sets for a flexitarian week."""

    non_veg_meals: list[Meal]
    veg_meals: list[Meal]
    note: str


@dataclass(frozen=True)
class GoalTimeline:
    """Projection of how long reaching the goal weight takes."""

    weeks_to_goal: int
    target_date: str
    weekly_weight_change: float
    is_realistic: bool
    recommendation: str


@dataclass(frozen=True)
class SupplementRecommendation:
    """A supplement suggestion."""

    name: str
    purpose: str
    timing: str
    priority: SupplementPriority


@dataclass(frozen=True)
class MealTiming:
    """Workout-related meal timing guidance."""

    preworkout: str
    postworkout: str
    daily_meals: str
    protein_distribution: str


@dataclass(frozen=True)
class HealthStatus:
    """BMI band label with a display color tag."""

    status: str
    color: str


@dataclass(frozen=True)
class PlanResult:
    """Everything computed for one profile snapshot."""

    bmr: float
    tdee: float
    target_calories: float
    macros: MacroNutrients
    bmi: float
    health_status: HealthStatus
    meal_plan: list[Meal]
    water_intake: float
    supplements: list[SupplementRecommendation]
    meal_timing: MealTiming
    weekly_plan: WeeklyMealPlan | None = None
    goal_timeline: GoalTimeline | None = None
    bmr_katch: float | None = None
