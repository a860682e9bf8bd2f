"""User profile domain model."""

from dataclasses import dataclass, field
from enum import Enum


class Gender(str, Enum):
    """Biological sex used by the BMR formulas."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    """Daily activity level."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    VERY = "very"
    EXTRA = "extra"


class Goal(str, Enum):
    """Body weight goal."""

    DEFICIT = "deficit"
    MAINTAIN = "maintain"
    SURPLUS = "surplus"


class DietType(str, Enum):
    """Diet preference."""

    VEG = "veg"
    NONVEG = "nonveg"
    FLEXITARIAN = "flexitarian"


class TrainingLevel(str, Enum):
    """Training experience."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    ATHLETE = "athlete"


class BodyType(str, Enum):
    """Somatotype (not used by any formula yet)."""

    ECTOMORPH = "ectomorph"
    MESOMORPH = "mesomorph"
    ENDOMORPH = "endomorph"


class MacroDistribution(str, Enum):
    """Macro split policy."""

    STANDARD = "standard"
    KETO = "keto"
    HIGHCARB = "highcarb"
    ATHLETE = "athlete"


class Weekday(str, Enum):
    """Day names used for flexitarian non-veg days."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


ADVANCED_TRAINING_LEVELS = frozenset({TrainingLevel.ADVANCED, TrainingLevel.ATHLETE})


@dataclass(frozen=True)
class Profile:
    """Snapshot of the user's inputs for one plan calculation."""

    age: int
    gender: Gender
    weight: float
    height: float
    activity_level: ActivityLevel
    goal: Goal
    diet_type: DietType
    name: str = ""
    training_level: TrainingLevel | None = None
    body_type: BodyType | None = None
    body_fat_percentage: float | None = None
    macro_distribution: MacroDistribution | None = None
    non_veg_days: tuple[Weekday, ...] = field(default_factory=tuple)


def default_profile() -> Profile:
    """Return the profile a new user starts from."""
    return Profile(
        name="",
        age=25,
        gender=Gender.MALE,
        weight=70,
        height=170,
        activity_level=ActivityLevel.MODERATE,
        goal=Goal.MAINTAIN,
        diet_type=DietType.VEG,
        training_level=TrainingLevel.BEGINNER,
        body_type=BodyType.MESOMORPH,
        macro_distribution=MacroDistribution.STANDARD,
        non_veg_days=(Weekday.TUESDAY, Weekday.SATURDAY),
    )


def completion_progress(profile: Profile) -> float:
    """Return how much of the basic form is filled in, as a percentage."""
    filled = (
        profile.name,
        profile.age,
        profile.gender,
        profile.weight,
        profile.height,
        profile.activity_level,
        profile.goal,
        profile.diet_type,
    )
    return 12.5 * sum(1 for value in filled if value)
