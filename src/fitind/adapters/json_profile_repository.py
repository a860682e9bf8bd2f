"""JSON file repository for the saved profile."""

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from fitind.domain.profile import (
    ActivityLevel,
    BodyType,
    DietType,
    Gender,
    Goal,
    MacroDistribution,
    Profile,
    TrainingLevel,
    Weekday,
)
from fitind.services.profiles import ProfileRepository


class StoredProfile(BaseModel):
    """On-disk profile document (camelCase keys)."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    age: int
    gender: Gender
    weight: float
    height: float
    activity_level: ActivityLevel = Field(alias="activityLevel")
    goal: Goal
    diet_type: DietType = Field(alias="dietType")
    training_level: TrainingLevel | None = Field(None, alias="trainingLevel")
    body_type: BodyType | None = Field(None, alias="bodyType")
    body_fat_percentage: float | None = Field(None, alias="bodyFatPercentage")
    macro_distribution: MacroDistribution | None = Field(
        None, alias="macroDistribution"
    )
    non_veg_days: list[Weekday] = Field(default_factory=list, alias="nonVegDays")

    @classmethod
    def from_profile(cls, profile: Profile) -> "StoredProfile":
        """Build the document from a domain profile."""
        return cls(
            name=profile.name,
            age=profile.age,
            gender=profile.gender,
            weight=profile.weight,
            height=profile.height,
            activity_level=profile.activity_level,
            goal=profile.goal,
            diet_type=profile.diet_type,
            training_level=profile.training_level,
            body_type=profile.body_type,
            body_fat_percentage=profile.body_fat_percentage,
            macro_distribution=profile.macro_distribution,
            non_veg_days=list(profile.non_veg_days),
        )

    def to_profile(self) -> Profile:
        """Convert the document to a domain profile."""
        return Profile(
            name=self.name,
            age=self.age,
            gender=self.gender,
            weight=self.weight,
            height=self.height,
            activity_level=self.activity_level,
            goal=self.goal,
            diet_type=self.diet_type,
            training_level=self.training_level,
            body_type=self.body_type,
            body_fat_percentage=self.body_fat_percentage,
            macro_distribution=self.macro_distribution,
            non_veg_days=tuple(dict.fromkeys(self.non_veg_days)),
        )


@dataclass
class JsonFileProfileRepository(ProfileRepository):
    """Stores the profile as one JSON document on disk."""

    path: Path

    def save(self, profile: Profile) -> None:
        """Write the profile atomically, creating parent directories as needed."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        document = StoredProfile.from_profile(profile)
        pending = self.path.with_name(f"{self.path.name}.tmp")
        pending.write_text(
            document.model_dump_json(by_alias=True, indent=2), encoding="utf-8"
        )
        pending.replace(self.path)

    def load(self) -> Profile | None:
        """Read the profile, or None when nothing has been saved."""
        if not self.path.exists():
            return None
        raw = self.path.read_text(encoding="utf-8")
        return StoredProfile.model_validate_json(raw).to_profile()
