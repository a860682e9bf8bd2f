"""Shared test fixtures."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from fitind.config import Settings
from fitind.domain.profile import (
    ActivityLevel,
    DietType,
    Gender,
    Goal,
    Profile,
)
from fitind.services.profiles import ProfileRepository


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    stored: Profile | None = None
    saves: list[Profile] = field(default_factory=list)

    def save(self, profile: Profile) -> None:
        self.stored = profile
        self.saves.append(profile)

    def load(self) -> Profile | None:
        return self.stored


@dataclass
class FailingProfileRepository(ProfileRepository):
    """Repository whose storage is unavailable."""

    load_error: Exception = field(default_factory=lambda: OSError("disk unavailable"))

    def save(self, profile: Profile) -> None:
        raise OSError("read-only file system")

    def load(self) -> Profile | None:
        raise self.load_error


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(profile_path=tmp_path / "profile.json")


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def reference_profile() -> Profile:
    return Profile(
        age=25,
        gender=Gender.MALE,
        weight=70,
        height=170,
        activity_level=ActivityLevel.MODERATE,
        goal=Goal.MAINTAIN,
        diet_type=DietType.VEG,
    )


@pytest.fixture(autouse=True)
def reset_app_logger():
    yield
    logger = logging.getLogger("fitind")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
