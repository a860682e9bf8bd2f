"""Tests for profile persistence service and defaults."""

import logging
from dataclasses import replace

from fitind.domain.profile import (
    DietType,
    Weekday,
    completion_progress,
    default_profile,
)
from fitind.services.profiles import ProfileService
from tests.conftest import FailingProfileRepository, InMemoryProfileRepository


def test_save_and_load_round_trip(reference_profile) -> None:
    repository = InMemoryProfileRepository()
    service = ProfileService(repository)

    assert service.load() is None
    assert service.save(reference_profile) is True
    assert service.load() == reference_profile
    assert repository.saves == [reference_profile]


def test_save_failure_is_swallowed(reference_profile, caplog) -> None:
    service = ProfileService(FailingProfileRepository())

    with caplog.at_level(logging.WARNING, logger="fitind.services.profiles"):
        assert service.save(reference_profile) is False

    assert "Failed to save profile" in caplog.text


def test_load_failure_returns_none() -> None:
    assert ProfileService(FailingProfileRepository()).load() is None
    corrupt = FailingProfileRepository(load_error=ValueError("bad json"))
    assert ProfileService(corrupt).load() is None


def test_default_profile() -> None:
    profile = default_profile()

    assert profile.age == 25
    assert profile.weight == 70
    assert profile.diet_type == DietType.VEG
    assert profile.non_veg_days == (Weekday.TUESDAY, Weekday.SATURDAY)


def test_completion_progress() -> None:
    profile = default_profile()

    assert completion_progress(profile) == 87.5
    assert completion_progress(replace(profile, name="Asha")) == 100
