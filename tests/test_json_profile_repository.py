"""Tests for the JSON file profile repository."""

import json
from dataclasses import replace

import pytest
from pydantic import ValidationError

from fitind.adapters.json_profile_repository import JsonFileProfileRepository
from fitind.domain.profile import (
    DietType,
    MacroDistribution,
    TrainingLevel,
    Weekday,
    default_profile,
)
from fitind.services.profiles import ProfileService


def test_load_missing_file_returns_none(tmp_path) -> None:
    repository = JsonFileProfileRepository(tmp_path / "missing" / "profile.json")
    assert repository.load() is None


def test_save_writes_camel_case_document(tmp_path) -> None:
    path = tmp_path / "nested" / "profile.json"
    repository = JsonFileProfileRepository(path)
    profile = replace(default_profile(), name="Asha", diet_type=DietType.FLEXITARIAN)

    repository.save(profile)

    document = json.loads(path.read_text(encoding="utf-8"))
    assert document["name"] == "Asha"
    assert document["activityLevel"] == "moderate"
    assert document["dietType"] == "flexitarian"
    assert document["nonVegDays"] == ["Tuesday", "Saturday"]
    assert repository.load() == profile


def test_load_document_without_optional_fields(tmp_path) -> None:
    path = tmp_path / "profile.json"
    path.write_text(
        json.dumps(
            {
                "age": 31,
                "gender": "female",
                "weight": 58.5,
                "height": 162,
                "activityLevel": "light",
                "goal": "deficit",
                "dietType": "nonveg",
                "trainingLevel": "intermediate",
                "macroDistribution": "highcarb",
                "nonVegDays": ["Friday"],
            }
        ),
        encoding="utf-8",
    )

    profile = JsonFileProfileRepository(path).load()

    assert profile is not None
    assert profile.name == ""
    assert profile.weight == 58.5
    assert profile.training_level == TrainingLevel.INTERMEDIATE
    assert profile.macro_distribution == MacroDistribution.HIGHCARB
    assert profile.body_type is None
    assert profile.non_veg_days == (Weekday.FRIDAY,)


def test_invalid_document_raises(tmp_path) -> None:
    path = tmp_path / "profile.json"
    path.write_text('{"age": 30, "gender": "robot"}', encoding="utf-8")

    with pytest.raises(ValidationError):
        JsonFileProfileRepository(path).load()


def test_service_hides_corrupt_document(tmp_path) -> None:
    path = tmp_path / "profile.json"
    path.write_text("not json", encoding="utf-8")

    assert ProfileService(JsonFileProfileRepository(path)).load() is None


def test_load_collapses_duplicate_days(tmp_path) -> None:
    path = tmp_path / "profile.json"
    repository = JsonFileProfileRepository(path)
    repository.save(default_profile())
    document = json.loads(path.read_text(encoding="utf-8"))
    document["nonVegDays"] = ["Saturday", "Tuesday", "Saturday"]
    path.write_text(json.dumps(document), encoding="utf-8")

    profile = repository.load()

    assert profile is not None
    assert profile.non_veg_days == (Weekday.SATURDAY, Weekday.TUESDAY)


def test_save_replaces_file_without_leftovers(tmp_path) -> None:
    path = tmp_path / "profile.json"
    repository = JsonFileProfileRepository(path)

    repository.save(default_profile())
    repository.save(replace(default_profile(), name="Ravi"))

    assert [entry.name for entry in tmp_path.iterdir()] == ["profile.json"]
    assert repository.load().name == "Ravi"


def test_failed_write_keeps_previous_profile(tmp_path, monkeypatch) -> None:
    path = tmp_path / "profile.json"
    repository = JsonFileProfileRepository(path)
    repository.save(replace(default_profile(), name="Asha"))

    def broken_write(self, *args, **kwargs):
        raise OSError("disk full")

    monkeypatch.setattr(type(path), "write_text", broken_write)
    with pytest.raises(OSError):
        repository.save(replace(default_profile(), name="Ravi"))
    monkeypatch.undo()

    assert repository.load().name == "Asha"
