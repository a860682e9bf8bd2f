"""Dependency container wiring for the application."""

from dataclasses import dataclass

from fitind.adapters.json_profile_repository import JsonFileProfileRepository
from fitind.config import Settings
from fitind.services.plans import PlanService
from fitind.services.profiles import ProfileService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    profile_service: ProfileService
    plan_service: PlanService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    profile_repository = JsonFileProfileRepository(resolved_settings.profile_path)
    return AppContainer(
        settings=resolved_settings,
        profile_service=ProfileService(profile_repository),
        plan_service=PlanService(debug=resolved_settings.debug),
    )
