"""Profile persistence boundary."""

import logging
from dataclasses import dataclass
from typing import Protocol

from fitind.domain.profile import Profile

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Key-value store holding a single profile."""

    def save(self, profile: Profile) -> None:
        """Persist the profile, replacing any stored one."""

    def load(self) -> Profile | None:
        """Return the stored profile, if any."""


@dataclass
class ProfileService:
    """Best-effort save and load of the user's profile."""

    repository: ProfileRepository

    def save(self, profile: Profile) -> bool:
        """Persist the profile; failures are logged and reported as False."""
        try:
            self.repository.save(profile)
        except OSError as exc:
            _logger.warning("Failed to save profile: %s", exc)
            return False
        return True

    def load(self) -> Profile | None:
        """Return the saved profile, or None when missing or unreadable."""
        try:
            return self.repository.load()
        except (OSError, ValueError) as exc:
            _logger.warning("Failed to parse saved profile: %s", exc)
            return None
