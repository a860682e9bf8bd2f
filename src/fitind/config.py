"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    profile_path: Path = Path.home() / ".fitind" / "profile.json"
    default_goal_weight: float = 65.0
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="FITIND_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
