"""Configuration settings loaded from environment variables."""

from __future__ import annotations

from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class TrackerSettings(BaseSettings):
    """dependabot-tracker settings.

    Optional settings are read from environment variables prefixed with
    DEPENDABOT_TRACKER_. The token and user name also accept the shorter
    PAT and GH_USERNAME names.
    """

    model_config = {"env_prefix": "DEPENDABOT_TRACKER_", "populate_by_name": True}

    # Required
    token: str = Field(validation_alias=AliasChoices("DEPENDABOT_TRACKER_TOKEN", "PAT"))
    username: str = Field(
        validation_alias=AliasChoices("DEPENDABOT_TRACKER_USERNAME", "GH_USERNAME")
    )

    # Optional
    api_url: str = "https://api.github.com"
    snapshot_path: Path = Path("data") / "repositories.json"
    timeout: int = 30
    per_page: int = 100
    poll_interval: float = 0.2
    log_level: str = "INFO"
    log_file: Path = Path("logs") / "dependabot-tracker.log"


def load_settings() -> TrackerSettings:
    """Read a local .env into the environment, then build the settings."""
    load_dotenv(find_dotenv(usecwd=True))
    return TrackerSettings()
