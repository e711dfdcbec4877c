"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the cultural itinerary planner.
"""

from pathlib import Path

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
MIN_TRIP_DURATION = 1
MAX_TRIP_DURATION = 30
MAX_DESTINATION_LENGTH = 100

# Anchor times used when a day has no extractable activities
DEFAULT_ANCHOR_TIMES = ("09:00 AM", "12:00 PM", "03:00 PM", "07:00 PM")

# Max characters of raw model text echoed into log events
LOG_PREVIEW_LENGTH = 120


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Cultural Planner"

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_FILE: str = "logs/cultural_planner.log"

    # Upstream generation service
    OPENROUTER_API_KEY: SecretStr | None = None
    UPSTREAM_MAX_RETRIES: int = 2
    UPSTREAM_RETRY_DELAY: float = 1.0  # seconds
    UPSTREAM_MAX_DELAY: float = 8.0  # seconds

    # Display name used when the caller supplies no destination
    DEFAULT_DESTINATION: str = "Your Destination"


settings = Settings()
