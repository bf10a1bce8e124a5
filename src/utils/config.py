"""Configuration management for the Indian Meal Planner.

Loads environment variables from system environment and .env file.
Priority order: system environment > .env file > hardcoded defaults
"""

import os
from typing import Optional

from dotenv import load_dotenv


# Load .env file (if exists, silently continues if missing)
load_dotenv()


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return float(value)


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        # Gemini credential. API_KEY is accepted as a fallback name.
        # Not validated here: a missing key surfaces as a failed generation call.
        self.GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY", "")
        # Model used for every generation call. Default: gemini-2.5-flash
        self.GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
        # Temperature: optional sampling temperature (0.0 - 2.0). Unset = model default
        self.TEMPERATURE: Optional[float] = _optional_float("TEMPERATURE")

    @property
    def has_api_key(self) -> bool:
        """Whether a Gemini credential is configured."""
        return bool(self.GEMINI_API_KEY)

    def validate(self) -> None:
        """Validate configuration values.

        The API key is intentionally not required here.

        Raises:
            ValueError: If an invalid value is provided.
        """
        if not self.GEMINI_MODEL:
            raise ValueError("GEMINI_MODEL must not be empty")
        if self.TEMPERATURE is not None and not (0.0 <= self.TEMPERATURE <= 2.0):
            raise ValueError(
                f"TEMPERATURE must be between 0.0 and 2.0, got: {self.TEMPERATURE}"
            )


# Create module-level config instance and validate immediately
config = Config()
config.validate()
