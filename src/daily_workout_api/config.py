"""Configuration settings for the daily workout API."""
import os
from pathlib import Path
from typing import List, Literal


EnvironmentType = Literal["development", "staging", "production"]

DEFAULT_CONFIG_PATH = Path(__file__).parent / "data" / "workout_config.json"


class Settings:
    """Application settings."""

    # Environment
    ENVIRONMENT: EnvironmentType = "development"

    # Data sources
    WORKOUT_CONFIG_PATH: str = str(DEFAULT_CONFIG_PATH)
    WORKBOOK_PATH: str | None = None
    EXERCISE_SHEET: str = "Exercises"

    # HTTP
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:3001"]

    def __init__(self):
        # Environment
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env in ("development", "staging", "production"):
            self.ENVIRONMENT = env  # type: ignore
        else:
            self.ENVIRONMENT = "development"

        # Data sources
        self.WORKOUT_CONFIG_PATH = os.getenv("WORKOUT_CONFIG_PATH", str(DEFAULT_CONFIG_PATH))
        self.WORKBOOK_PATH = os.getenv("WORKBOOK_PATH") or None
        self.EXERCISE_SHEET = os.getenv("EXERCISE_SHEET", "Exercises")

        # HTTP
        origins = os.getenv("CORS_ORIGINS")
        if origins:
            self.CORS_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]
        else:
            self.CORS_ORIGINS = ["http://localhost:3000", "http://localhost:3001"]


settings = Settings()
