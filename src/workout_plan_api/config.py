"""Configuration settings for the workout plan API."""
import os
from pathlib import Path
from typing import List, Literal


EnvironmentType = Literal["development", "staging", "production"]

# Repository root (src/workout_plan_api/config.py -> repo)
ROOT_DIR = Path(__file__).resolve().parents[2]


class Settings:
    """Application settings."""

    # Environment
    ENVIRONMENT: EnvironmentType = "development"

    # Data locations
    WORKOUT_TEMPLATES_DIR: Path = ROOT_DIR / "public" / "workouts" / "weekly"
    CATALOG_PATH: Path = ROOT_DIR / "data" / "activity_catalog.json"

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:3001"]

    def __init__(self):
        # Environment
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env in ("development", "staging", "production"):
            self.ENVIRONMENT = env  # type: ignore
        else:
            self.ENVIRONMENT = "development"

        # Data locations
        templates_dir = os.getenv("WORKOUT_TEMPLATES_DIR")
        if templates_dir:
            self.WORKOUT_TEMPLATES_DIR = Path(templates_dir)

        catalog_path = os.getenv("CATALOG_PATH")
        if catalog_path:
            self.CATALOG_PATH = Path(catalog_path)

        # CORS
        origins = os.getenv("CORS_ORIGINS")
        if origins:
            self.CORS_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]


settings = Settings()
