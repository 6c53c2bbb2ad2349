from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from curator.core.version import __version__

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    APP_ENV: Literal["development", "production", "test"] = "production"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # Seed data for the in-memory collaborators
    CATALOG_PATH: Path = DATA_DIR / "catalog.json"
    ROUTES_PATH: Path = DATA_DIR / "routes.json"

    # Session
    ACTION_LOG_CAPACITY: int = 100
    INTEREST_SUMMARY_LIMIT: int = 20

    # Candidate generation
    CANDIDATE_POOL_LIMIT: int = 10
    CANDIDATE_MIN_ITEMS: int = 2
    WATCHED_SEED_LIMIT: int = 3
    INTEREST_MIN_WEIGHT: float = 0.1
    INTEREST_TOP_N: int = 5
    # Dimensions not listed here are eligible for "More in ..." rows
    INTEREST_DIMENSION_ELIGIBILITY: dict[str, bool] = {"cast": False}

    REFRESH_DEBOUNCE_SECONDS: float = 0.25


settings = Settings()

APP_VERSION = __version__
