# config.py
# Settings for the schedule creator, read from SCHEDULE_* environment variables and an optional .env file.

import os

from pydantic import Field
from pydantic_settings import BaseSettings

from models import FULL_RANGE_TERM

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class Settings(BaseSettings):
    # e.g. SCHEDULE_COURSES_FILE=/srv/data/courses.json

    # Catalog
    courses_file: str = Field(
        default=os.path.join(BASE_DIR, "courses.json"),
        description="Path to the JSON course catalog loaded at startup",
    )
    default_term: str = Field(
        default=FULL_RANGE_TERM,
        description="Term token used when a request does not name one",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Development server
    host: str = Field(default="127.0.0.1", description="Bind address")
    port: int = Field(default=8080, description="Bind port")
    debug: bool = Field(default=False, description="Run Flask in debug mode")

    model_config = {
        "env_prefix": "SCHEDULE_",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


_settings: Settings | None = None


def get_settings() -> Settings:
    # Process-wide instance, created on first use.
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
