# utils/config.py
from enum import Enum
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """
    Runtime configuration, read from ``INFLECT_*`` environment variables
    or a local ``.env`` file.

    Nothing here changes inflection results; the rule tables and the fuzzy
    count thresholds are fixed.
    """

    APP_NAME: str = "Strings Inflect"

    # --- Logging ---
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE
    LOG_FILE: Optional[str] = None

    # --- Word joining defaults (CLI) ---
    JOIN_SEPARATOR: str = Field(default=", ", min_length=1)
    JOIN_CONJUNCTIVE: str = "and"

    model_config = SettingsConfigDict(env_prefix="INFLECT_", env_file=".env", extra="ignore")


def get_settings() -> Settings:
    """Build a fresh Settings object from the current environment."""
    return Settings()


settings = get_settings()
