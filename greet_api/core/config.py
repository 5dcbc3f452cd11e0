"""
Configuration helpers for the greeting backend.

Routers and services receive a Settings object instead of reading
os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

DEFAULT_GREETING = "Hello"
DEFAULT_DATABASE_URL = "sqlite:///./greet.db"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    app_greeting: str
    database_url: str
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _str(value: str | None, default: str) -> str:
        value = (value or "").strip()
        return value or default

    return Settings(
        app_env=_str(os.getenv("APP_ENV"), "dev").lower(),
        app_greeting=_str(os.getenv("APP_GREETING"), DEFAULT_GREETING),
        database_url=_str(os.getenv("DATABASE_URL"), DEFAULT_DATABASE_URL),
        log_level=_str(os.getenv("LOG_LEVEL"), "INFO").upper(),
    )
