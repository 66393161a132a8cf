"""
Environment-driven settings for the notes backend.

Values are read from the process environment, with a `.env` file loaded
first if one is present.
"""
import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

from notes_database.db import DEFAULT_DATABASE_URL, get_database_url

SESSION_COOKIE_NAME = "session_token"
SESSION_LIFETIME_HOURS = 24


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    # None means a random per-process key; sessions then end on restart
    secret_key: Optional[str] = None
    host: str = "0.0.0.0"
    port: int = 8080
    session_cookie_secure: bool = False
    cors_origins: str = "*"
    log_level: str = "INFO"

    @property
    def cors_origins_list(self):
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# PUBLIC_INTERFACE
def load_settings() -> Settings:
    """Builds Settings from environment variables."""
    load_dotenv()
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    if log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise ValueError(f"Invalid LOG_LEVEL '{log_level}'.")
    return Settings(
        database_url=get_database_url(),
        secret_key=os.getenv("SECRET_KEY") or None,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
        session_cookie_secure=_env_flag("SESSION_COOKIE_SECURE"),
        cors_origins=os.getenv("CORS_ORIGINS", "*"),
        log_level=log_level,
    )
