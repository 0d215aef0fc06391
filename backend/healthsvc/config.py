"""
Health Check Service — Application Configuration
=================================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       coerces types, and provides a singleton `settings` object.
Who:   Imported by main.py, server.py and __main__.py.
When:  Loaded once at module import time.

Environment:
    PORT       TCP port to bind (default 3000; unset or invalid → 3000)
    HOST       Bind address (default 0.0.0.0)
    LOG_LEVEL  DEBUG / INFO / WARNING / ERROR / CRITICAL (default INFO)
"""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_PORT = 3000


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for both local runs and the
    container image, so the service starts with an empty environment.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=DEFAULT_PORT)

    @field_validator("port", mode="before")
    @classmethod
    def coerce_port(cls, v: Any) -> int:
        """
        Falls back to DEFAULT_PORT for anything that is not a usable TCP port.

        A malformed PORT (empty, non-numeric, out of range) must not stop the
        service from starting.
        """
        try:
            port = int(str(v).strip())
        except (TypeError, ValueError):
            return DEFAULT_PORT
        if not 1 <= port <= 65535:
            return DEFAULT_PORT
        return port

    # ── Logging ───────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # PORT and port both work
        "extra": "ignore",
    }


# Singleton instance, imported throughout the application
settings = Settings()
