"""
Users API Backend — Application Configuration
===============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the application factory, middleware, and the entrypoint.
When:  Loaded once at module import time.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import List


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every setting has a default suitable for local development, so the
    service starts with no environment at all.
    """

    # ── Application ───────────────────────────────────────────────────────
    app_name: str = Field(default="Users API")

    # What: Message returned by GET / alongside the version and status
    app_message: str = Field(default="Users API - Python + FastAPI")

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")

    # What: Listening port, read from PORT
    port: int = Field(default=3000, ge=1, le=65535)

    # What: Controls logging verbosity
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
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

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated origins, or "*" for any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── HTTP Hardening ────────────────────────────────────────────────────
    # What: Adds X-Content-Type-Options, X-Frame-Options, HSTS, etc. to responses
    security_headers: bool = Field(default=True)

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # PORT and port both work
        "extra": "ignore",
    }


# Singleton instance — imported throughout the application
settings = Settings()
