"""
crudsuite — Application Configuration
=======================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time; validated before an app starts.

All three apps share one MongoDB server and differ only in database name,
so a single Settings class serves them all.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from crudsuite import APP_KEYS


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults matching a local development MongoDB.
    Attributes are grouped by concern for readability.
    """

    # ── MongoDB ───────────────────────────────────────────────────────────
    # Format: mongodb://[user:password@]host:port
    # The server is assumed to be up when an app starts; nothing retries.
    mongodb_url: str = Field(
        default="mongodb://127.0.0.1:27017",
        description="MongoDB connection string shared by all apps",
    )

    # Upper bound on pooled connections held by the single client per process
    mongodb_max_pool_size: int = Field(default=100, ge=1, le=500)

    # ── Per-app databases ─────────────────────────────────────────────────
    inventory_database: str = Field(default="ecommerce")
    projects_database: str = Field(default="project_management")
    storefront_database: str = Field(default="simple_ecommerce")

    def database_for(self, app_key: str) -> str:
        """Returns the database name the given app stores its collections in."""
        if app_key not in APP_KEYS:
            raise ValueError(
                f"Unknown app '{app_key}'. Must be one of: {', '.join(APP_KEYS)}"
            )
        return getattr(self, f"{app_key}_database")

    # ── CORS ──────────────────────────────────────────────────────────────
    # Pages are served by the app itself, so same-origin is the normal case.
    # Format: Comma-separated URLs or "*"
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=5000, ge=1024, le=65535)

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

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # MONGODB_URL and mongodb_url both work
    }


# Singleton instance, imported throughout the application
settings = Settings()
