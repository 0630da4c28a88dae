"""
JSONPlaceholder Gateway - Application Configuration
=====================================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time.

Only PORT is expected to change between deployments. Everything else has a
default that points at the public JSONPlaceholder service.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import List


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern for readability.
    """

    # ── Server ────────────────────────────────────────────────────────────
    # What: Port the gateway listens on (env PORT)
    port: int = Field(default=3000, ge=1, le=65535)
    host: str = Field(default="0.0.0.0")

    # ── Upstream ──────────────────────────────────────────────────────────
    # What: Base URL every forwarding route is resolved against
    # Format: scheme://host[:port][/prefix], no trailing slash
    upstream_base_url: str = Field(
        default="https://jsonplaceholder.typicode.com",
        description="Base URL of the upstream REST service",
    )

    @field_validator("upstream_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Route paths start with '/', so the base must not end with one."""
        return v.rstrip("/")

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated origins, "*" for any
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Logging ───────────────────────────────────────────────────────────
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
        "case_sensitive": False,  # PORT and port both work
    }

    @property
    def public_url(self) -> str:
        """URL advertised in logs and in the OpenAPI servers list."""
        return f"http://localhost:{self.port}"


# Singleton instance, imported throughout the application
settings = Settings()
