"""
NoteKeeper Backend — Application Configuration
================================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time.
"""

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for a single-node deployment backed
    by a local SQLite file. Attributes are grouped by concern.
    """

    # ── Database ──────────────────────────────────────────────────────────
    # Any SQLAlchemy async URL; the default is a SQLite file next to the CWD.
    database_url: str = Field(
        default="sqlite+aiosqlite:///./data.db",
        description="Async SQLAlchemy connection URL",
    )

    # Pool settings only apply to server databases; SQLite ignores them.
    db_pool_size: int = Field(default=20, ge=5, le=100)
    db_max_overflow: int = Field(default=10, ge=0, le=50)
    db_pool_pre_ping: bool = Field(default=True)

    @property
    def is_sqlite(self) -> bool:
        """True when the configured database is SQLite (file or memory)."""
        return self.database_url.startswith("sqlite")

    # ── Sessions & Credentials ────────────────────────────────────────────
    # Bytes of randomness behind each session token (url-safe base64 encoded).
    session_token_bytes: int = Field(default=32, ge=16, le=128)

    # Overrides the pbkdf2_sha256 round count; None keeps passlib's default.
    password_hash_rounds: Optional[int] = Field(default=None, ge=1000)

    # ── CORS ──────────────────────────────────────────────────────────────
    cors_origins: str = Field(default="http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8795, ge=1024, le=65535)

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
        "case_sensitive": False,
    }


# Singleton instance, imported throughout the application
settings = Settings()
