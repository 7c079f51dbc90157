"""
Portfolio Backend — Application Configuration
===============================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Connection parameters, port and upload location used to be hard-coded.
       They are now read from environment variables (or a .env file) while the
       defaults keep the historical values.
How:   Pydantic Settings reads from environment variables, validates types,
       and provides a process-wide `settings` object.
Who:   Imported by main.py (app factory) and by tests that build their own
       Settings instance.
When:  Loaded once at module import time.
"""

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every default matches the values the service has always run with
    (MySQL on localhost as root, database `portfolio_db`, port 3001),
    so an unconfigured deployment behaves exactly as before.
    """

    # ── Database ──────────────────────────────────────────────────────────
    # What: Individual connection parameters for the relational store
    # Format: assembled into <driver>://<user>:<password>@<host>:<port>/<name>
    db_driver: str = Field(default="mysql+aiomysql")
    db_host: str = Field(default="localhost")
    db_port: int = Field(default=3306, ge=1, le=65535)
    db_user: str = Field(default="root")
    db_password: str = Field(default="")
    db_name: str = Field(default="portfolio_db")

    # What: Full SQLAlchemy URL; takes precedence over the parts above
    # Used by tests (sqlite+aiosqlite) and by deployments with a DSN at hand
    database_url: Optional[str] = Field(
        default=None,
        description="Async SQLAlchemy connection URL (overrides DB_* parts)",
    )

    # ── File Storage ──────────────────────────────────────────────────────
    # What: Directory receiving uploaded images, created at startup if absent
    upload_dir: str = Field(default="./uploads")

    # What: URL prefix the upload directory is served under
    # Also the leading segment of every stored image_path ("uploads/<file>")
    upload_url_prefix: str = Field(default="/uploads")

    # ── CORS ──────────────────────────────────────────────────────────────
    # Comma-separated; "*" allows every origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=3001, ge=1, le=65535)

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

    @field_validator("upload_url_prefix")
    @classmethod
    def validate_upload_url_prefix(cls, v: str) -> str:
        """Normalizes the prefix to a single leading slash and no trailing slash."""
        stripped = v.strip("/")
        if not stripped:
            raise ValueError("upload_url_prefix must not be empty")
        return "/" + stripped

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }

    @property
    def sqlalchemy_url(self) -> str:
        """
        What: The URL handed to create_async_engine().
        How:  DATABASE_URL verbatim when set, otherwise built from the DB_* parts.
        Why URL.create: Escapes special characters in user and password.
        """
        if self.database_url:
            return self.database_url
        url = URL.create(
            drivername=self.db_driver,
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )
        return url.render_as_string(hide_password=False)

    @property
    def is_sqlite(self) -> bool:
        return self.sqlalchemy_url.startswith("sqlite")


# Process-wide instance used by the module-level application
settings = Settings()
