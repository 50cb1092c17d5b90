"""Application settings and configuration.

This module defines all configuration options for the OurTalks chat backend.
Settings are loaded from environment variables with sensible defaults.
"""

from nacl.pwhash import argon2id
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="OurTalks", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")

    # Server binding
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=5000, alias="PORT")

    # Database configuration
    database_url: str = Field(default="sqlite:///./ourtalks.db", alias="DATABASE_URL")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    # Password hashing work factor (argon2id)
    password_opslimit: int = Field(
        default=argon2id.OPSLIMIT_INTERACTIVE,
        alias="PASSWORD_OPSLIMIT",
    )
    password_memlimit: int = Field(
        default=argon2id.MEMLIMIT_INTERACTIVE,
        alias="PASSWORD_MEMLIMIT",
    )

    # Observability
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="json", alias="LOG_FORMAT")

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(
        default=["*"],
        alias="CORS_ORIGINS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def is_sqlite(self) -> bool:
        """Return True when the configured database is SQLite."""
        return self.database_url.startswith("sqlite")


settings = Settings()
