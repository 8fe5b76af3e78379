"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for DDL generation and the command-line writer.

    Values are read from ``DDLFORGE_*`` environment variables and from a
    ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="DDLFORGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Generation
    default_dialect: str = "postgresql"
    database_major_version: int | None = None  # overrides probing when set
    default_schema_name: str | None = None
    output_default_schema: bool = True
    version_probe_timeout_seconds: float = 5.0
    check_sql: bool = True  # sqlglot syntax check of the primary statement

    # Output
    output_file: str | None = None  # stdout when unset
