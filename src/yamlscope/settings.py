"""Settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the yamlscope command.

    Values are read from ``YAMLSCOPE_``-prefixed environment variables and
    from a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="YAMLSCOPE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Diagnostics go to stderr; keep them quiet unless asked for.
    log_level: str = "WARNING"

    # Input
    max_document_size: int = 5_000_000  # 0 disables the limit
