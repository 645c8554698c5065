"""
Pydantic settings model for MyDay.

Values come from ``MYDAY_``-prefixed environment variables or a ``.env``
file in the working directory.
"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="MYDAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    data_dir: Path = Field(default=Path("data"), description="Directory holding the monthly files")
    log_dir: Optional[Path] = Field(default=None, description="Directory for daily JSON logs")
    log_level: str = Field(default="INFO", description="Log level")
    migrate_on_startup: bool = Field(
        default=True, description="Convert legacy text months before first use"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    def ensure_data_dir(self) -> Path:
        """Return the data directory, creating it if needed."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        return self.data_dir
