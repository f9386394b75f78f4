"""Application configuration using Pydantic settings."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root directory
BASE_DIR = Path(__file__).resolve().parent.parent

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LABYRINTH_",
        env_file=os.path.join(BASE_DIR, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Labyrinth"
    app_version: str = "1.0.0"
    debug: bool = False

    # Maze defaults
    maze_width: int = 10
    maze_height: int = 10
    maze_seed: Optional[int] = None

    # Logging
    log_level: str = "INFO"

    @field_validator("maze_width", "maze_height")
    @classmethod
    def validate_dimension(cls, v: int) -> int:
        """Reject non-positive default maze dimensions."""
        if v <= 0:
            raise ValueError("Maze dimensions must be greater than 0")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the logging level name."""
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{v}'. Must be one of: {', '.join(sorted(VALID_LOG_LEVELS))}"
            )
        return level

    @property
    def effective_log_level(self) -> str:
        """Debug mode forces DEBUG logging."""
        if self.debug:
            return "DEBUG"
        return self.log_level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
