"""Application configuration using Pydantic settings."""

import logging
import os
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from MAZE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MAZE_",
        env_file=os.path.join(BASE_DIR, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Files
    input_path: Path = Path("output/maze.txt")
    output_path: Path = Path("output/maze.json")

    # Document
    include_endpoints: bool = False
    json_indent: int = 2

    # Logging
    log_level: str = "INFO"
    show_maze: bool = False

    @field_validator("json_indent")
    @classmethod
    def validate_json_indent(cls, v: int) -> int:
        if not 0 <= v <= 8:
            raise ValueError("JSON indent must be between 0 and 8")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown ones."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level '{v}'")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
