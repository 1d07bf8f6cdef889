"""Configuration management for the salary calculator."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment."""

    strict: bool
    log_level: str

    @property
    def log_level_number(self) -> int:
        """Numeric logging level, WARNING if the name is unknown."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment variables."""
        load_dotenv()

        return cls(
            strict=os.getenv("SALARY_STRICT", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "WARNING"),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()
