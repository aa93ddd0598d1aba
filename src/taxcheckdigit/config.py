"""
Configuration of the taxcheckdigit package
Uses pydantic-settings, values come from TAXCHECKDIGIT_* environment variables or .env
"""

import logging
import sys
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class CheckDigitSettings(BaseSettings):
    """Package settings"""

    model_config = SettingsConfigDict(
        env_prefix="TAXCHECKDIGIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="WARNING",
        description="Root log level used by configure_logging",
    )
    log_rejections: bool = Field(
        default=False,
        description="Log structural rejections of codes at WARNING instead of DEBUG",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> CheckDigitSettings:
    """Cached settings instance"""
    return CheckDigitSettings()


def configure_logging(level: Optional[str] = None) -> None:
    """
    Set up root logging for command line use

    Args:
        level: Log level name, defaults to the configured log_level
    """
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
