"""Configuration management for paceline."""

import logging
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.enums import WorkoutActivityType
from .smoothing import SmoothingAlgorithmType, SmoothingMethod

logger = logging.getLogger(__name__)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def find_env_file() -> Path | None:
    """Find .env file at git root (project root)."""
    # Search up for git root and use .env there
    current = Path.cwd()
    for parent in [current, *current.parents]:
        if (parent / ".git").exists():
            env_file = parent / ".env"
            if env_file.exists():
                return env_file
            break
    # Fallback to current directory
    local_env = Path.cwd() / ".env"
    if local_env.exists():
        return local_env
    return None


# Find env file once at module load
_env_file = find_env_file()


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Locally, values come from the .env file; any variable set in the
    environment takes precedence.
    """

    model_config = SettingsConfigDict(
        env_file=_env_file,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Smoothing Configuration
    smoothing_method: SmoothingMethod = Field(
        default=SmoothingMethod.EXPONENTIAL_MOVING_AVERAGE,
        description="Smoothing strategy for the current pace stream: sma or ema",
    )
    sma_buffer_size: int = Field(
        default=5,
        gt=0,
        description="Window size for the simple moving average",
    )
    ema_alpha: float = Field(
        default=0.2,
        gt=0,
        le=1,
        description="Smoothing factor for the exponential moving average",
    )

    # Workout Configuration
    activity_type: WorkoutActivityType = Field(
        default=WorkoutActivityType.RUNNING,
        description="Workout type: running, walking, cycling",
    )
    locale: str = Field(
        default="en_US",
        description="Locale identifier used for number separators",
    )

    # Application Settings
    log_level: LogLevel = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        """Accept level names in any case."""
        if isinstance(value, str):
            return value.strip().upper()
        return value

    def smoothing_type(self) -> SmoothingAlgorithmType:
        """Smoothing configuration for the current pace stream."""
        return SmoothingAlgorithmType(
            method=self.smoothing_method,
            buffer_size=self.sma_buffer_size,
            alpha=self.ema_alpha,
        )


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern).

    Returns:
        Settings instance with all configuration
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        logger.debug(
            f"Loaded settings: smoothing={_settings.smoothing_method.value}, "
            f"activity={_settings.activity_type.value}"
        )
    return _settings
