"""Configuration for training calculations."""

import os
import logging
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class UnitConfig:
    """Unit conversion constants shared by all activities."""

    step_length_m: float = 0.65  # average stride or stroke length
    m_in_km: int = 1000
    min_in_h: int = 60
    kmh_in_msec: float = 0.278
    cm_in_m: int = 100


@dataclass(frozen=True)
class RunningConfig:
    """Calorie formula constants for running."""

    speed_multiplier: int = 18
    calorie_factor: float = 1.79


@dataclass(frozen=True)
class WalkingConfig:
    """Calorie formula constants for walking."""

    weight_multiplier: float = 0.035
    height_multiplier: float = 0.029


@dataclass(frozen=True)
class SwimmingConfig:
    """Calorie formula constants for swimming."""

    calorie_factor: float = 1.1
    weight_multiplier: int = 2


UNITS = UnitConfig()
RUNNING = RunningConfig()
WALKING = WalkingConfig()
SWIMMING = SwimmingConfig()


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration settings."""

    level: str = "INFO"
    format: str = LOG_FORMAT

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        """
        Create config from environment variables.

        Loads a .env file from the working directory first.
        """
        load_dotenv(find_dotenv(usecwd=True))
        level = os.getenv("FTRACKER_LOG_LEVEL", "INFO").strip().upper()

        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(
                f"Invalid FTRACKER_LOG_LEVEL: {level!r}. "
                "Use one of DEBUG, INFO, WARNING, ERROR, CRITICAL."
            )

        return cls(level=level)


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    Configure the root logger.

    Parameters:
        config: Logging configuration. Read from the environment when omitted.
    """
    if config is None:
        config = LoggingConfig.from_env()

    logging.basicConfig(level=config.level, format=config.format)
