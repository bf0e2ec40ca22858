"""
Centralized configuration with environment variable overrides.

Salon-specific values and display thresholds live here. Prices and
durations are not configuration: they are fixed rule tables in
``nailbook.booking.pricing``.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


@dataclass(frozen=True)
class SalonConfig:
    """Salon identity and display settings."""

    name: str = os.getenv("SALON_NAME", "Maison Nail & Spa")
    currency: str = os.getenv("SALON_CURRENCY", "NT$")


@dataclass(frozen=True)
class ScheduleConfig:
    """Time-slot and calendar settings."""

    # Foot and combo services flag slots with fewer seats than this
    low_seats_threshold: int = _safe_int("LOW_SEATS_THRESHOLD", "2")
    # 0 means "rest of the current month"
    booking_window_days: int = _safe_int("BOOKING_WINDOW_DAYS", "0")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    salon: SalonConfig = field(default_factory=SalonConfig)
    schedule: ScheduleConfig = field(default_factory=ScheduleConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    if not config.salon.currency.strip():
        raise ValueError("SALON_CURRENCY must not be empty")
    if config.schedule.low_seats_threshold < 1:
        raise ValueError(
            f"LOW_SEATS_THRESHOLD must be >= 1, got {config.schedule.low_seats_threshold}"
        )
    if config.schedule.booking_window_days < 0:
        raise ValueError(
            f"BOOKING_WINDOW_DAYS must be >= 0, got {config.schedule.booking_window_days}"
        )


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.info("Configuration loaded for '%s'", config.salon.name)
    return config


# Singleton instance
settings = load_config()
