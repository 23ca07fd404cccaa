"""
Centralized configuration with environment variable overrides.

Business identity and booking-grid defaults live here. Working hours are
not configuration: callers fetch the current company schedule and pass it
into every availability call.
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
class BusinessConfig:
    """Business-specific settings loaded from environment or defaults."""

    name: str = os.getenv("BUSINESS_NAME", "Studio Navalha Barbearia")


@dataclass(frozen=True)
class BookingConfig:
    """Defaults for the booking grid and availability search."""

    slot_granularity_minutes: int = _safe_int("SLOT_GRANULARITY_MINUTES", "15")
    default_service_duration_minutes: int = _safe_int(
        "DEFAULT_SERVICE_DURATION_MINUTES", "30"
    )
    lookahead_days: int = _safe_int("AVAILABILITY_LOOKAHEAD_DAYS", "14")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    business: BusinessConfig = field(default_factory=BusinessConfig)
    booking: BookingConfig = field(default_factory=BookingConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    for name, value in [
        ("SLOT_GRANULARITY_MINUTES", config.booking.slot_granularity_minutes),
        ("DEFAULT_SERVICE_DURATION_MINUTES", config.booking.default_service_duration_minutes),
        ("AVAILABILITY_LOOKAHEAD_DAYS", config.booking.lookahead_days),
    ]:
        if value < 1:
            raise ValueError(f"{name} must be >= 1, got {value}")

    if config.booking.slot_granularity_minutes > 24 * 60:
        raise ValueError(
            "SLOT_GRANULARITY_MINUTES must fit within a day, "
            f"got {config.booking.slot_granularity_minutes}"
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
    logger.info("Configuration loaded for '%s'", config.business.name)
    return config


# Singleton instance
settings = load_config()
