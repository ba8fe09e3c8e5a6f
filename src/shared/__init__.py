"""
Shared module - Cross-cutting concerns / Shared Layer

Constants, enums and logging helpers used by more than one layer
(API process, Celery worker and the backfill command).

The shared module must not depend on Infrastructure or Frameworks
beyond the logging library itself.
"""

from .consts import (
    DEFAULT_ENERGY_CRON_SCHEDULE,
    DEFAULT_INTERVAL_HOURS,
    DEFAULT_SOLAR_UNIT_SERIAL,
    ENERGY_GENERATION_QUEUE,
    SERVICE_NAME,
    EnumEnvironment,
    EnumLogLevel,
)
from .logging import configure_logging, get_logger, update_logging_from_settings
from .rounding import round_half_up, round_half_up_tenths

__all__ = [
    "DEFAULT_ENERGY_CRON_SCHEDULE",
    "DEFAULT_INTERVAL_HOURS",
    "DEFAULT_SOLAR_UNIT_SERIAL",
    "ENERGY_GENERATION_QUEUE",
    "SERVICE_NAME",
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "round_half_up",
    "round_half_up_tenths",
    "update_logging_from_settings",
]
