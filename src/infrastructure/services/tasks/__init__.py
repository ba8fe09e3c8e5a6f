"""Celery task implementations for infrastructure services."""

from .base import ScheduledTickTask, logger
from .energy_generation import generate_energy_record

__all__ = ["ScheduledTickTask", "generate_energy_record", "logger"]
