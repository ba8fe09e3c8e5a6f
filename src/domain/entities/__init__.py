"""
Domain Entities Package

This package contains the core domain entities of the solar energy backend.
"""

from .energy import EnergyGenerationRecord
from .errors import (
    DomainError,
    EnergyRecordPersistenceError,
    WeatherInternalError,
    WeatherUpstreamError,
    WeatherValidationError,
)
from .health import DependencyCheck, HealthReport, HealthState
from .weather import (
    SolarAssessment,
    SolarCondition,
    WeatherCacheEntry,
    WeatherForecast,
    WeatherObservation,
)

__all__ = [
    "EnergyGenerationRecord",
    "SolarAssessment",
    "SolarCondition",
    "WeatherCacheEntry",
    "WeatherForecast",
    "WeatherObservation",
    "DependencyCheck",
    "HealthReport",
    "HealthState",
    "DomainError",
    "EnergyRecordPersistenceError",
    "WeatherInternalError",
    "WeatherUpstreamError",
    "WeatherValidationError",
]
