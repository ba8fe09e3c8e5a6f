"""
Domain Entities - Weather

Value objects describing the current weather at a location and the solar
production assessment derived from it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional, Union

Number = Union[int, float]


class SolarCondition(str, Enum):
    """Expected solar production tier."""

    OPTIMAL = "OPTIMAL"
    GOOD = "GOOD"
    FAIR = "FAIR"
    POOR = "POOR"


@dataclass(frozen=True, slots=True)
class WeatherObservation:
    """Current conditions as reported by the weather provider."""

    temperature: float
    humidity: Number
    weather_code: int
    cloud_cover: Number
    wind_speed: float


@dataclass(frozen=True, slots=True)
class WeatherForecast:
    """Provider response: current observation plus the hourly series."""

    latitude: float
    longitude: float
    timezone: str
    current: WeatherObservation
    hourly_cloud_cover: List[Optional[Number]] = field(default_factory=list)
    hourly_direct_radiation: List[Optional[Number]] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class SolarAssessment:
    """Derived solar production estimate. Never persisted."""

    condition: SolarCondition
    solar_output: str
    advice: str


@dataclass(frozen=True, slots=True)
class WeatherCacheEntry:
    """Formatted weather payload and the instant it was captured."""

    data: Any
    captured_at: datetime
