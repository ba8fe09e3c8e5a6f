"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .energy_dto import BackfillResultDTO, EnergyGenerationRecordDTO
from .health_dto import DependencyCheckDTO, HealthReportDTO
from .weather_dto import (
    CurrentWeatherDTO,
    HourlyWeatherDTO,
    SolarAssessmentDTO,
    WeatherErrorDTO,
    WeatherResponseDTO,
)

__all__ = [
    "BackfillResultDTO",
    "EnergyGenerationRecordDTO",
    "CurrentWeatherDTO",
    "HourlyWeatherDTO",
    "SolarAssessmentDTO",
    "WeatherErrorDTO",
    "WeatherResponseDTO",
    "HealthReportDTO",
    "DependencyCheckDTO",
]
