"""
Use Cases Package - Application Layer

Use cases orchestrate the domain services (solar classifier, energy
generator) with the repositories, gateways and ports injected by the
container.
"""

from .energy_use_cases import (
    BackfillEnergyRecordsUseCase,
    GenerateEnergyRecordUseCase,
    GetEnergyRecordsUseCase,
)
from .health_use_cases import CheckHealthUseCase
from .weather_use_cases import GetWeatherUseCase

__all__ = [
    "BackfillEnergyRecordsUseCase",
    "GenerateEnergyRecordUseCase",
    "GetEnergyRecordsUseCase",
    "CheckHealthUseCase",
    "GetWeatherUseCase",
]
