"""
Gateways Package - Domain Layer

Interfaces for communicating with external HTTP services.
"""

from .weather_gateway import IWeatherGateway

__all__ = ["IWeatherGateway"]
