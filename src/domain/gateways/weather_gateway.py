"""
Domain Gateway - Weather Provider

This module defines the gateway interface for fetching current conditions
and the hourly forecast from a third-party weather provider.
"""

from abc import ABC, abstractmethod

from src.domain.entities.weather import WeatherForecast


class IWeatherGateway(ABC):
    """Interface for weather provider gateways."""

    @abstractmethod
    async def fetch_forecast(self, latitude: str, longitude: str) -> WeatherForecast:
        """
        Fetch current conditions and the hourly forecast for a location.

        Coordinates are forwarded to the provider exactly as received.

        Args:
            latitude: Latitude as supplied by the client
            longitude: Longitude as supplied by the client

        Returns:
            Parsed forecast with timezone resolved by the provider

        Raises:
            WeatherUpstreamError: When the provider answers with a non-success status
            WeatherInternalError: When the request fails or the payload is malformed
        """
        pass
