"""
Infrastructure Gateway - Open-Meteo Implementation

This module implements the weather gateway against the public Open-Meteo
forecast API, requesting the current conditions and the hourly cloud cover
and direct radiation series used by the dashboard.
"""

from typing import Any, Dict, List, Optional

import httpx
import structlog

from src.domain.entities.errors import WeatherInternalError, WeatherUpstreamError
from src.domain.entities.weather import Number, WeatherForecast, WeatherObservation
from src.domain.gateways.weather_gateway import IWeatherGateway

logger = structlog.get_logger(__name__)

CURRENT_FIELDS = (
    "temperature_2m,relative_humidity_2m,weather_code,cloud_cover,wind_speed_10m"
)
HOURLY_FIELDS = "cloud_cover,direct_radiation"


class OpenMeteoGateway(IWeatherGateway):
    """Implementation of the weather gateway using HTTP client."""

    def __init__(self, base_url: str, timeout: float = 30.0):
        """
        Initialize Open-Meteo gateway.

        Args:
            base_url: Forecast endpoint (e.g., "https://api.open-meteo.com/v1/forecast")
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def fetch_forecast(self, latitude: str, longitude: str) -> WeatherForecast:
        """Fetch current conditions and hourly series for a coordinate pair."""
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": CURRENT_FIELDS,
            "hourly": HOURLY_FIELDS,
            "timezone": "auto",
        }

        logger.info(
            "Fetching weather from Open-Meteo",
            url=self.base_url,
            latitude=latitude,
            longitude=longitude,
        )

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.base_url, params=params)
        except httpx.RequestError as e:
            logger.error("Open-Meteo request error", error=str(e), url=self.base_url)
            raise WeatherInternalError(f"Open-Meteo request failed: {str(e)}") from e

        if not response.is_success:
            logger.error(
                "Open-Meteo HTTP error",
                status_code=response.status_code,
                response_text=response.text,
                url=self.base_url,
            )
            raise WeatherUpstreamError(
                response.reason_phrase, status_code=response.status_code
            )

        try:
            return self._parse_response(response.json())
        except (KeyError, TypeError, ValueError) as e:
            logger.error("Open-Meteo unexpected payload", error=str(e))
            raise WeatherInternalError(
                f"Unexpected Open-Meteo response: {str(e)}"
            ) from e

    def _parse_response(self, data: Dict[str, Any]) -> WeatherForecast:
        current = data["current"]
        hourly = data.get("hourly") or {}

        return WeatherForecast(
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
            timezone=str(data["timezone"]),
            current=WeatherObservation(
                temperature=float(current["temperature_2m"]),
                humidity=self._number(current["relative_humidity_2m"]),
                weather_code=int(current["weather_code"]),
                cloud_cover=self._number(current["cloud_cover"]),
                wind_speed=float(current["wind_speed_10m"]),
            ),
            hourly_cloud_cover=self._series(hourly.get("cloud_cover")),
            hourly_direct_radiation=self._series(hourly.get("direct_radiation")),
        )

    @staticmethod
    def _number(value: Any) -> Number:
        # Percentages arrive as integers and are served unchanged
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return float(value)

    @classmethod
    def _series(cls, values: Any) -> List[Optional[Number]]:
        if not values:
            return []
        # Open-Meteo reports missing hours as null
        return [cls._number(value) if value is not None else None for value in values]
