"""
Weather Use Cases - Application Layer

Serves current weather plus a solar production assessment for a location,
backed by a short-lived cache in front of the weather provider.
"""

from datetime import datetime, timezone
from typing import Callable, Optional

from src.application.dtos.weather_dto import (
    CurrentWeatherDTO,
    HourlyWeatherDTO,
    SolarAssessmentDTO,
    WeatherResponseDTO,
)
from src.domain.entities.errors import (
    DomainError,
    WeatherInternalError,
    WeatherValidationError,
)
from src.domain.entities.weather import WeatherForecast
from src.domain.gateways.weather_gateway import IWeatherGateway
from src.domain.ports.weather_cache import IWeatherCache
from src.domain.services.solar_classifier import (
    classify_solar_conditions,
    describe_weather_code,
)
from src.shared import get_logger

logger = get_logger(__name__)

HOURLY_WINDOW = 24


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def build_cache_key(latitude: str, longitude: str) -> str:
    """Cache key for a coordinate pair, exactly as received (no normalization)."""
    return f"{latitude},{longitude}"


class GetWeatherUseCase:
    """Use case returning decorated weather data for a coordinate pair."""

    def __init__(
        self,
        weather_gateway: IWeatherGateway,
        weather_cache: IWeatherCache,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._weather_gateway = weather_gateway
        self._weather_cache = weather_cache
        self._clock = clock or _utc_now

    async def execute(
        self, latitude: Optional[str], longitude: Optional[str]
    ) -> WeatherResponseDTO:
        """
        Return the weather payload for ``latitude``/``longitude``.

        Raises:
            WeatherValidationError: If either coordinate is missing
            WeatherUpstreamError: If the provider answers with an error status
            WeatherInternalError: For any other failure while fetching
        """
        if not latitude or not longitude:
            raise WeatherValidationError()

        cache_key = build_cache_key(latitude, longitude)
        entry = self._weather_cache.get(cache_key)
        if entry is not None:
            logger.info(
                "weather.cache_hit",
                cache_key=cache_key,
                captured_at=entry.captured_at.isoformat(),
            )
            return entry.data.model_copy(update={"cached": True})

        logger.info("weather.cache_miss", cache_key=cache_key)

        try:
            forecast = await self._weather_gateway.fetch_forecast(latitude, longitude)
            response = self._build_response(forecast)
        except DomainError:
            raise
        except Exception as e:
            logger.error(
                "weather.fetch_failed", cache_key=cache_key, error=str(e), exc_info=e
            )
            raise WeatherInternalError(str(e)) from e

        self._weather_cache.put(cache_key, response)
        logger.info(
            "weather.fetched",
            cache_key=cache_key,
            condition=response.solar.condition.value,
        )
        return response

    def _build_response(self, forecast: WeatherForecast) -> WeatherResponseDTO:
        current = forecast.current
        assessment = classify_solar_conditions(
            current.cloud_cover, current.wind_speed, current.weather_code
        )

        return WeatherResponseDTO(
            latitude=forecast.latitude,
            longitude=forecast.longitude,
            timezone=forecast.timezone,
            current=CurrentWeatherDTO.from_domain(
                current, describe_weather_code(current.weather_code)
            ),
            solar=SolarAssessmentDTO.from_domain(assessment),
            hourly=HourlyWeatherDTO(
                cloud_cover=list(forecast.hourly_cloud_cover[:HOURLY_WINDOW]),
                direct_radiation=list(forecast.hourly_direct_radiation[:HOURLY_WINDOW]),
            ),
            timestamp=self._clock(),
        )
