from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest
from fastapi.responses import JSONResponse

from src.application.dtos.weather_dto import (
    CurrentWeatherDTO,
    HourlyWeatherDTO,
    SolarAssessmentDTO,
    WeatherResponseDTO,
)
from src.domain.entities.errors import (
    WeatherInternalError,
    WeatherUpstreamError,
    WeatherValidationError,
)
from src.domain.services.solar_classifier import classify_solar_conditions
from src.presentation.controllers.weather_controller import get_weather


class _UseCase:
    def __init__(self, result=None, error=None):
        self._result = result
        self._error = error

    async def execute(self, latitude, longitude):
        if self._error is not None:
            raise self._error
        return self._result


def _body(response: JSONResponse) -> dict:
    return json.loads(response.body)


@pytest.mark.asyncio
async def test_success_returns_dto(sample_forecast) -> None:
    dto = WeatherResponseDTO(
        latitude=6.9,
        longitude=79.8,
        timezone="UTC",
        current=CurrentWeatherDTO.from_domain(sample_forecast.current, "Mainly Clear"),
        solar=SolarAssessmentDTO.from_domain(classify_solar_conditions(10, 2, 1)),
        hourly=HourlyWeatherDTO(),
        timestamp=datetime.now(timezone.utc),
    )

    result = await get_weather(
        latitude="6.9", longitude="79.8", get_weather_use_case=_UseCase(dto)
    )

    assert result is dto


@pytest.mark.asyncio
async def test_validation_error_returns_400() -> None:
    response = await get_weather(
        latitude=None,
        longitude="79.8",
        get_weather_use_case=_UseCase(error=WeatherValidationError()),
    )

    assert response.status_code == 400
    assert _body(response) == {"error": "Latitude and longitude are required"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("error", "message"),
    [
        (
            WeatherUpstreamError("Bad Gateway", 502),
            "Open-Meteo API error: Bad Gateway",
        ),
        (WeatherInternalError("timed out"), "timed out"),
    ],
)
async def test_fetch_failures_return_500(error, message) -> None:
    response = await get_weather(
        latitude="6.9", longitude="79.8", get_weather_use_case=_UseCase(error=error)
    )

    assert response.status_code == 500
    assert _body(response) == {
        "error": "Failed to fetch weather data",
        "message": message,
    }
