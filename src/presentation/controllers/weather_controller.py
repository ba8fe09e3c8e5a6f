"""
Weather Router - Presentation Layer

This module defines the FastAPI router serving current weather decorated
with a solar production assessment.
"""

from typing import Optional, Union

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from src.application.dtos.weather_dto import WeatherErrorDTO, WeatherResponseDTO
from src.application.use_cases.weather_use_cases import GetWeatherUseCase
from src.domain.entities.errors import DomainError, WeatherValidationError

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api", tags=["Weather"])

FETCH_FAILED_MESSAGE = "Failed to fetch weather data"


def _error_response(status_code: int, body: WeatherErrorDTO) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=body.model_dump(exclude_none=True)
    )


@router.get(
    "/weather",
    response_model=WeatherResponseDTO,
    response_model_exclude_none=True,
    responses={
        400: {"model": WeatherErrorDTO, "description": "Missing coordinates"},
        500: {"model": WeatherErrorDTO, "description": "Weather fetch failed"},
    },
)
@inject
async def get_weather(
    latitude: Optional[str] = Query(None, description="Latitude of the location"),
    longitude: Optional[str] = Query(None, description="Longitude of the location"),
    get_weather_use_case: GetWeatherUseCase = Depends(
        Provide["get_weather_use_case"]
    ),
) -> Union[WeatherResponseDTO, JSONResponse]:
    """
    Get current weather and the solar production outlook for a location.

    Responses are cached per coordinate pair for an hour; cached responses
    carry ``cached: true``.
    """
    try:
        return await get_weather_use_case.execute(latitude, longitude)
    except WeatherValidationError as e:
        return _error_response(
            status.HTTP_400_BAD_REQUEST, WeatherErrorDTO(error=e.message)
        )
    except DomainError as e:
        logger.error(
            "weather.request_failed",
            latitude=latitude,
            longitude=longitude,
            error=e.message,
        )
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            WeatherErrorDTO(error=FETCH_FAILED_MESSAGE, message=e.message),
        )
