"""
Weather DTOs - Application Layer

Response payload of ``GET /api/weather``. Fields are snake_case in Python
and serialized in camelCase for the frontend.
"""

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.domain.entities.weather import (
    SolarAssessment,
    SolarCondition,
    WeatherObservation,
)
from src.shared import round_half_up_tenths


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CurrentWeatherDTO(_CamelModel):
    """Current conditions, rounded for display."""

    temperature: float = Field(description="Air temperature at 2 m in C")
    humidity: Union[int, float] = Field(description="Relative humidity at 2 m in %")
    cloud_cover: Union[int, float] = Field(description="Total cloud cover in %")
    wind_speed: float = Field(description="Wind speed at 10 m as reported")
    weather_code: int = Field(description="WMO weather interpretation code")
    weather_description: str = Field(description="Human readable weather code")

    @classmethod
    def from_domain(
        cls, observation: WeatherObservation, description: str
    ) -> "CurrentWeatherDTO":
        return cls(
            temperature=round_half_up_tenths(observation.temperature),
            humidity=observation.humidity,
            cloud_cover=observation.cloud_cover,
            wind_speed=round_half_up_tenths(observation.wind_speed),
            weather_code=observation.weather_code,
            weather_description=description,
        )


class SolarAssessmentDTO(_CamelModel):
    """Solar production estimate derived from the current weather."""

    condition: SolarCondition
    solar_output: str = Field(description="Estimated output range, e.g. '70-90%'")
    advice: str

    @classmethod
    def from_domain(cls, assessment: SolarAssessment) -> "SolarAssessmentDTO":
        return cls(
            condition=assessment.condition,
            solar_output=assessment.solar_output,
            advice=assessment.advice,
        )


class HourlyWeatherDTO(_CamelModel):
    """First 24 hourly values of the forecast; missing hours stay null."""

    cloud_cover: List[Optional[Union[int, float]]] = Field(
        default_factory=list, max_length=24
    )
    direct_radiation: List[Optional[Union[int, float]]] = Field(
        default_factory=list, max_length=24
    )


class WeatherResponseDTO(_CamelModel):
    """Decorated weather payload, optionally served from cache."""

    latitude: float
    longitude: float
    timezone: str
    current: CurrentWeatherDTO
    solar: SolarAssessmentDTO
    hourly: HourlyWeatherDTO
    timestamp: datetime = Field(description="When the provider data was captured")
    cached: Optional[bool] = Field(
        default=None, description="Present and true when served from cache"
    )

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "latitude": 6.9,
                "longitude": 79.9,
                "timezone": "Asia/Colombo",
                "current": {
                    "temperature": 29.4,
                    "humidity": 78,
                    "cloudCover": 35,
                    "windSpeed": 11.2,
                    "weatherCode": 2,
                    "weatherDescription": "Partly Cloudy",
                },
                "solar": {
                    "condition": "GOOD",
                    "solarOutput": "70-90%",
                    "advice": "Good conditions for solar energy generation",
                },
                "hourly": {"cloudCover": [35, 40], "directRadiation": [410.0, 455.0]},
                "timestamp": "2025-10-12T08:00:00.000Z",
                "cached": True,
            }
        },
    )


class WeatherErrorDTO(BaseModel):
    """Error body returned by the weather endpoint."""

    error: str
    message: Optional[str] = None
