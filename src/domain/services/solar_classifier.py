"""Domain service mapping weather observations to solar production tiers."""

from typing import Dict, FrozenSet

from src.domain.entities.weather import SolarAssessment, SolarCondition

# WMO weather interpretation codes as used by Open-Meteo.
WEATHER_DESCRIPTIONS: Dict[int, str] = {
    0: "Clear Sky",
    1: "Mainly Clear",
    2: "Partly Cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Foggy",
    51: "Light Drizzle",
    53: "Moderate Drizzle",
    55: "Dense Drizzle",
    61: "Slight Rain",
    63: "Moderate Rain",
    65: "Heavy Rain",
    71: "Slight Snow",
    73: "Moderate Snow",
    75: "Heavy Snow",
    80: "Slight Rain Showers",
    81: "Moderate Rain Showers",
    82: "Violent Rain Showers",
    85: "Slight Snow Showers",
    86: "Heavy Snow Showers",
    95: "Thunderstorm",
    96: "Thunderstorm with Hail",
    99: "Thunderstorm with Hail",
}

UNKNOWN_DESCRIPTION = "Unknown"

THUNDERSTORM_CODES: FrozenSet[int] = frozenset({95, 96, 99})
DRIZZLE_CODES: FrozenSet[int] = frozenset({51, 53, 55})
PRECIPITATION_RANGE = (51, 86)

HIGH_WIND_THRESHOLD = 15

_THUNDERSTORM = SolarAssessment(
    condition=SolarCondition.POOR,
    solar_output="0-10%",
    advice="Thunderstorms - No solar production expected",
)
_PRECIPITATION = SolarAssessment(
    condition=SolarCondition.POOR,
    solar_output="10-20%",
    advice="Precipitation reducing solar output",
)
_HIGH_WIND = SolarAssessment(
    condition=SolarCondition.FAIR,
    solar_output="40-60%",
    advice="High winds may affect installation - reduce output expected",
)
_CLEAR = SolarAssessment(
    condition=SolarCondition.OPTIMAL,
    solar_output="90-100%",
    advice="Excellent conditions for solar energy generation",
)
_LIGHT_CLOUDS = SolarAssessment(
    condition=SolarCondition.GOOD,
    solar_output="70-90%",
    advice="Good conditions for solar energy generation",
)
_MODERATE_CLOUDS = SolarAssessment(
    condition=SolarCondition.FAIR,
    solar_output="40-60%",
    advice="Moderate cloud cover reducing solar output",
)
_HEAVY_CLOUDS = SolarAssessment(
    condition=SolarCondition.POOR,
    solar_output="10-30%",
    advice="Heavy cloud cover significantly reducing solar output",
)


def describe_weather_code(weather_code: int) -> str:
    """Return a human readable label for a WMO weather code."""
    return WEATHER_DESCRIPTIONS.get(weather_code, UNKNOWN_DESCRIPTION)


def _is_precipitation(weather_code: int) -> bool:
    low, high = PRECIPITATION_RANGE
    return low <= weather_code <= high and weather_code not in DRIZZLE_CODES


def _assess_cloud_cover(cloud_cover: float) -> SolarAssessment:
    if cloud_cover <= 20:
        return _CLEAR
    if cloud_cover <= 50:
        return _LIGHT_CLOUDS
    if cloud_cover <= 80:
        return _MODERATE_CLOUDS
    return _HEAVY_CLOUDS


def classify_solar_conditions(
    cloud_cover: float, wind_speed: float, weather_code: int
) -> SolarAssessment:
    """Estimate solar production from the current weather.

    Rules are evaluated in order and the first match wins: thunderstorms,
    then rain or snow (drizzle excluded), then high wind, then cloud cover.
    Inputs are not range-checked.
    """
    if weather_code in THUNDERSTORM_CODES:
        return _THUNDERSTORM
    if _is_precipitation(weather_code):
        return _PRECIPITATION
    if wind_speed > HIGH_WIND_THRESHOLD:
        return _HIGH_WIND
    return _assess_cloud_cover(cloud_cover)
