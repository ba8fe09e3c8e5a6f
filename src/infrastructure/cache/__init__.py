"""Weather response cache implementations."""

from .in_memory_weather_cache import InMemoryWeatherCache

__all__ = ["InMemoryWeatherCache"]
