"""Domain ports package."""

from .dependency_probe import IDependencyProbe
from .weather_cache import IWeatherCache

__all__ = ["IDependencyProbe", "IWeatherCache"]
