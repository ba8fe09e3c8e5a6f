"""Domain port for caching formatted weather responses."""

from __future__ import annotations

from typing import Any, Optional, Protocol

from src.domain.entities.weather import WeatherCacheEntry


class IWeatherCache(Protocol):
    """Short-lived cache keyed by the raw coordinate pair."""

    def get(self, key: str) -> Optional[WeatherCacheEntry]:
        """Return the entry for ``key`` if it is still fresh, otherwise None."""
        ...

    def put(self, key: str, value: Any) -> WeatherCacheEntry:
        """Store ``value`` under ``key``, replacing any previous entry."""
        ...
