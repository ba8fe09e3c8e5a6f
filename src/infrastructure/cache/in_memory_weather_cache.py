"""
In-memory Weather Cache - Infrastructure Layer

Process-local store of formatted weather responses keyed by coordinate pair.
Entries older than the TTL are treated as absent and overwritten on the next
successful fetch.
"""

from datetime import datetime, timedelta, timezone
from threading import Lock
from typing import Any, Callable, Dict, Optional

from src.domain.entities.weather import WeatherCacheEntry

DEFAULT_TTL_SECONDS = 3600


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryWeatherCache:
    """Dictionary backed weather cache with a fixed time-to-live."""

    def __init__(
        self,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._ttl = timedelta(seconds=ttl_seconds)
        self._clock = clock or _utc_now
        self._entries: Dict[str, WeatherCacheEntry] = {}
        self._lock = Lock()

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def get(self, key: str) -> Optional[WeatherCacheEntry]:
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.captured_at >= self._ttl:
            return None
        return entry

    def put(self, key: str, value: Any) -> WeatherCacheEntry:
        entry = WeatherCacheEntry(data=value, captured_at=self._clock())
        with self._lock:
            self._entries[key] = entry
        return entry

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
