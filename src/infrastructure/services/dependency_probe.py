"""Reachability checks for MongoDB, RabbitMQ, Redis and Open-Meteo."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from time import perf_counter
from typing import Awaitable, Callable, Optional

import httpx
import pika
import redis.asyncio as aioredis
import structlog

from src.domain.entities.health import DependencyCheck, HealthReport, HealthState
from src.domain.ports.dependency_probe import IDependencyProbe
from src.infrastructure.database.mongo_database import MongoDatabase

logger = structlog.get_logger(__name__)

# Smallest forecast query Open-Meteo answers with 200
OPEN_METEO_CHECK_PARAMS = {
    "latitude": "0",
    "longitude": "0",
    "current": "temperature_2m",
}

Check = Callable[[], Awaitable[HealthState]]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DependencyHealthProbe(IDependencyProbe):
    """
    Runs the four checks concurrently.

    A dependency without a configured address is reported as UNKNOWN. A
    check that raises is reported as DOWN with the error text.
    """

    def __init__(
        self,
        mongo_database: Optional[MongoDatabase],
        broker_url: str,
        redis_url: str,
        weather_provider_url: str,
        *,
        timeout: float = 5.0,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._mongo_database = mongo_database
        self._broker_url = broker_url
        self._redis_url = redis_url
        self._weather_provider_url = weather_provider_url
        self._timeout = timeout
        self._clock = clock or _utc_now

    async def check_dependencies(self) -> HealthReport:
        checks = await asyncio.gather(
            self._run("mongo", self._ping_mongo if self._mongo_database else None),
            self._run("rabbitmq", self._open_broker if self._broker_url else None),
            self._run("redis", self._ping_redis if self._redis_url else None),
            self._run(
                "open_meteo",
                self._query_open_meteo if self._weather_provider_url else None,
            ),
        )
        return HealthReport.from_checks(checks, checked_at=self._clock())

    async def _run(self, name: str, check: Optional[Check]) -> DependencyCheck:
        if check is None:
            return DependencyCheck(
                name=name, state=HealthState.UNKNOWN, error="not configured"
            )

        start = perf_counter()
        try:
            state = await check()
        except Exception as exc:
            logger.warning("health.dependency_down", dependency=name, error=str(exc))
            return DependencyCheck(
                name=name,
                state=HealthState.DOWN,
                latency_ms=(perf_counter() - start) * 1000,
                error=str(exc),
            )
        return DependencyCheck(
            name=name, state=state, latency_ms=(perf_counter() - start) * 1000
        )

    async def _ping_mongo(self) -> HealthState:
        client = self._mongo_database.client
        await asyncio.to_thread(client.admin.command, "ping")
        return HealthState.UP

    async def _open_broker(self) -> HealthState:
        parameters = pika.URLParameters(self._broker_url)
        parameters.socket_timeout = self._timeout

        def _connect() -> None:
            pika.BlockingConnection(parameters).close()

        await asyncio.to_thread(_connect)
        return HealthState.UP

    async def _ping_redis(self) -> HealthState:
        client = aioredis.from_url(
            self._redis_url,
            socket_connect_timeout=self._timeout,
            socket_timeout=self._timeout,
        )
        try:
            await client.ping()
        finally:
            await client.aclose()
        return HealthState.UP

    async def _query_open_meteo(self) -> HealthState:
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.get(
                self._weather_provider_url, params=OPEN_METEO_CHECK_PARAMS
            )
        if response.status_code >= 500:
            response.raise_for_status()
        # 4xx: reachable, but refusing the query
        if response.status_code >= 400:
            return HealthState.DEGRADED
        return HealthState.UP
