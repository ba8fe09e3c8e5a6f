"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from src.application.use_cases.energy_use_cases import (
    BackfillEnergyRecordsUseCase,
    GetEnergyRecordsUseCase,
)
from src.application.use_cases.health_use_cases import CheckHealthUseCase
from src.application.use_cases.weather_use_cases import GetWeatherUseCase
from src.domain.services.energy_generator import EnergyGenerator
from src.infrastructure.cache import InMemoryWeatherCache
from src.infrastructure.database import MongoDatabase
from src.infrastructure.gateways.open_meteo_gateway import OpenMeteoGateway
from src.infrastructure.repositories.energy_record_repository import (
    EnergyGenerationRecordRepository,
)
from src.infrastructure.services.dependency_probe import DependencyHealthProbe
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Infrastructure
    mongo_database = providers.Singleton(
        MongoDatabase,
        mongo_uri=config.database.mongo_uri,
        db_name=config.database.database_name,
    )

    energy_record_repository = providers.Singleton(
        EnergyGenerationRecordRepository,
        mongo_database=mongo_database,
    )

    # One cache per process, shared by every request
    weather_cache = providers.Singleton(
        InMemoryWeatherCache,
        ttl_seconds=config.weather.cache_ttl_seconds,
    )

    # Gateways
    weather_gateway = providers.Singleton(
        OpenMeteoGateway,
        base_url=config.weather.provider_url,
        timeout=config.weather.timeout,
    )

    # Domain services
    energy_generator = providers.Factory(EnergyGenerator)

    # Application (use cases)
    get_weather_use_case = providers.Factory(
        GetWeatherUseCase,
        weather_gateway=weather_gateway,
        weather_cache=weather_cache,
    )

    get_energy_records_use_case = providers.Factory(
        GetEnergyRecordsUseCase,
        energy_record_repository=energy_record_repository,
    )

    backfill_energy_records_use_case = providers.Factory(
        BackfillEnergyRecordsUseCase,
        energy_record_repository=energy_record_repository,
        energy_generator=energy_generator,
    )

    dependency_probe = providers.Singleton(
        DependencyHealthProbe,
        mongo_database=mongo_database,
        broker_url=config.celery.broker_url,
        redis_url=config.celery.result_backend_url,
        weather_provider_url=config.weather.provider_url,
    )

    check_health_use_case = providers.Factory(
        CheckHealthUseCase,
        dependency_probe=dependency_probe,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for external resources.

    Creates the energy record indexes on startup and closes the MongoDB
    client on shutdown.
    """
    container = get_container()
    mongo_database = container.mongo_database()

    try:
        logger.info("container.mongo.ensure_connection")
        await mongo_database.create_indexes()
        logger.info("container.resources.initialized")
        yield container

    finally:
        logger.info("container.mongo.close")
        mongo_database.close()
        logger.info("container.resources.shutdown")
