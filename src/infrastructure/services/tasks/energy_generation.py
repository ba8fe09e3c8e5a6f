"""Celery task appending one synthetic energy record per scheduler tick."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Any, Optional

from src.infrastructure.services.celery_config import (
    GENERATE_ENERGY_RECORD_TASK,
    celery_app,
)
from src.infrastructure.services.tasks.base import ScheduledTickTask, logger
from src.infrastructure.settings import get_settings


@celery_app.task(
    bind=True, base=ScheduledTickTask, name=GENERATE_ENERGY_RECORD_TASK
)
def generate_energy_record(self) -> Optional[dict[str, Any]]:
    """Generate and store the reading for the current instant.

    Failures are logged with the tick timestamp and swallowed so the
    schedule keeps firing.
    """

    timestamp = datetime.now(timezone.utc)
    database = None

    try:
        from src.application.use_cases.energy_use_cases import (
            GenerateEnergyRecordUseCase,
        )
        from src.domain.services.energy_generator import EnergyGenerator
        from src.infrastructure.database.mongo_database import MongoDatabase
        from src.infrastructure.repositories.energy_record_repository import (
            EnergyGenerationRecordRepository,
        )

        settings = get_settings()
        database = MongoDatabase(
            mongo_uri=settings.database.mongo_uri,
            db_name=settings.database.database_name,
        )
        use_case = GenerateEnergyRecordUseCase(
            energy_record_repository=EnergyGenerationRecordRepository(database),
            energy_generator=EnergyGenerator(),
            serial_number=settings.energy.solar_unit_serial,
            interval_hours=settings.energy.interval_hours,
        )

        record = asyncio.run(use_case.execute(timestamp))
        return record.model_dump(mode="json", by_alias=True)

    except Exception as exc:
        logger.error(
            "energy.record_failed",
            timestamp=timestamp.isoformat(),
            error=str(exc),
            exc_info=exc,
        )
        return None

    finally:
        if database is not None:
            database.close()
