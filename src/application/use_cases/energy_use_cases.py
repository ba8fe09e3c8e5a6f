"""
Energy Use Cases - Application Layer

Generation of synthetic energy records (one per scheduler tick, or a whole
historical series for backfill) and retrieval of a unit's records.
"""

from datetime import datetime
from typing import List

from src.application.dtos.energy_dto import (
    BackfillResultDTO,
    EnergyGenerationRecordDTO,
)
from src.domain.entities.energy import EnergyGenerationRecord
from src.domain.repositories.energy_record_repository import (
    IEnergyGenerationRecordRepository,
)
from src.domain.services.energy_generator import EnergyGenerator
from src.shared import DEFAULT_INTERVAL_HOURS, get_logger

logger = get_logger(__name__)


class GenerateEnergyRecordUseCase:
    """Generate and persist the reading for one scheduler tick."""

    def __init__(
        self,
        energy_record_repository: IEnergyGenerationRecordRepository,
        energy_generator: EnergyGenerator,
        serial_number: str,
        interval_hours: int = DEFAULT_INTERVAL_HOURS,
    ) -> None:
        self._repository = energy_record_repository
        self._generator = energy_generator
        self._serial_number = serial_number
        self._interval_hours = interval_hours

    async def execute(self, timestamp: datetime) -> EnergyGenerationRecordDTO:
        """
        Generate the reading for ``timestamp`` and append it to the store.

        Raises:
            EnergyRecordPersistenceError: If the record cannot be written
        """
        record = EnergyGenerationRecord(
            serial_number=self._serial_number,
            timestamp=timestamp,
            energy_generated=self._generator.calculate(timestamp),
            interval_hours=self._interval_hours,
        )

        await self._repository.create(record)

        logger.info(
            "energy.record_generated",
            serial_number=record.serial_number,
            timestamp=timestamp.isoformat(),
            energy_generated=record.energy_generated,
        )
        return EnergyGenerationRecordDTO.from_domain(record)


class BackfillEnergyRecordsUseCase:
    """Regenerate a unit's historical series in one batch."""

    def __init__(
        self,
        energy_record_repository: IEnergyGenerationRecordRepository,
        energy_generator: EnergyGenerator,
    ) -> None:
        self._repository = energy_record_repository
        self._generator = energy_generator

    async def execute(
        self,
        serial_number: str,
        start: datetime,
        end: datetime,
        interval_hours: int = DEFAULT_INTERVAL_HOURS,
        clear_existing: bool = True,
    ) -> BackfillResultDTO:
        if end < start:
            raise ValueError("Backfill end must not be before start")

        deleted = 0
        if clear_existing:
            deleted = await self._repository.delete_by_serial_number(serial_number)
            logger.info(
                "energy.backfill.cleared", serial_number=serial_number, deleted=deleted
            )

        records = self._generator.generate_series(
            serial_number, start, end, interval_hours
        )
        inserted = await self._repository.create_many(records)

        logger.info(
            "energy.backfill.completed",
            serial_number=serial_number,
            start=start.isoformat(),
            end=end.isoformat(),
            inserted=inserted,
        )
        return BackfillResultDTO(
            serial_number=serial_number,
            start=start,
            end=end,
            interval_hours=interval_hours,
            deleted=deleted,
            inserted=inserted,
        )


class GetEnergyRecordsUseCase:
    """List a solar unit's records, newest first."""

    def __init__(
        self, energy_record_repository: IEnergyGenerationRecordRepository
    ) -> None:
        self._repository = energy_record_repository

    async def execute(
        self, serial_number: str, skip: int = 0, limit: int = 100
    ) -> List[EnergyGenerationRecordDTO]:
        records = await self._repository.find_by_serial_number(
            serial_number, skip=skip, limit=limit
        )
        return [EnergyGenerationRecordDTO.from_domain(record) for record in records]
