"""
MongoDB Energy Generation Record Repository - Infrastructure Layer

This module implements the energy record repository interface using MongoDB
as the underlying data store. Documents use the camelCase field names shared
with the frontend: ``serialNumber``, ``timestamp``, ``energyGenerated`` and
``intervalHours``.
"""

from datetime import timezone
from typing import Any, Dict, List, Sequence
from uuid import UUID

import structlog
from pymongo import DESCENDING
from pymongo.errors import PyMongoError

from src.domain.entities.energy import EnergyGenerationRecord
from src.domain.entities.errors import EnergyRecordPersistenceError
from src.domain.repositories.energy_record_repository import (
    IEnergyGenerationRecordRepository,
)
from src.infrastructure.database import ENERGY_RECORDS_COLLECTION, MongoDatabase
from src.shared import DEFAULT_INTERVAL_HOURS

logger = structlog.get_logger(__name__)


class EnergyGenerationRecordRepository(IEnergyGenerationRecordRepository):
    """MongoDB implementation of the energy generation record repository."""

    COLLECTION_NAME = ENERGY_RECORDS_COLLECTION

    def __init__(self, mongo_database: MongoDatabase):
        """
        Args:
            mongo_database: MongoDB database client
        """
        self.db = mongo_database

    def _to_document(self, record: EnergyGenerationRecord) -> Dict[str, Any]:
        """Convert a record entity to a MongoDB document."""
        return {
            "id": str(record.id),
            "serialNumber": record.serial_number,
            "timestamp": record.timestamp,
            "energyGenerated": int(record.energy_generated),
            "intervalHours": record.interval_hours,
        }

    def _to_entity(self, document: Dict[str, Any]) -> EnergyGenerationRecord:
        """Convert a MongoDB document to a record entity."""
        timestamp = document["timestamp"]
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)

        return EnergyGenerationRecord(
            id=UUID(document["id"]),
            serial_number=document["serialNumber"],
            timestamp=timestamp,
            energy_generated=int(document["energyGenerated"]),
            interval_hours=int(document.get("intervalHours", DEFAULT_INTERVAL_HOURS)),
        )

    async def create(self, record: EnergyGenerationRecord) -> EnergyGenerationRecord:
        try:
            await self.db.insert_one(self.COLLECTION_NAME, self._to_document(record))
            return record
        except PyMongoError as e:
            logger.error(
                "energy_records.create_failed",
                serial_number=record.serial_number,
                error=str(e),
            )
            raise EnergyRecordPersistenceError(
                f"Failed to store energy record: {e}",
                details={"serial_number": record.serial_number},
            ) from e

    async def create_many(self, records: Sequence[EnergyGenerationRecord]) -> int:
        try:
            return await self.db.insert_many(
                self.COLLECTION_NAME, [self._to_document(record) for record in records]
            )
        except PyMongoError as e:
            logger.error(
                "energy_records.bulk_create_failed", count=len(records), error=str(e)
            )
            raise EnergyRecordPersistenceError(
                f"Failed to store energy records: {e}"
            ) from e

    async def find_by_serial_number(
        self, serial_number: str, skip: int = 0, limit: int = 100
    ) -> List[EnergyGenerationRecord]:
        try:
            documents = await self.db.find_many(
                self.COLLECTION_NAME,
                {"serialNumber": serial_number},
                sort_by="timestamp",
                sort_direction=DESCENDING,
                skip=skip,
                limit=limit,
            )
        except PyMongoError as e:
            logger.error(
                "energy_records.find_failed", serial_number=serial_number, error=str(e)
            )
            raise EnergyRecordPersistenceError(
                f"Failed to read energy records: {e}",
                details={"serial_number": serial_number},
            ) from e

        return [self._to_entity(document) for document in documents]

    async def delete_by_serial_number(self, serial_number: str) -> int:
        try:
            return await self.db.delete_many(
                self.COLLECTION_NAME, {"serialNumber": serial_number}
            )
        except PyMongoError as e:
            logger.error(
                "energy_records.delete_failed", serial_number=serial_number, error=str(e)
            )
            raise EnergyRecordPersistenceError(
                f"Failed to delete energy records: {e}",
                details={"serial_number": serial_number},
            ) from e
