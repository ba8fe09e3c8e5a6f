from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

import pytest
from pymongo.errors import PyMongoError

from src.domain.entities.energy import EnergyGenerationRecord
from src.domain.entities.errors import EnergyRecordPersistenceError
from src.infrastructure.database import ENERGY_RECORDS_COLLECTION
from src.infrastructure.repositories.energy_record_repository import (
    EnergyGenerationRecordRepository,
)


def _record(hour: int, serial_number: str = "SU-0001") -> EnergyGenerationRecord:
    return EnergyGenerationRecord(
        serial_number=serial_number,
        timestamp=datetime(2025, 8, 1, hour, tzinfo=timezone.utc),
        energy_generated=hour * 10,
    )


class _BrokenDatabase:
    async def insert_one(self, *args, **kwargs):
        raise PyMongoError("connection refused")

    async def insert_many(self, *args, **kwargs):
        raise PyMongoError("connection refused")

    async def find_many(self, *args, **kwargs):
        raise PyMongoError("connection refused")

    async def delete_many(self, *args, **kwargs):
        raise PyMongoError("connection refused")


@pytest.mark.asyncio
async def test_create_stores_camel_case_document(
    fake_mongo_database, sample_record
) -> None:
    repository = EnergyGenerationRecordRepository(fake_mongo_database)

    await repository.create(sample_record)

    collection = fake_mongo_database.get_collection(ENERGY_RECORDS_COLLECTION)
    document = collection.inserts[0]
    assert document == {
        "id": str(sample_record.id),
        "serialNumber": "SU-0001",
        "timestamp": sample_record.timestamp,
        "energyGenerated": 412,
        "intervalHours": 2,
    }


@pytest.mark.asyncio
async def test_find_by_serial_number_maps_entities(fake_mongo_database) -> None:
    repository = EnergyGenerationRecordRepository(fake_mongo_database)
    await repository.create_many([_record(8), _record(10), _record(12, "SU-0002")])

    records = await repository.find_by_serial_number("SU-0001")

    assert [record.timestamp.hour for record in records] == [10, 8]
    assert all(isinstance(record.id, UUID) for record in records)
    assert records[0].energy_generated == 100


@pytest.mark.asyncio
async def test_naive_timestamps_are_read_as_utc(fake_mongo_database) -> None:
    repository = EnergyGenerationRecordRepository(fake_mongo_database)
    await fake_mongo_database.insert_one(
        ENERGY_RECORDS_COLLECTION,
        {
            "id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
            "serialNumber": "SU-0001",
            "timestamp": datetime(2025, 8, 1, 8),
            "energyGenerated": 120,
        },
    )

    (record,) = await repository.find_by_serial_number("SU-0001")

    assert record.timestamp.tzinfo == timezone.utc
    assert record.interval_hours == 2


@pytest.mark.asyncio
async def test_delete_by_serial_number_counts(fake_mongo_database) -> None:
    repository = EnergyGenerationRecordRepository(fake_mongo_database)
    await repository.create_many([_record(8), _record(10), _record(12, "SU-0002")])

    assert await repository.delete_by_serial_number("SU-0001") == 2
    assert await repository.find_by_serial_number("SU-0001") == []


@pytest.mark.asyncio
async def test_driver_errors_are_wrapped(sample_record) -> None:
    repository = EnergyGenerationRecordRepository(_BrokenDatabase())

    with pytest.raises(EnergyRecordPersistenceError):
        await repository.create(sample_record)
    with pytest.raises(EnergyRecordPersistenceError):
        await repository.create_many([sample_record])
    with pytest.raises(EnergyRecordPersistenceError):
        await repository.find_by_serial_number("SU-0001")
    with pytest.raises(EnergyRecordPersistenceError):
        await repository.delete_by_serial_number("SU-0001")
