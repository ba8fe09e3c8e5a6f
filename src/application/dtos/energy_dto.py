"""
Energy DTOs - Application Layer

Transfer objects for energy generation records and backfill results.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.domain.entities.energy import EnergyGenerationRecord


class EnergyGenerationRecordDTO(BaseModel):
    """A persisted energy reading as exposed over HTTP."""

    id: UUID
    serial_number: str
    timestamp: datetime
    energy_generated: int
    interval_hours: int

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
                "serialNumber": "SU-0001",
                "timestamp": "2025-10-12T12:00:00Z",
                "energyGenerated": 412,
                "intervalHours": 2,
            }
        },
    )

    @classmethod
    def from_domain(cls, record: EnergyGenerationRecord) -> "EnergyGenerationRecordDTO":
        return cls(
            id=record.id,
            serial_number=record.serial_number,
            timestamp=record.timestamp,
            energy_generated=record.energy_generated,
            interval_hours=record.interval_hours,
        )


class BackfillResultDTO(BaseModel):
    """Summary of a backfill run."""

    serial_number: str
    start: datetime
    end: datetime
    interval_hours: int
    deleted: int
    inserted: int
