"""
Domain Repository Interface - Energy Generation Records

This module defines the repository interface for energy record persistence.
The store is append-only from the point of view of this service; the only
removal is the bulk reset performed before a backfill.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence

from src.domain.entities.energy import EnergyGenerationRecord


class IEnergyGenerationRecordRepository(ABC):
    """Interface for energy generation record repository."""

    @abstractmethod
    async def create(self, record: EnergyGenerationRecord) -> EnergyGenerationRecord:
        """Persist a single record."""
        pass

    @abstractmethod
    async def create_many(self, records: Sequence[EnergyGenerationRecord]) -> int:
        """Persist records in one batch and return how many were written."""
        pass

    @abstractmethod
    async def find_by_serial_number(
        self, serial_number: str, skip: int = 0, limit: int = 100
    ) -> List[EnergyGenerationRecord]:
        """Return a unit's records, newest first."""
        pass

    @abstractmethod
    async def delete_by_serial_number(self, serial_number: str) -> int:
        """Remove every record of a unit and return how many were deleted."""
        pass
