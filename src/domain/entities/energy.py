"""
Domain Entities - Energy Generation

A single reading of energy produced by a solar unit over an interval.
Records are append-only: this service creates them and never updates them.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from src.shared.consts import DEFAULT_INTERVAL_HOURS


@dataclass
class EnergyGenerationRecord:
    """Energy generated by a solar unit, in watt-hours."""

    serial_number: str
    timestamp: datetime
    energy_generated: int
    interval_hours: int = DEFAULT_INTERVAL_HOURS
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        if self.energy_generated < 0:
            raise ValueError("energy_generated must be non-negative")
