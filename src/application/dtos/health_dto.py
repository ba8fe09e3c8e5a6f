"""DTO for the ``GET /health`` response."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.domain.entities.health import DependencyCheck, HealthReport, HealthState


class DependencyCheckDTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status: HealthState
    latency_ms: Optional[float] = Field(
        default=None, description="Round trip of the check in milliseconds"
    )
    error: Optional[str] = None

    @classmethod
    def from_domain(cls, check: DependencyCheck) -> "DependencyCheckDTO":
        latency = None if check.latency_ms is None else round(check.latency_ms, 1)
        return cls(status=check.state, latency_ms=latency, error=check.error)


class HealthReportDTO(BaseModel):
    """Aggregate state plus one entry per dependency, keyed by name."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status: HealthState
    checked_at: datetime
    dependencies: Dict[str, DependencyCheckDTO] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, report: HealthReport) -> "HealthReportDTO":
        return cls(
            status=report.state,
            checked_at=report.checked_at,
            dependencies={
                check.name: DependencyCheckDTO.from_domain(check)
                for check in report.checks
            },
        )
