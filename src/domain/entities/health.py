"""
Domain Entities - Dependency Health

Reachability of the systems the backend relies on: MongoDB for the energy
records, the Celery broker and result backend behind the scheduler, and
the Open-Meteo forecast API.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Sequence, Tuple


class HealthState(str, Enum):
    UP = "UP"
    DEGRADED = "DEGRADED"
    DOWN = "DOWN"
    UNKNOWN = "UNKNOWN"


# Worst first; a report takes the worst state among its checks
_SEVERITY = (HealthState.DOWN, HealthState.DEGRADED, HealthState.UNKNOWN)


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Outcome of checking one dependency."""

    name: str
    state: HealthState
    latency_ms: Optional[float] = None
    error: Optional[str] = None


@dataclass(frozen=True, slots=True)
class HealthReport:
    state: HealthState
    checks: Tuple[DependencyCheck, ...]
    checked_at: datetime

    @classmethod
    def from_checks(
        cls, checks: Sequence[DependencyCheck], checked_at: datetime
    ) -> HealthReport:
        states = {check.state for check in checks}
        state = next((s for s in _SEVERITY if s in states), HealthState.UP)
        return cls(state=state, checks=tuple(checks), checked_at=checked_at)

    @property
    def failing(self) -> Tuple[str, ...]:
        return tuple(
            check.name for check in self.checks if check.state is not HealthState.UP
        )
