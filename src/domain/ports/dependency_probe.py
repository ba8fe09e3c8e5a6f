"""Port for checking the backend's external dependencies."""

from __future__ import annotations

from typing import Protocol

from src.domain.entities.health import HealthReport


class IDependencyProbe(Protocol):
    async def check_dependencies(self) -> HealthReport:
        """Check every dependency once and report the aggregate state."""
        ...
