"""Use case behind the ``/health`` endpoint."""

from src.application.dtos.health_dto import HealthReportDTO
from src.domain.entities.health import HealthState
from src.domain.ports.dependency_probe import IDependencyProbe
from src.shared import get_logger

logger = get_logger(__name__)


class CheckHealthUseCase:
    """Check MongoDB, the broker pair and Open-Meteo."""

    def __init__(self, dependency_probe: IDependencyProbe) -> None:
        self._dependency_probe = dependency_probe

    async def execute(self) -> HealthReportDTO:
        report = await self._dependency_probe.check_dependencies()
        if report.state is not HealthState.UP:
            logger.warning(
                "health.dependencies_unhealthy",
                state=report.state.value,
                failing=list(report.failing),
            )
        return HealthReportDTO.from_domain(report)
