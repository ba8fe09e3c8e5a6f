"""Health endpoint used by container orchestration and the dashboard."""

from typing import Union

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from src.application.dtos.health_dto import HealthReportDTO
from src.application.use_cases.health_use_cases import CheckHealthUseCase
from src.domain.entities.health import HealthState
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthReportDTO,
    responses={503: {"description": "A dependency is down"}},
)
@inject
async def health(
    response: Response,
    check_health_use_case: CheckHealthUseCase = Depends(
        Provide["check_health_use_case"]
    ),
) -> Union[HealthReportDTO, JSONResponse]:
    """Report MongoDB, RabbitMQ, Redis and Open-Meteo reachability."""
    try:
        report = await check_health_use_case.execute()
    except Exception as exc:
        logger.error("health.check_failed", error=str(exc), exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"error": "Health check failed", "message": str(exc)},
        )

    if report.status is HealthState.DOWN:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return report
