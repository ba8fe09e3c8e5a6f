"""
Energy Records Router - Presentation Layer

This module defines the FastAPI router exposing the stored energy
generation records of a solar unit.
"""

from typing import List, Union

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from src.application.dtos.energy_dto import EnergyGenerationRecordDTO
from src.application.use_cases.energy_use_cases import GetEnergyRecordsUseCase
from src.domain.entities.errors import EnergyRecordPersistenceError

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/energy-generation-records", tags=["Energy Records"])


@router.get(
    "/solar-unit/{serial_number}",
    response_model=List[EnergyGenerationRecordDTO],
)
@inject
async def get_records_by_solar_unit(
    serial_number: str,
    skip: int = Query(0, ge=0, description="Number of records to skip"),
    limit: int = Query(
        100, ge=1, le=1000, description="Maximum number of records to return"
    ),
    get_energy_records_use_case: GetEnergyRecordsUseCase = Depends(
        Provide["get_energy_records_use_case"]
    ),
) -> Union[List[EnergyGenerationRecordDTO], JSONResponse]:
    """List a solar unit's energy generation records, newest first."""
    try:
        return await get_energy_records_use_case.execute(
            serial_number, skip=skip, limit=limit
        )
    except EnergyRecordPersistenceError as e:
        logger.error(
            "energy_records.request_failed",
            serial_number=serial_number,
            error=e.message,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Failed to fetch energy generation records",
                "message": e.message,
            },
        )
