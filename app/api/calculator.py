"""
Emissions Calculator API router.

Calculate baseline vs. optimized emissions and browse past calculations.
"""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import (
    get_current_user,
    get_db_session,
    get_emission_factors,
)
from app.database.repositories import EmissionRecordRepository
from app.database.schemas import UserDBModel
from app.pydantic_models.emission import EmissionInput, EmissionRecordPydModel
from app.services.calculators.emission_factors import EmissionFactors
from app.services.emission_service import EmissionCalculationService
from app.utils.constants import DEFAULT_HISTORY_LIMIT, MAX_HISTORY_LIMIT

router = APIRouter(
    prefix="/api/v1/calculator",
    tags=["Calculator"],
)

logger = logging.getLogger(__name__)


@router.post("/calculate", response_model=EmissionRecordPydModel)
async def calculate_emissions(
    emission_input: EmissionInput,
    user: UserDBModel = Depends(get_current_user),
    factors: EmissionFactors = Depends(get_emission_factors),
    session: AsyncSession = Depends(get_db_session),
):
    """
    Calculate emissions for the submitted activity data.

    The result is stored as a new record in the caller's history and returned.

    Example:
        ```
        POST /api/v1/calculator/calculate
        {
            "car_km": 1000, "truck_km": 0, "plane_hours": 0,
            "forklift_hours": 0, "heating_kwh": 0,
            "lighting_cooling_it_kwh": 0, "subcontractors_tons": 0,
            "ev_share": 50, "km_reduction": 20, "plane_load_factor": 100
        }
        ```
    """
    logger.info(f"Calculating emissions for user {user.id}")

    service = EmissionCalculationService(session, factors)
    record = await service.calculate_and_store(user.id, emission_input)
    await session.commit()

    return record


@router.get("/history", response_model=list[EmissionRecordPydModel])
async def get_calculation_history(
    limit: int = Query(
        DEFAULT_HISTORY_LIMIT,
        ge=1,
        le=MAX_HISTORY_LIMIT,
        description="Number of most recent records to return",
    ),
    user: UserDBModel = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Get the caller's most recent emission records, newest first."""
    repo = EmissionRecordRepository(session)
    return await repo.get_recent_for_user(user.id, limit=limit)
