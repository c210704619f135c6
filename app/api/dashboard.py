"""
Dashboard API router.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_current_user, get_db_session
from app.database.repositories import EmissionRecordRepository
from app.database.schemas import UserDBModel
from app.pydantic_models.emission import EmissionRecordPydModel

router = APIRouter(
    prefix="/api/v1/dashboard",
    tags=["Dashboard"],
)

logger = logging.getLogger(__name__)


@router.get("/latest", response_model=EmissionRecordPydModel)
async def get_latest_record(
    user: UserDBModel = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Get the caller's most recent emission record."""
    repo = EmissionRecordRepository(session)
    record = await repo.get_latest_for_user(user.id)

    if not record:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No emission records found",
        )

    return record
