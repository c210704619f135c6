"""
Company Profile API router.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_current_user, get_db_session
from app.database.repositories import CompanyProfileRepository
from app.database.schemas import UserDBModel
from app.pydantic_models.company_profile import (
    CompanyProfileCreate,
    CompanyProfilePydModel,
)

router = APIRouter(
    prefix="/api/v1/profile",
    tags=["Company Profile"],
)

logger = logging.getLogger(__name__)


@router.get("", response_model=CompanyProfilePydModel)
async def get_profile(
    user: UserDBModel = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Get the caller's company profile."""
    repo = CompanyProfileRepository(session)
    profile = await repo.get_by_user_id(user.id)

    if not profile:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not found",
        )

    return profile


@router.post("", response_model=CompanyProfilePydModel)
async def save_profile(
    profile_data: CompanyProfileCreate,
    user: UserDBModel = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    """
    Create or replace the caller's company profile.

    The owner is always the authenticated user; a user_id in the body is ignored.
    """
    repo = CompanyProfileRepository(session)
    profile = await repo.upsert(user.id, **profile_data.model_dump())
    await session.commit()

    return profile
