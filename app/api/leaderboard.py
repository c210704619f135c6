"""
Leaderboard API router.
"""

import logging

from fastapi import APIRouter, Depends

from app.core.dependencies import get_current_user, get_leaderboard_service
from app.database.schemas import UserDBModel
from app.pydantic_models.leaderboard import LeaderboardEntry
from app.services.leaderboard_service import LeaderboardService

router = APIRouter(
    prefix="/api/v1/leaderboard",
    tags=["Leaderboard"],
)

logger = logging.getLogger(__name__)


@router.get("", response_model=list[LeaderboardEntry])
async def get_leaderboard(
    user: UserDBModel = Depends(get_current_user),
    service: LeaderboardService = Depends(get_leaderboard_service),
):
    """
    Rank every company by green score.

    Companies without a profile or without any emission record are left out.
    The leaderboard is recomputed on every request.
    """
    logger.info(f"Leaderboard requested by user {user.id}")
    return await service.get_leaderboard()
