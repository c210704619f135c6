"""
FastAPI dependencies shared by the routers.
"""
import logging
from typing import AsyncGenerator

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Config
from app.database.repositories import UserRepository
from app.database.schemas import UserDBModel
from app.database.session_manager.db_session import Database
from app.services.calculators.emission_factors import EmissionFactors
from app.services.leaderboard_service import LeaderboardService
from app.services.rankers.green_score_ranker import GreenScoreRanker
from app.utils.constants import DEFAULT_MAX_CONCURRENT_LOOKUPS, IdentityHeader

logger = logging.getLogger(__name__)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session committed when the request handler succeeds."""
    async with Database() as session:
        yield session


def get_app_config(request: Request) -> Config:
    """Return the configuration the application was created with."""
    return request.app.state.config


def get_emission_factors(config: Config = Depends(get_app_config)) -> EmissionFactors:
    """Emission factors from the ``[emission_factors]`` config table."""
    return EmissionFactors.from_config(config)


def get_leaderboard_service(
    config: Config = Depends(get_app_config),
) -> LeaderboardService:
    """Leaderboard service honouring ``leaderboard.max_concurrent_lookups``."""
    max_lookups = config.section("leaderboard").get(
        "max_concurrent_lookups", DEFAULT_MAX_CONCURRENT_LOOKUPS
    )
    return LeaderboardService(GreenScoreRanker(max_concurrent_lookups=max_lookups))


async def get_current_user(
    request: Request,
    config: Config = Depends(get_app_config),
    session: AsyncSession = Depends(get_db_session),
) -> UserDBModel:
    """
    Resolve the authenticated user from the identity provider headers.

    The user row is created on first sight and its claims refreshed on later
    requests.

    Raises:
        HTTPException: 401 when the user id header is missing
    """
    header = config.section("auth").get("user_id_header", IdentityHeader.USER_ID)
    user_id = request.headers.get(header, "").strip()
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    repo = UserRepository(session)
    user = await repo.upsert(
        user_id,
        email=request.headers.get(IdentityHeader.EMAIL),
        first_name=request.headers.get(IdentityHeader.FIRST_NAME),
        last_name=request.headers.get(IdentityHeader.LAST_NAME),
        profile_image_url=request.headers.get(IdentityHeader.PROFILE_IMAGE_URL),
    )
    await session.commit()
    return user
