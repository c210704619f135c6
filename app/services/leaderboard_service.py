"""
Leaderboard assembly against the database.
"""

import logging

from app.database.repositories import (
    CompanyProfileRepository,
    EmissionRecordRepository,
)
from app.database.schemas import EmissionRecordDBModel
from app.database.session_manager.db_session import Database
from app.pydantic_models.leaderboard import LeaderboardEntry
from app.services.rankers.green_score_ranker import GreenScoreRanker

logger = logging.getLogger(__name__)


async def fetch_latest_record(user_id: str) -> EmissionRecordDBModel | None:
    """
    Fetch a user's latest emission record in a session of its own.

    A single AsyncSession cannot run queries concurrently, so every
    leaderboard lookup opens its own.
    """
    async with Database() as session:
        return await EmissionRecordRepository(session).get_latest_for_user(user_id)


class LeaderboardService:
    """Loads all company profiles and ranks them by green score."""

    def __init__(self, ranker: GreenScoreRanker | None = None):
        self.ranker = ranker or GreenScoreRanker()

    async def get_leaderboard(self) -> list[LeaderboardEntry]:
        """
        Build the current leaderboard.

        Returns:
            Ranked entries for every company with a profile and a record
        """
        async with Database() as session:
            profiles = await CompanyProfileRepository(session).get_all_profiles()

        logger.info(f"Ranking {len(profiles)} company profiles")
        return await self.ranker.build_leaderboard(profiles, fetch_latest_record)
