"""
Repository for EmissionRecord database operations.

Records are append-only, so only create and read operations are exposed.
"""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.repositories.base import BaseRepository
from app.database.schemas import EmissionRecordDBModel
from app.utils.constants import DEFAULT_HISTORY_LIMIT


class EmissionRecordRepository(BaseRepository[EmissionRecordDBModel]):
    """Repository for emission record operations."""

    def __init__(self, session: AsyncSession):
        """
        Initialize emission record repository.

        Args:
            session: Async database session
        """
        super().__init__(EmissionRecordDBModel, session)

    async def get_latest_for_user(
        self, user_id: str
    ) -> Optional[EmissionRecordDBModel]:
        """
        Get the most recent emission record of a user.

        Args:
            user_id: Owning user id

        Returns:
            Latest record, or None if the user never ran a calculation
        """
        stmt = (
            select(self.model)
            .where(self.model.user_id == user_id)
            .order_by(self.model.created_at.desc(), self.model.id.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_recent_for_user(
        self, user_id: str, limit: int = DEFAULT_HISTORY_LIMIT
    ) -> List[EmissionRecordDBModel]:
        """
        Get the last ``limit`` emission records of a user, newest first.

        Args:
            user_id: Owning user id
            limit: Maximum number of records to return

        Returns:
            List of emission records ordered by created_at descending
        """
        stmt = (
            select(self.model)
            .where(self.model.user_id == user_id)
            .order_by(self.model.created_at.desc(), self.model.id.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
