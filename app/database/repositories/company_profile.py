"""
Repository for CompanyProfile database operations.
"""
import logging
from typing import Any, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.repositories.base import BaseRepository
from app.database.schemas import CompanyProfileDBModel

logger = logging.getLogger(__name__)


class CompanyProfileRepository(BaseRepository[CompanyProfileDBModel]):
    """Repository for company profile operations."""

    def __init__(self, session: AsyncSession):
        """
        Initialize company profile repository.

        Args:
            session: Async database session
        """
        super().__init__(CompanyProfileDBModel, session)

    async def get_by_user_id(self, user_id: str) -> Optional[CompanyProfileDBModel]:
        """
        Get the profile owned by a user.

        Args:
            user_id: Owning user id

        Returns:
            Profile if the user has submitted one, None otherwise
        """
        stmt = select(self.model).where(self.model.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def upsert(self, user_id: str, **data: Any) -> CompanyProfileDBModel:
        """
        Create the user's profile, or replace its fields if it already exists.

        Args:
            user_id: Owning user id
            **data: company_name, sector, total_distance, load_efficiency,
                renewable_share

        Returns:
            The stored profile
        """
        profile = await self.get_by_user_id(user_id)

        if profile is None:
            logger.info(f"Creating company profile for user {user_id}")
            return await self.create(user_id=user_id, **data)

        logger.info(f"Updating company profile for user {user_id}")
        for field, value in data.items():
            setattr(profile, field, value)
        await self.session.flush()
        await self.session.refresh(profile)
        return profile

    async def get_all_profiles(self) -> List[CompanyProfileDBModel]:
        """
        Get every company profile, oldest first.

        Profiles created in the same instant are ordered by id so the
        result is the same on every call.

        Returns:
            List of profiles
        """
        stmt = select(self.model).order_by(
            self.model.created_at.asc(), self.model.id.asc()
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
