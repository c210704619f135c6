"""
Repository for User database operations.
"""
import logging
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.database.repositories.base import BaseRepository
from app.database.schemas import UserDBModel

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[UserDBModel]):
    """Repository for user operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(UserDBModel, session)

    async def get(self, user_id: str) -> Optional[UserDBModel]:
        """Get a user by identity provider subject id."""
        return await self.get_by_id(user_id)

    async def upsert(self, user_id: str, **claims: Any) -> UserDBModel:
        """
        Insert the user or refresh the claims of an existing one.

        Claims that are None are left untouched on an existing row so a request
        without optional identity headers does not wipe them.

        Args:
            user_id: Identity provider subject id
            **claims: email, first_name, last_name, profile_image_url

        Returns:
            The stored user
        """
        user = await self.get(user_id)
        if user is None:
            logger.info(f"Registering new user {user_id}")
            return await self.create(id=user_id, **claims)

        changed = False
        for field, value in claims.items():
            if value is not None and getattr(user, field) != value:
                setattr(user, field, value)
                changed = True

        if changed:
            await self.session.flush()
            await self.session.refresh(user)
        return user
