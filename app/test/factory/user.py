"""
Factory for User models.
"""
from datetime import datetime

import factory

from app.database.schemas import UserDBModel
from app.test.factory.base_factory import AsyncSQLAlchemyFactory
from app.test.factory.create_async_session import async_session


class UserFactory(AsyncSQLAlchemyFactory):
    """Factory for creating User test instances."""

    class Meta:
        model = UserDBModel
        sqlalchemy_session = async_session
        sqlalchemy_session_persistence = "commit"

    id = factory.Sequence(lambda n: f"user-{n}")
    email = factory.LazyAttribute(lambda obj: f"{obj.id}@example.com")
    first_name = "Test"
    last_name = factory.Sequence(lambda n: f"User {n}")
    profile_image_url = None
    created_at = factory.LazyFunction(datetime.utcnow)
    updated_at = factory.LazyFunction(datetime.utcnow)
