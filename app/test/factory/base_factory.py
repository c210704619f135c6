"""
Base factory for async SQLAlchemy models.
"""
import asyncio
import inspect
from typing import Any

import factory
from factory.alchemy import SQLAlchemyOptions
from sqlalchemy import select

from app.database import Base


class AsyncSQLAlchemyFactory(factory.Factory):
    """
    Factory whose ``create`` returns an awaitable that commits the instance.

    ``await UserFactory(id="u-1")`` gives back the persisted model. A
    SubFactory used for a foreign key column resolves to the primary key of
    the row it created.
    """

    _options_class = SQLAlchemyOptions

    class Meta:
        abstract = True

    @classmethod
    def _create(cls, model_class, *args, **kwargs):
        """
        Create instance and return it as a Task.

        A Task can be awaited multiple times, unlike a coroutine.
        """
        async def maker_coroutine():
            for key, value in kwargs.items():
                if inspect.isawaitable(value):
                    value = await value
                if isinstance(value, Base):
                    value = value.id
                kwargs[key] = value

            if cls._meta.sqlalchemy_get_or_create:
                return await cls._get_or_create(model_class, **kwargs)
            return await cls._save(model_class, *args, **kwargs)

        return asyncio.create_task(maker_coroutine())

    @classmethod
    async def _get_or_create(cls, model_class, **kwargs) -> Any:
        """
        Return the row matching the ``sqlalchemy_get_or_create`` fields, or create it.
        """
        lookup_fields = {
            field: kwargs[field] for field in cls._meta.sqlalchemy_get_or_create
        }
        async with cls._meta.sqlalchemy_session() as session:
            stmt = select(model_class)
            for key, value in lookup_fields.items():
                stmt = stmt.where(getattr(model_class, key) == value)
            result = await session.execute(stmt)
            instance = result.scalars().first()

        if instance:
            return instance
        return await cls._save(model_class, **kwargs)

    @classmethod
    async def _save(cls, model_class, *args, **kwargs) -> Any:
        """
        Add the instance to a fresh session and commit.
        """
        async with cls._meta.sqlalchemy_session() as session:
            obj = model_class(*args, **kwargs)
            session.add(obj)
            await session.commit()
            await session.refresh(obj)
            return obj

    @classmethod
    async def create_batch(cls, size: int, **kwargs) -> list[Any]:
        """
        Create ``size`` instances one after another.
        """
        return [await cls.create(**kwargs) for _ in range(size)]
