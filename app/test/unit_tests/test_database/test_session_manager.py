"""
Tests for the async Database session manager.
"""

import pytest

from app.database.repositories import CompanyProfileRepository, UserRepository
from app.database.schemas import CompanyProfileDBModel, UserDBModel
from app.database.session_manager.db_session import Database
from app.database.session_manager.exceptions import (
    DatabaseNotInitialized,
    DatabaseTransactionError,
)
from app.test.factory.user import UserFactory


def make_profile(user_id, company_name):
    return CompanyProfileDBModel(
        user_id=user_id,
        company_name=company_name,
        sector="Road freight",
        total_distance=1000.0,
        load_efficiency=0.8,
        renewable_share=0.5,
    )


@pytest.mark.asyncio
async def test_session_before_init_raises():
    await Database.dispose()

    with pytest.raises(DatabaseNotInitialized):
        async with Database():
            pass


@pytest.mark.asyncio
async def test_session_commits_on_clean_exit(initialize_db_session):
    async with Database() as session:
        session.add(UserDBModel(id="committed"))

    async with Database() as session:
        assert await UserRepository(session).get("committed") is not None


@pytest.mark.asyncio
async def test_failed_commit_is_wrapped_and_rolled_back(initialize_db_session):
    user = await UserFactory()

    with pytest.raises(DatabaseTransactionError):
        async with Database() as session:
            session.add(UserDBModel(id="same-transaction"))
            # company_profiles.user_id is unique
            session.add_all(
                [make_profile(user.id, "First Co"), make_profile(user.id, "Second Co")]
            )

    async with Database() as session:
        assert await CompanyProfileRepository(session).count() == 0
        assert await UserRepository(session).get("same-transaction") is None


@pytest.mark.asyncio
async def test_error_inside_block_rolls_back(initialize_db_session):
    with pytest.raises(ValueError):
        async with Database() as session:
            session.add(UserDBModel(id="discarded"))
            await session.flush()
            raise ValueError("abort")

    async with Database() as session:
        assert await UserRepository(session).get("discarded") is None
