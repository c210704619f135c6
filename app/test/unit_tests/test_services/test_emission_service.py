"""
Service tests for persisting calculations and assembling the leaderboard.
"""

from datetime import datetime, timedelta

import pytest

from app.database.repositories import EmissionRecordRepository
from app.pydantic_models.emission import EmissionInput
from app.services.emission_service import EmissionCalculationService
from app.services.leaderboard_service import LeaderboardService, fetch_latest_record
from app.test.factory.company_profile import CompanyProfileFactory
from app.test.factory.emission_record import EmissionRecordFactory
from app.test.factory.user import UserFactory

CAR_EXAMPLE = {
    "car_km": 1000,
    "truck_km": 0,
    "plane_hours": 0,
    "forklift_hours": 0,
    "heating_kwh": 0,
    "lighting_cooling_it_kwh": 0,
    "subcontractors_tons": 0,
    "ev_share": 50,
    "km_reduction": 20,
    "plane_load_factor": 100,
}


@pytest.mark.asyncio
async def test_calculate_and_store_persists_inputs_and_results(test_db_session):
    user = await UserFactory()

    service = EmissionCalculationService(test_db_session)
    record = await service.calculate_and_store(user.id, EmissionInput(**CAR_EXAMPLE))
    await test_db_session.commit()

    assert record.id is not None
    assert record.user_id == user.id
    assert record.car_km == 1000
    assert record.ev_share == 50
    assert record.baseline_cars == pytest.approx(0.18)
    assert record.optimized_cars == pytest.approx(0.0936)
    assert record.optimized_total == pytest.approx(0.0936)

    stored = await EmissionRecordRepository(test_db_session).get_latest_for_user(user.id)
    assert stored.id == record.id


@pytest.mark.asyncio
async def test_each_calculation_appends_a_record(test_db_session):
    user = await UserFactory()
    service = EmissionCalculationService(test_db_session)

    for car_km in (100, 200, 300):
        await service.calculate_and_store(
            user.id, EmissionInput(**{**CAR_EXAMPLE, "car_km": car_km})
        )
    await test_db_session.commit()

    repo = EmissionRecordRepository(test_db_session)
    assert await repo.count(filters={"user_id": user.id}) == 3


@pytest.mark.asyncio
async def test_fetch_latest_record_returns_newest(test_db_session):
    user = await UserFactory()
    now = datetime.utcnow()
    await EmissionRecordFactory(
        user_id=user.id, optimized_total=9.0, created_at=now - timedelta(days=2)
    )
    newest = await EmissionRecordFactory(
        user_id=user.id, optimized_total=4.0, created_at=now
    )

    record = await fetch_latest_record(user.id)

    assert record.id == newest.id
    assert record.optimized_total == 4.0


@pytest.mark.asyncio
async def test_fetch_latest_record_without_records(test_db_session):
    user = await UserFactory()

    assert await fetch_latest_record(user.id) is None


@pytest.mark.asyncio
async def test_leaderboard_service_ranks_latest_records(test_db_session):
    now = datetime.utcnow()
    leader = await CompanyProfileFactory(total_distance=100000)
    runner_up = await CompanyProfileFactory(total_distance=100000)
    without_record = await CompanyProfileFactory()

    await EmissionRecordFactory(user_id=leader.user_id, optimized_total=2.0)
    # an old, worse record of the leader is ignored in favour of the latest one
    await EmissionRecordFactory(
        user_id=leader.user_id, optimized_total=50.0, created_at=now - timedelta(days=30)
    )
    await EmissionRecordFactory(user_id=runner_up.user_id, optimized_total=8.0)

    leaderboard = await LeaderboardService().get_leaderboard()

    assert [entry.user_id for entry in leaderboard] == [
        leader.user_id,
        runner_up.user_id,
    ]
    assert without_record.user_id not in [entry.user_id for entry in leaderboard]
    assert leaderboard[0].co2_emissions == 2.0
    assert [entry.rank for entry in leaderboard] == [1, 2]
