"""
Factory for EmissionRecord models.

Defaults describe 1000 km by car and 2000 km by truck with a 20% distance
reduction and half the car fleet electric.
"""
import uuid
from datetime import datetime

import factory

from app.database.schemas import EmissionRecordDBModel
from app.test.factory.base_factory import AsyncSQLAlchemyFactory
from app.test.factory.create_async_session import async_session
from app.test.factory.user import UserFactory


class EmissionRecordFactory(AsyncSQLAlchemyFactory):
    """Factory for creating EmissionRecord test instances."""

    class Meta:
        model = EmissionRecordDBModel
        sqlalchemy_session = async_session
        sqlalchemy_session_persistence = "commit"

    id = factory.LazyFunction(uuid.uuid4)
    user_id = factory.SubFactory(UserFactory)

    car_km = 1000.0
    truck_km = 2000.0
    plane_hours = 0.0
    forklift_hours = 0.0
    heating_kwh = 0.0
    lighting_cooling_it_kwh = 0.0
    subcontractors_tons = 0.0
    ev_share = 50.0
    km_reduction = 20.0
    plane_load_factor = 100.0

    baseline_cars = 0.18
    baseline_trucks = 1.8
    baseline_planes = 0.0
    baseline_forklifts = 0.0
    baseline_heating = 0.0
    baseline_lighting_cooling_it = 0.0
    baseline_subcontractors = 0.0
    baseline_total = 1.98

    optimized_cars = 0.0936
    optimized_trucks = 1.44
    optimized_planes = 0.0
    optimized_forklifts = 0.0
    optimized_heating = 0.0
    optimized_lighting_cooling_it = 0.0
    optimized_subcontractors = 0.0
    optimized_total = 1.5336

    created_at = factory.LazyFunction(datetime.utcnow)
