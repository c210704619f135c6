"""
EmissionRecord SQLAlchemy model.

One row per calculation request. Rows are never updated: the table is an
append-only history of the inputs a user submitted and what they produced.
"""
import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, Float, ForeignKey, Index, String
from sqlalchemy.dialects.postgresql import UUID

from app.database import Base


class EmissionRecordDBModel(Base):
    """Activity inputs with their baseline and optimized emissions (tons CO2)."""

    __tablename__ = "emission_records"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)

    user_id = Column(
        String(255),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        comment="Owning user",
    )

    # Activity inputs
    car_km = Column(Float, nullable=False)
    truck_km = Column(Float, nullable=False)
    plane_hours = Column(Float, nullable=False)
    forklift_hours = Column(Float, nullable=False)
    heating_kwh = Column(Float, nullable=False)
    lighting_cooling_it_kwh = Column(Float, nullable=False)
    subcontractors_tons = Column(Float, nullable=False)
    ev_share = Column(Float, nullable=False, comment="Percentage 0-100")
    km_reduction = Column(Float, nullable=False, comment="Percentage 0-100")
    plane_load_factor = Column(Float, nullable=False, comment="Percentage 0-100")

    # Baseline emissions (tons)
    baseline_cars = Column(Float, nullable=False)
    baseline_trucks = Column(Float, nullable=False)
    baseline_planes = Column(Float, nullable=False)
    baseline_forklifts = Column(Float, nullable=False)
    baseline_heating = Column(Float, nullable=False)
    baseline_lighting_cooling_it = Column(Float, nullable=False)
    baseline_subcontractors = Column(Float, nullable=False)
    baseline_total = Column(Float, nullable=False)

    # Optimized emissions (tons)
    optimized_cars = Column(Float, nullable=False)
    optimized_trucks = Column(Float, nullable=False)
    optimized_planes = Column(Float, nullable=False)
    optimized_forklifts = Column(Float, nullable=False)
    optimized_heating = Column(Float, nullable=False)
    optimized_lighting_cooling_it = Column(Float, nullable=False)
    optimized_subcontractors = Column(Float, nullable=False)
    optimized_total = Column(Float, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        Index("ix_emission_records_user_created", "user_id", "created_at"),
        {"comment": "Append-only history of emission calculations"},
    )

    def __repr__(self):
        return (
            f"<EmissionRecordDBModel: {self.user_id} - "
            f"{self.baseline_total} -> {self.optimized_total} tCO2>"
        )
