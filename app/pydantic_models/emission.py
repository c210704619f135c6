"""
Pydantic models for emission inputs, results and stored records.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class EmissionInput(BaseModel):
    """Activity data submitted for one calculation."""

    car_km: float = Field(
        ..., ge=0, description="Distance driven by cars in km", examples=[1000]
    )
    truck_km: float = Field(
        ..., ge=0, description="Distance driven by trucks in km", examples=[5000]
    )
    plane_hours: float = Field(
        ..., ge=0, description="Flight hours", examples=[2]
    )
    forklift_hours: float = Field(
        ..., ge=0, description="Forklift operating hours", examples=[400]
    )
    heating_kwh: float = Field(
        ..., ge=0, description="Heating energy in kWh", examples=[12000]
    )
    lighting_cooling_it_kwh: float = Field(
        ...,
        ge=0,
        description="Lighting, cooling and IT energy in kWh",
        examples=[8000],
    )
    subcontractors_tons: float = Field(
        ...,
        ge=0,
        description="Emissions reported by subcontractors, already in tons CO2",
        examples=[3.5],
    )
    ev_share: float = Field(
        ...,
        ge=0,
        le=100,
        description="Percentage of car travel done by electric vehicles",
        examples=[50],
    )
    km_reduction: float = Field(
        ...,
        ge=0,
        le=100,
        description="Percentage of road distance removed by route optimization",
        examples=[20],
    )
    plane_load_factor: float = Field(
        ...,
        ge=0,
        le=100,
        description="Percentage of plane capacity used",
        examples=[80],
    )


class EmissionResult(BaseModel):
    """Baseline and optimized emissions in tons CO2."""

    model_config = ConfigDict(frozen=True)

    baseline_cars: float
    baseline_trucks: float
    baseline_planes: float
    baseline_forklifts: float
    baseline_heating: float
    baseline_lighting_cooling_it: float
    baseline_subcontractors: float
    baseline_total: float

    optimized_cars: float
    optimized_trucks: float
    optimized_planes: float
    optimized_forklifts: float
    optimized_heating: float
    optimized_lighting_cooling_it: float
    optimized_subcontractors: float
    optimized_total: float


class EmissionRecordPydModel(EmissionInput, EmissionResult):
    """Model for emission record response."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: UUID
    user_id: str
    created_at: datetime
