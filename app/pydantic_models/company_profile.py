"""
Pydantic models for company profiles.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CompanyProfileBase(BaseModel):
    """Base company profile model."""

    company_name: str = Field(
        ..., min_length=1, max_length=255, examples=["Northwind Freight"]
    )
    sector: str = Field(
        ..., min_length=1, max_length=255, examples=["Road freight"]
    )
    total_distance: float = Field(
        ..., ge=0, description="Total distance travelled in km", examples=[250000]
    )
    load_efficiency: float = Field(
        ...,
        ge=0,
        le=1,
        description="Share of transport capacity used",
        examples=[0.82],
    )
    renewable_share: float = Field(
        ...,
        ge=0,
        le=1,
        description="Share of energy from renewable sources",
        examples=[0.35],
    )


class CompanyProfileCreate(CompanyProfileBase):
    """
    Model for creating or replacing a profile.

    Unknown fields, including any ``user_id`` sent by the client, are dropped:
    the owner always comes from the authenticated identity.
    """

    model_config = ConfigDict(extra="ignore")


class CompanyProfilePydModel(CompanyProfileBase):
    """Model for company profile response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: str
    created_at: datetime
    updated_at: datetime
