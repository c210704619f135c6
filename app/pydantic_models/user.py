"""
Pydantic models for users.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserPydModel(BaseModel):
    """Model for user response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    created_at: datetime
    updated_at: datetime


class UserSeedRow(BaseModel):
    """Identity columns of a seed CSV row."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    user_id: str = Field(..., min_length=1, max_length=255)
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None

    @field_validator("email", "first_name", "last_name", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value
