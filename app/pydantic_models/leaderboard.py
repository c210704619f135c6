"""
Pydantic models for the green-score leaderboard.
"""

from pydantic import BaseModel, ConfigDict, Field


class ScoredCompany(BaseModel):
    """A company with its computed green score, before ranking."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    company_name: str
    sector: str
    green_score: float = Field(..., description="Higher is greener")
    co2_emissions: float = Field(
        ..., description="Optimized total of the latest record in tons CO2"
    )
    total_distance: float
    load_efficiency: float
    renewable_share: float


class LeaderboardEntry(ScoredCompany):
    """A ranked leaderboard row."""

    rank: int = Field(..., ge=1, description="1-based position by green score")
