"""
Emission factors used by the calculator.
"""

import logging

from pydantic import BaseModel, ConfigDict, Field

from app.core.config import Config
from app.utils.constants import DEFAULT_EMISSION_FACTORS

logger = logging.getLogger(__name__)


class EmissionFactors(BaseModel):
    """
    Fixed emission factors, in kg CO2 per unit of activity.

    Frozen so a calculator can share one instance for the process lifetime.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    cars: float = Field(DEFAULT_EMISSION_FACTORS["cars"], ge=0, description="kg CO2/km")
    trucks: float = Field(DEFAULT_EMISSION_FACTORS["trucks"], ge=0, description="kg CO2/km")
    planes: float = Field(
        DEFAULT_EMISSION_FACTORS["planes"],
        ge=0,
        description="kg CO2 per flight-hour at full load",
    )
    forklifts: float = Field(
        DEFAULT_EMISSION_FACTORS["forklifts"], ge=0, description="kg CO2/operating hour"
    )
    heating: float = Field(DEFAULT_EMISSION_FACTORS["heating"], ge=0, description="kg CO2/kWh")
    lighting_cooling_it: float = Field(
        DEFAULT_EMISSION_FACTORS["lighting_cooling_it"], ge=0, description="kg CO2/kWh"
    )
    ev_factor: float = Field(
        DEFAULT_EMISSION_FACTORS["ev_factor"],
        ge=0,
        description="Multiplier applied to the car factor for electric vehicles",
    )

    @classmethod
    def from_config(cls, config: Config) -> "EmissionFactors":
        """
        Build factors from the ``[emission_factors]`` config table.

        Keys missing from the table keep their defaults.
        """
        factors = cls(**config.section("emission_factors"))
        logger.debug(f"Loaded emission factors: {factors.model_dump()}")
        return factors
