"""
Emission calculation service.

Runs the pure calculator on a user's activity data and appends the result to
the user's emission history.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.database.repositories import EmissionRecordRepository
from app.database.schemas import EmissionRecordDBModel
from app.pydantic_models.emission import EmissionInput
from app.services.calculators.emission_calculator import EmissionCalculator
from app.services.calculators.emission_factors import EmissionFactors

logger = logging.getLogger(__name__)


class EmissionCalculationService:
    """Calculates emissions and stores one record per calculation."""

    def __init__(self, session: AsyncSession, factors: EmissionFactors | None = None):
        """
        Initialize service with database session.

        Args:
            session: Database session
            factors: Emission factors; defaults are used when omitted
        """
        self.session = session
        self.calculator = EmissionCalculator(factors)
        self.record_repo = EmissionRecordRepository(session)

    async def calculate_and_store(
        self, user_id: str, emission_input: EmissionInput
    ) -> EmissionRecordDBModel:
        """
        Calculate emissions for the input and persist them for the user.

        Args:
            user_id: Owning user id
            emission_input: Validated activity data

        Returns:
            The newly created emission record
        """
        result = self.calculator.calculate(emission_input)

        record = await self.record_repo.create(
            user_id=user_id,
            **emission_input.model_dump(),
            **result.model_dump(),
        )

        logger.info(
            f"Stored emission record {record.id} for user {user_id}: "
            f"baseline {result.baseline_total:.4f} t, "
            f"optimized {result.optimized_total:.4f} t"
        )
        return record
