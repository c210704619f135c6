"""
Database seeding service for loading demo companies from a CSV file.

Usage:
    from app.services.seed_database import DatabaseSeeder

    async with DatabaseSeeder() as seeder:
        await seeder.seed_all(clear_existing=True)
"""

import csv
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.repositories import (
    CompanyProfileRepository,
    EmissionRecordRepository,
    UserRepository,
)
from app.database.session_manager.db_session import Database
from app.pydantic_models.company_profile import CompanyProfileCreate
from app.pydantic_models.emission import EmissionInput
from app.pydantic_models.user import UserSeedRow
from app.services.calculators.emission_factors import EmissionFactors
from app.services.emission_service import EmissionCalculationService

logger = logging.getLogger(__name__)

COMPANIES_CSV = "companies.csv"


class DatabaseSeeder:
    """Service for seeding the database with demo companies."""

    def __init__(
        self,
        session: AsyncSession | None = None,
        data_dir: str | Path = "app/test/test_data",
        factors: EmissionFactors | None = None,
    ):
        """
        Initialize the database seeder.

        Args:
            session: Optional async database session. If not provided, will create one.
            data_dir: Directory containing companies.csv
            factors: Emission factors used for the seeded calculations
        """
        self._session = session
        self._external_session = session is not None
        self.data_dir = Path(data_dir)
        self.factors = factors

        if not self.data_dir.exists():
            raise ValueError(f"Data directory not found: {self.data_dir}")

    async def __aenter__(self):
        """Context manager entry."""
        if not self._external_session:
            db = Database()
            self._session = await db.__aenter__()
            self._db_context = db
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        if not self._external_session and hasattr(self, "_db_context"):
            await self._db_context.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def session(self) -> AsyncSession:
        """Get the database session."""
        if not self._session:
            raise RuntimeError("Session not initialized. Use as context manager.")
        return self._session

    async def seed_all(
        self,
        clear_existing: bool = False,
        skip_calculations: bool = False,
    ) -> dict[str, Any]:
        """
        Seed users, profiles and emission records from companies.csv.

        Args:
            clear_existing: If True, clear existing data before seeding
            skip_calculations: If True, store users and profiles only

        Returns:
            Dictionary with seeding statistics
        """
        logger.info("Starting database seeding")

        stats = {
            "users": 0,
            "company_profiles": 0,
            "emission_records": 0,
            "errors": [],
        }

        try:
            if clear_existing:
                await self._clear_existing_data()

            rows = self._read_rows()
            calculation_service = EmissionCalculationService(self.session, self.factors)
            user_repo = UserRepository(self.session)
            profile_repo = CompanyProfileRepository(self.session)

            for line_number, row in enumerate(rows, start=2):
                try:
                    identity = UserSeedRow.model_validate(row)
                    profile = CompanyProfileCreate.model_validate(row)
                    emission_input = EmissionInput.model_validate(row)
                except ValidationError as e:
                    stats["errors"].append(f"line {line_number}: {e.error_count()} invalid fields")
                    logger.warning(f"Skipping invalid row {line_number}: {e}")
                    continue

                user_id = identity.user_id
                await user_repo.upsert(
                    user_id,
                    email=identity.email,
                    first_name=identity.first_name,
                    last_name=identity.last_name,
                )
                stats["users"] += 1

                await profile_repo.upsert(user_id, **profile.model_dump())
                stats["company_profiles"] += 1

                if not skip_calculations:
                    await calculation_service.calculate_and_store(user_id, emission_input)
                    stats["emission_records"] += 1

            await self.session.commit()

            stats["totals"] = {
                "users": await user_repo.count(),
                "company_profiles": await profile_repo.count(),
                "emission_records": await EmissionRecordRepository(self.session).count(),
            }
            logger.info(f"Database seeding completed: {stats}")
            return stats

        except Exception as e:
            logger.error(f"Error during database seeding: {e}", exc_info=True)
            await self.session.rollback()
            raise

    def _read_rows(self) -> list[dict[str, str]]:
        csv_file = self.data_dir / COMPANIES_CSV
        if not csv_file.exists():
            raise ValueError(f"File not found: {csv_file}")

        logger.info(f"Loading companies from {csv_file}")
        with open(csv_file, "r", newline="") as f:
            return list(csv.DictReader(f))

    async def _clear_existing_data(self):
        """Clear all existing data (children before parents)."""
        logger.info("Clearing existing data")

        await self.session.execute(text("DELETE FROM emission_records"))
        await self.session.execute(text("DELETE FROM company_profiles"))
        await self.session.execute(text("DELETE FROM users"))

        await self.session.commit()
        logger.info("Existing data cleared")
