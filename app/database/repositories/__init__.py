"""
Database repositories for data access layer.

Provides clean abstraction over database operations following repository pattern.
"""
from app.database.repositories.base import BaseRepository
from app.database.repositories.company_profile import CompanyProfileRepository
from app.database.repositories.emission_record import EmissionRecordRepository
from app.database.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "CompanyProfileRepository",
    "EmissionRecordRepository",
    "UserRepository",
]
