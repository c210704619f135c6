"""
SQLAlchemy database models (schemas).
"""
from app.database.schemas.company_profile import CompanyProfileDBModel
from app.database.schemas.emission_record import EmissionRecordDBModel
from app.database.schemas.user import UserDBModel

__all__ = [
    "CompanyProfileDBModel",
    "EmissionRecordDBModel",
    "UserDBModel",
]
