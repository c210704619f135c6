"""
User SQLAlchemy model.

Users are owned by the external identity provider; the row only mirrors the
claims it forwards so records and profiles have something to reference.
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, String

from app.database import Base


class UserDBModel(Base):
    """Authenticated user, keyed by the identity provider's subject id."""

    __tablename__ = "users"

    id = Column(String(255), primary_key=True, comment="Identity provider subject")
    email = Column(String(255), nullable=True, unique=True)
    first_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=True)
    profile_image_url = Column(String(1024), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    __table_args__ = ({"comment": "Users known from the identity provider"},)

    def __repr__(self):
        return f"<UserDBModel: {self.id}>"
