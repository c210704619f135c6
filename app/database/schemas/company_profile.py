"""
CompanyProfile SQLAlchemy model.
"""
import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, Float, ForeignKey, String
from sqlalchemy.dialects.postgresql import UUID

from app.database import Base


class CompanyProfileDBModel(Base):
    """
    Declared operational metrics of a company.

    At most one profile exists per user; later submissions replace the
    mutable fields in place.
    """

    __tablename__ = "company_profiles"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)

    user_id = Column(
        String(255),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        comment="Owning user",
    )

    company_name = Column(String(255), nullable=False)
    sector = Column(String(255), nullable=False)

    total_distance = Column(
        Float,
        nullable=False,
        comment="Total distance travelled in km",
    )

    load_efficiency = Column(
        Float,
        nullable=False,
        comment="Share of transport capacity used (0 to 1)",
    )

    renewable_share = Column(
        Float,
        nullable=False,
        comment="Share of energy from renewable sources (0 to 1)",
    )

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    __table_args__ = ({"comment": "Company profiles used for green scoring"},)

    def __repr__(self):
        return f"<CompanyProfileDBModel: {self.company_name} ({self.sector})>"
