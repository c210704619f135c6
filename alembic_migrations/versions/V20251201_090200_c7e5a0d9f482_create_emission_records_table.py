"""create_emission_records_table

Revision ID: c7e5a0d9f482
Revises: 8b4d2f6a1c35
Create Date: 2025-12-01 09:02:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "c7e5a0d9f482"
down_revision = "8b4d2f6a1c35"
branch_labels = None
depends_on = None

INPUT_COLUMNS = [
    "car_km",
    "truck_km",
    "plane_hours",
    "forklift_hours",
    "heating_kwh",
    "lighting_cooling_it_kwh",
    "subcontractors_tons",
    "ev_share",
    "km_reduction",
    "plane_load_factor",
]

PERCENTAGE_COLUMNS = {"ev_share", "km_reduction", "plane_load_factor"}
PERCENTAGE_COMMENT = "Percentage 0-100"

CATEGORIES = [
    "cars",
    "trucks",
    "planes",
    "forklifts",
    "heating",
    "lighting_cooling_it",
    "subcontractors",
    "total",
]


def upgrade() -> None:
    op.create_table(
        "emission_records",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column(
            "user_id",
            sa.String(length=255),
            nullable=False,
            comment="Owning user",
        ),
        *[
            sa.Column(
                name,
                sa.Float(),
                nullable=False,
                comment=PERCENTAGE_COMMENT if name in PERCENTAGE_COLUMNS else None,
            )
            for name in INPUT_COLUMNS
        ],
        *[
            sa.Column(f"{side}_{category}", sa.Float(), nullable=False)
            for side in ("baseline", "optimized")
            for category in CATEGORIES
        ],
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        comment="Append-only history of emission calculations",
    )
    op.create_index(
        "ix_emission_records_user_created",
        "emission_records",
        ["user_id", "created_at"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_emission_records_user_created", table_name="emission_records")
    op.drop_table("emission_records")
