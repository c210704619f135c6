"""create_company_profiles_table

Revision ID: 8b4d2f6a1c35
Revises: 3f1a9c2e7b10
Create Date: 2025-12-01 09:01:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "8b4d2f6a1c35"
down_revision = "3f1a9c2e7b10"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "company_profiles",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column(
            "user_id",
            sa.String(length=255),
            nullable=False,
            comment="Owning user",
        ),
        sa.Column("company_name", sa.String(length=255), nullable=False),
        sa.Column("sector", sa.String(length=255), nullable=False),
        sa.Column(
            "total_distance",
            sa.Float(),
            nullable=False,
            comment="Total distance travelled in km",
        ),
        sa.Column(
            "load_efficiency",
            sa.Float(),
            nullable=False,
            comment="Share of transport capacity used (0 to 1)",
        ),
        sa.Column(
            "renewable_share",
            sa.Float(),
            nullable=False,
            comment="Share of energy from renewable sources (0 to 1)",
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
        comment="Company profiles used for green scoring",
    )


def downgrade() -> None:
    op.drop_table("company_profiles")
