"""create_report_table

Revision ID: 8f4d2b6e1c75
Revises: 3b1e7c2a9d40
Create Date: 2025-11-02 10:31:47.209815

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8f4d2b6e1c75'
down_revision: Union[str, Sequence[str], None] = '3b1e7c2a9d40'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "report",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("location_id", sa.String(length=36), nullable=False),
        sa.Column("status", sa.String(length=16), nullable=False),
        sa.Column("note", sa.String(length=280), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("ip_hash", sa.String(length=64), nullable=True),
        sa.ForeignKeyConstraint(["location_id"], ["location.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_report_location_created", "report", ["location_id", "created_at"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_report_location_created", table_name="report")
    op.drop_table("report", if_exists=True)
