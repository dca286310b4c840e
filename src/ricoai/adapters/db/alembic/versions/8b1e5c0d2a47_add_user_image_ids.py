"""Add user_image_ids high-water table

Revision ID: 8b1e5c0d2a47
Revises: 3f9c2a7d41b6
Create Date: 2026-10-18

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "8b1e5c0d2a47"
down_revision: str | Sequence[str] | None = "3f9c2a7d41b6"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "user_image_ids",
        sa.Column(
            "counter",
            sa.String(length=64),
            nullable=False,
            comment="Name of the id counter.",
        ),
        sa.Column(
            "high_water",
            sa.BigInteger(),
            nullable=False,
            comment="Largest image id ever stored; never decreases.",
        ),
        sa.CheckConstraint(
            "high_water >= 0", name=op.f("ck_user_image_ids_non_negative_high_water")
        ),
        sa.PrimaryKeyConstraint("counter", name=op.f("pk_user_image_ids")),
        comment="High-water marks for store-assigned image ids.",
    )
    # start from the ids already in use
    op.execute(
        "INSERT INTO user_image_ids (counter, high_water) "
        "SELECT 'user_images', COALESCE(MAX(id), 0) FROM user_images"
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("user_image_ids")
