"""Create user_images table

Revision ID: 3f9c2a7d41b6
Revises:
Create Date: 2026-10-18

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

from ricoai.adapters.user_images.schema import BIGINT_PK

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f9c2a7d41b6"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "user_images",
        sa.Column(
            "seq",
            BIGINT_PK,
            sa.Identity(always=False, start=1),
            nullable=False,
            comment="Storage sequence; larger means more recently stored.",
        ),
        sa.Column(
            "id",
            sa.BigInteger(),
            nullable=False,
            comment="Image identifier exposed to callers.",
        ),
        sa.Column(
            "owner_id",
            sa.String(length=128),
            nullable=False,
            comment="Owning user.",
        ),
        sa.Column(
            "storage_path",
            sa.String(length=1024),
            nullable=False,
            comment="Full-resolution object location.",
        ),
        sa.Column(
            "thumbnail_path",
            sa.String(length=1024),
            nullable=False,
            comment="Thumbnail object location.",
        ),
        sa.Column(
            "is_public",
            sa.Boolean(),
            nullable=False,
            comment="Visibility flag.",
        ),
        sa.Column(
            "stored_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
            comment="Server-assigned timestamp. Informational; ordering uses seq.",
        ),
        sa.CheckConstraint("id >= 1", name=op.f("ck_user_images_positive_id")),
        sa.PrimaryKeyConstraint("seq", name=op.f("pk_user_images")),
        sa.UniqueConstraint("id", name=op.f("uq_user_images_id")),
        comment="Photo metadata: owner, storage paths, visibility.",
    )
    op.create_index(
        op.f("ix_user_images_owner_id"), "user_images", ["owner_id"], unique=False
    )
    op.create_index(
        op.f("ix_user_images_is_public_seq"),
        "user_images",
        ["is_public", "seq"],
        unique=False,
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f("ix_user_images_is_public_seq"), table_name="user_images")
    op.drop_index(op.f("ix_user_images_owner_id"), table_name="user_images")
    op.drop_table("user_images")
