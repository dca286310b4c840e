"""User image schema.

Defines the ``user_images`` table (one row per stored photograph) and the
``user_image_ids`` counter table.

Recency is tracked by ``seq``, a store-assigned sequence that only grows, so
"most recent" never depends on the caller-visible ``id`` or on the physical
order rows come back in.

Constraints (enforced here):

| Constraint             | Purpose                                   |
|------------------------|-------------------------------------------|
| PRIMARY KEY(seq)       | storage order / recency                   |
| UNIQUE(id)             | one live image per id                     |
| CHECK(id >= 1)         | ids are positive                          |

``user_image_ids`` holds one row per id counter (currently only
``IMAGE_ID_COUNTER``). Its ``high_water`` is the largest image id ever
stored. It is raised on every insert and never lowered by a removal, so ids
assigned by the store are never handed out twice.
"""

from __future__ import annotations

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Identity,
    Index,
    Integer,
    String,
    Table,
    text,
)

from ricoai.adapters.db.metadata import metadata

__all__ = ["user_images", "user_image_ids", "BIGINT_PK", "IMAGE_ID_COUNTER"]

# Postgres: BIGINT IDENTITY; SQLite: INTEGER so the column aliases the rowid
BIGINT_PK = BigInteger().with_variant(Integer(), "sqlite")

user_images = Table(
    "user_images",
    metadata,
    Column(
        "seq",
        BIGINT_PK,
        Identity(start=1),
        nullable=False,
        primary_key=True,
        comment="Storage sequence; larger means more recently stored.",
    ),
    Column(
        "id",
        BigInteger,
        nullable=False,
        unique=True,
        comment="Image identifier exposed to callers.",
    ),
    Column(
        "owner_id",
        String(128),
        nullable=False,
        index=True,
        comment="Owning user.",
    ),
    Column(
        "storage_path",
        String(1024),
        nullable=False,
        comment="Full-resolution object location.",
    ),
    Column(
        "thumbnail_path",
        String(1024),
        nullable=False,
        comment="Thumbnail object location.",
    ),
    Column(
        "is_public",
        Boolean,
        nullable=False,
        comment="Visibility flag.",
    ),
    Column(
        "stored_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="Server-assigned timestamp. Informational; ordering uses seq.",
    ),
    CheckConstraint("id >= 1", name="positive_id"),
    Index(None, "is_public", "seq"),
    comment="Photo metadata: owner, storage paths, visibility.",
)

IMAGE_ID_COUNTER = "user_images"

user_image_ids = Table(
    "user_image_ids",
    metadata,
    Column(
        "counter",
        String(64),
        primary_key=True,
        comment="Name of the id counter.",
    ),
    Column(
        "high_water",
        BigInteger,
        nullable=False,
        comment="Largest image id ever stored; never decreases.",
    ),
    CheckConstraint("high_water >= 0", name="non_negative_high_water"),
    comment="High-water marks for store-assigned image ids.",
)
