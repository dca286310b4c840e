"""SQLAlchemy-backed UserImageRepository.

Each operation is a single statement on the caller's Connection; transaction
boundaries belong to the caller (see `SqlAlchemyUnitOfWork`).

Inserts first advance the ``user_image_ids`` high-water mark with an upsert;
that row lock serializes writers, and a store-assigned id is the new mark, so
removed ids are never handed out again. The row itself is written with a
dialect-specific ``ON CONFLICT DO NOTHING`` statement and the outcome read
from the returned row, so an id collision never poisons the surrounding
transaction (PostgreSQL aborts a transaction on any error).
Driver errors are mapped to the repository's error hierarchy:

- ``DataError`` / other ``IntegrityError`` -> `InvalidUserImageError`
- any other ``DBAPIError`` -> `StoreUnavailableError`
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, case, delete, literal, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import DataError, DBAPIError, IntegrityError

from ricoai.adapters.db.dialects import DialectName
from ricoai.interfaces.user_images import (
    RECENT_PUBLIC_LIMIT,
    DuplicateImageIdError,
    InvalidUserImageError,
    StoreUnavailableError,
    UserImage,
    UserImageRepository,
)

from .schema import IMAGE_ID_COUNTER, user_image_ids, user_images

if TYPE_CHECKING:
    from sqlalchemy import Executable, Result, Row
    from sqlalchemy.engine import Connection
    from sqlalchemy.sql.dml import Insert

logger = logging.getLogger(__name__)

IMAGE_COLUMNS = (
    user_images.c.id,
    user_images.c.owner_id,
    user_images.c.storage_path,
    user_images.c.thumbnail_path,
    user_images.c.is_public,
)


class SqlAlchemyUserImageRepository(UserImageRepository):
    """UserImageRepository implementation that supports both Postgres and SQLite."""

    def __init__(self, connection: Connection):
        self.connection = connection
        self.dialect = DialectName.from_sqlalchemy(connection)

    # --- reads ---

    def get_all_by_owner(self, owner_id: str) -> list[UserImage]:
        stmt = (
            select(*IMAGE_COLUMNS)
            .where(user_images.c.owner_id == owner_id)
            .order_by(user_images.c.seq.asc())
        )
        return [self._to_image(row) for row in self._execute(stmt)]

    def get_recent_public(self) -> list[UserImage]:
        stmt = (
            select(*IMAGE_COLUMNS)
            .where(user_images.c.is_public.is_(True))
            .order_by(user_images.c.seq.desc())
            .limit(RECENT_PUBLIC_LIMIT)
        )
        return [self._to_image(row) for row in self._execute(stmt)]

    def get_by_id(self, image_id: int) -> UserImage | None:
        stmt = select(*IMAGE_COLUMNS).where(user_images.c.id == image_id)
        if not (row := self._execute(stmt).fetchone()):
            return None
        return self._to_image(row)

    # --- writes ---

    def remove(self, image_id: int) -> bool:
        result = self._execute(delete(user_images).where(user_images.c.id == image_id))
        removed = result.rowcount == 1
        logger.debug("remove(%s): %s", image_id, "deleted" if removed else "not found")
        return removed

    def insert(self, image: UserImage) -> int:
        try:
            image_id = self._advance_high_water(image.id)
            row = self.connection.execute(
                self._build_no_throw_insert(image, image_id)
            ).fetchone()
        except (IntegrityError, DataError) as e:
            raise InvalidUserImageError(str(e.orig or e)) from e
        except DBAPIError as e:  # OperationalError, InterfaceError, etc.
            raise StoreUnavailableError(str(e)) from e

        if row is None:
            # a live row holds the id; for assigned ids that means a row was
            # written without going through the high-water mark
            raise DuplicateImageIdError(image_id)

        logger.debug("insert(): stored image %s for owner %s", row.id, image.owner_id)
        return int(row.id)

    # --- internals ---

    def _execute(self, stmt: Executable) -> Result:
        try:
            return self.connection.execute(stmt)
        except DBAPIError as e:
            raise StoreUnavailableError(str(e)) from e

    def _advance_high_water(self, image_id: int | None) -> int:
        """Raise the id high-water mark and return the id to store under.

        Without an id the mark is incremented and its new value assigned;
        an explicit id only lifts the mark when it is larger.
        """
        high_water = user_image_ids.c.high_water
        if image_id is None:
            initial, advanced = 1, high_water + 1
        else:
            candidate = literal(image_id, BigInteger)
            initial, advanced = image_id, case(
                (high_water < candidate, candidate), else_=high_water
            )

        if self.dialect is DialectName.POSTGRES:
            base = pg_insert(user_image_ids)
        else:
            base = sqlite_insert(user_image_ids)
        stmt = (
            base.values(counter=IMAGE_ID_COUNTER, high_water=initial)
            .on_conflict_do_update(
                index_elements=[user_image_ids.c.counter],
                set_={"high_water": advanced},
            )
            .returning(high_water)
        )
        new_high_water = self.connection.execute(stmt).scalar_one()
        return int(new_high_water) if image_id is None else image_id

    def _build_no_throw_insert(self, image: UserImage, image_id: int) -> Insert:
        values = {
            "id": image_id,
            "owner_id": image.owner_id,
            "storage_path": image.storage_path,
            "thumbnail_path": image.thumbnail_path,
            "is_public": image.is_public,
        }
        if self.dialect is DialectName.POSTGRES:
            base = pg_insert(user_images).values(**values).on_conflict_do_nothing()
        else:
            base = sqlite_insert(user_images).values(**values).on_conflict_do_nothing()
        return base.returning(user_images.c.id)

    @staticmethod
    def _to_image(row: Row) -> UserImage:
        return UserImage(
            id=int(row.id),
            owner_id=row.owner_id,
            storage_path=row.storage_path,
            thumbnail_path=row.thumbnail_path,
            is_public=bool(row.is_public),
        )
