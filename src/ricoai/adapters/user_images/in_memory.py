"""In-memory implementation of the UserImageRepository interface."""

from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass, replace

from ricoai.interfaces.user_images import (
    RECENT_PUBLIC_LIMIT,
    DuplicateImageIdError,
    UserImage,
    UserImageRepository,
)


@dataclass(frozen=True, slots=True)
class _StoredImage:
    """An image together with the storage sequence it was assigned."""

    seq: int
    image: UserImage


class InMemoryUserImageRepository(UserImageRepository):
    """In-memory implementation of the UserImageRepository interface.

    Intended for tests and development; nothing is persisted. A single lock
    guards the store, so operations are linearizable across threads.
    """

    def __init__(self) -> None:
        self._rows: dict[int, _StoredImage] = {}  # image id: stored image
        self._seq = itertools.count(1)
        self._high_water = 0  # largest id ever stored; never decreases
        self._lock = threading.RLock()

    def get_all_by_owner(self, owner_id: str) -> list[UserImage]:
        with self._lock:
            return [
                stored.image
                for stored in self._in_storage_order()
                if stored.image.owner_id == owner_id
            ]

    def get_recent_public(self) -> list[UserImage]:
        with self._lock:
            public = [
                stored.image
                for stored in reversed(self._in_storage_order())
                if stored.image.is_public
            ]
        return public[:RECENT_PUBLIC_LIMIT]

    def get_by_id(self, image_id: int) -> UserImage | None:
        with self._lock:
            stored = self._rows.get(image_id)
        return stored.image if stored is not None else None

    def remove(self, image_id: int) -> bool:
        with self._lock:
            return self._rows.pop(image_id, None) is not None

    def insert(self, image: UserImage) -> int:
        with self._lock:
            if image.id is None:
                image = replace(image, id=self._high_water + 1)
            elif image.id in self._rows:
                raise DuplicateImageIdError(image.id)
            assert image.id is not None  # for mypy
            self._high_water = max(self._high_water, image.id)
            self._rows[image.id] = _StoredImage(seq=next(self._seq), image=image)
            return image.id

    def _in_storage_order(self) -> list[_StoredImage]:
        return sorted(self._rows.values(), key=lambda stored: stored.seq)
