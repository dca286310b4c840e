"""Interface for a repository of user image records.

Defines the `UserImage` value object and the `UserImageRepository` port.
Implementations live in `ricoai.adapters.user_images`.

Contract overview
-----------------
Reads:
- `get_all_by_owner(owner_id)`: every image of the owner, ascending storage order.
  Empty list when the owner has none.
- `get_recent_public()`: at most `RECENT_PUBLIC_LIMIT` public images, most
  recently stored first. Recency is the store-assigned storage sequence, never
  the image id.
- `get_by_id(image_id)`: the image or None. Absence is not an error.

Writes:
- `insert(image)`: stores the image and returns its id. `id=None` asks the
  store to assign `max(id) + 1`. A live id is rejected with
  `DuplicateImageIdError` and the store is left unchanged.
- `remove(image_id)`: True if an image was deleted, False if none existed.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass

from .errors import InvalidUserImageError

RECENT_PUBLIC_LIMIT = 10


@dataclass(frozen=True, slots=True)
class UserImage:
    """Metadata for one stored photograph.

    Notes:
      - `id` is None before insertion when the store should assign it.
      - The storage sequence used for recency is store bookkeeping and is
        not part of the value.
    """

    id: int | None
    owner_id: str
    storage_path: str
    thumbnail_path: str
    is_public: bool = False

    def __post_init__(self) -> None:
        if self.id is not None:
            if isinstance(self.id, bool) or not isinstance(self.id, int):
                raise InvalidUserImageError("id must be an int or None.")
            if self.id < 1:
                raise InvalidUserImageError("id must be >= 1 when set.")
        for name in ("owner_id", "storage_path", "thumbnail_path"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise InvalidUserImageError(f"{name} must be a non-empty string.")
        if not isinstance(self.is_public, bool):
            raise InvalidUserImageError("is_public must be a bool.")


class UserImageRepository(abc.ABC):
    """Owner-scoped, visibility-aware store of `UserImage` records."""

    @abc.abstractmethod
    def get_all_by_owner(self, owner_id: str) -> list[UserImage]:
        """Return every image belonging to an owner.

        Args:
            owner_id: The owning user's identifier.

        Returns:
            list[UserImage]: All matching images in ascending storage order;
            an empty list when there are none.
        """

    @abc.abstractmethod
    def get_recent_public(self) -> list[UserImage]:
        """Return the most recently stored public images.

        Returns:
            list[UserImage]: Up to ``RECENT_PUBLIC_LIMIT`` images with
            ``is_public`` set, newest first. Repeated calls without an
            intervening write return the same sequence.
        """

    @abc.abstractmethod
    def get_by_id(self, image_id: int) -> UserImage | None:
        """Look up an image by its id.

        Args:
            image_id: The image's primary key.

        Returns:
            UserImage | None: The image if found, otherwise ``None``.
        """

    @abc.abstractmethod
    def remove(self, image_id: int) -> bool:
        """Delete an image by its id.

        Args:
            image_id: The image's primary key.

        Returns:
            bool: ``True`` if an image was deleted, ``False`` if none existed.
        """

    @abc.abstractmethod
    def insert(self, image: UserImage) -> int:
        """Store a new image.

        Args:
            image: The image to store. ``image.id=None`` lets the store assign
                the next free id.

        Returns:
            int: The id under which the image is now retrievable.

        Raises:
            DuplicateImageIdError: If ``image.id`` is already bound to a live image.
            StoreUnavailableError: If the backing store cannot be reached.
        """
