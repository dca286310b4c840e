"""Errors raised by UserImageRepository implementations."""


class UserImageRepositoryError(Exception):
    """Base class for UserImageRepository errors."""


class DuplicateImageIdError(UserImageRepositoryError):
    """Raised when inserting an image whose id is already bound to a live image.

    Attributes:
        image_id (int): The id that is already in use.
    """

    def __init__(self, image_id: int):
        super().__init__(f"User image ID '{image_id}' is already in use.")
        self.image_id = image_id


class InvalidUserImageError(UserImageRepositoryError):
    """The user image is incomplete or holds a value the store cannot accept."""


class StoreUnavailableError(UserImageRepositoryError):
    """Operational/timeout/connection errors; callers may retry."""
