"""User image repository interface and related errors."""

from .errors import (
    DuplicateImageIdError,
    InvalidUserImageError,
    StoreUnavailableError,
    UserImageRepositoryError,
)
from .user_image_repository import RECENT_PUBLIC_LIMIT, UserImage, UserImageRepository

__all__ = [
    "RECENT_PUBLIC_LIMIT",
    "UserImage",
    "UserImageRepository",
    "UserImageRepositoryError",
    "DuplicateImageIdError",
    "InvalidUserImageError",
    "StoreUnavailableError",
]
