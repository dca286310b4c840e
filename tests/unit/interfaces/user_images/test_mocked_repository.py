"""Scenarios run against an auto-specced mock of the UserImageRepository port.

The mock answers from the shared seed list the way a stub repository would,
which checks that the port's signatures support each scenario without any
storage behind it.
"""

from __future__ import annotations

from unittest import mock

import pytest

from ricoai.interfaces.user_images import (
    RECENT_PUBLIC_LIMIT,
    UserImage,
    UserImageRepository,
)
from tests.fixtures.datagen import PRIVATE_IMAGE_ID

# pylint: disable=redefined-outer-name


@pytest.fixture
def repository_mock(seed_images: list[UserImage]) -> mock.NonCallableMagicMock:
    """A spec-checked mock whose answers come from the seed list."""
    repo = mock.create_autospec(UserImageRepository, instance=True)
    repo.get_all_by_owner.side_effect = lambda owner_id: [
        image for image in seed_images if image.owner_id == owner_id
    ]
    repo.get_by_id.side_effect = lambda image_id: next(
        (image for image in seed_images if image.id == image_id), None
    )
    repo.remove.side_effect = lambda image_id: any(
        image.id == image_id for image in seed_images
    )
    repo.get_recent_public.return_value = [
        image for image in reversed(seed_images) if image.is_public
    ][:RECENT_PUBLIC_LIMIT]
    repo.insert.side_effect = lambda image: image.id
    return repo


def test_get_all_by_owner_single(repository_mock):
    """Owner "5" has a single image."""
    images = repository_mock.get_all_by_owner("5")

    assert isinstance(images, list)
    assert [image.owner_id for image in images] == ["5"]
    repository_mock.get_all_by_owner.assert_called_once_with("5")


def test_get_all_by_owner_multiple(repository_mock, seed_images):
    """Owner "3" has as many images as the seed list holds for it."""
    images = repository_mock.get_all_by_owner("3")

    assert all(image.owner_id == "3" for image in images)
    assert len(images) == len([i for i in seed_images if i.owner_id == "3"])


def test_get_recent_public(repository_mock):
    """Ten public images come back and the private one is excluded."""
    images = repository_mock.get_recent_public()

    assert len(images) == RECENT_PUBLIC_LIMIT
    assert all(image.is_public for image in images)
    assert PRIVATE_IMAGE_ID not in {image.id for image in images}


def test_get_by_id(repository_mock):
    """A known id returns its image."""
    image = repository_mock.get_by_id(10)

    assert isinstance(image, UserImage)
    assert image.id == 10


def test_get_by_id_missing(repository_mock):
    """An unknown id returns None."""
    assert repository_mock.get_by_id(100) is None


@pytest.mark.parametrize("image_id,expected", [(10, True), (100, False)])
def test_remove_reports_whether_image_existed(repository_mock, image_id, expected):
    """remove() returns True for a stored id and False for an unknown one."""
    assert repository_mock.remove(image_id) is expected
    repository_mock.remove.assert_called_once_with(image_id)


def test_insert_returns_image_id(repository_mock, make_user_image):
    """insert() hands back the id of the inserted image."""
    new_image = make_user_image(id=100)
    assert repository_mock.insert(new_image) == new_image.id


def test_autospec_rejects_unknown_methods(repository_mock):
    """The mock only exposes the port's operations."""
    with pytest.raises(AttributeError):
        repository_mock.update(10)  # pylint: disable=no-member


def test_autospec_checks_signatures(repository_mock):
    """Calling an operation with the wrong arity fails like the real port."""
    with pytest.raises(TypeError):
        repository_mock.get_recent_public(5)
