"""Integration tests for the SQLAlchemy-backed Unit of Work adapter.

Verifies commit and rollback behavior of SqlAlchemyUnitOfWork.
"""

import pytest

from ricoai.adapters.unit_of_work import SqlAlchemyUnitOfWork
from ricoai.adapters.user_images import SqlAlchemyUserImageRepository


def test_uow_wires_user_image_repository(sqlite_engine_memory):
    uow = SqlAlchemyUnitOfWork(sqlite_engine_memory)
    with uow:
        assert isinstance(uow.user_images, SqlAlchemyUserImageRepository)
        assert uow.user_images.connection is uow.connection


def test_uow_commit_persists_image(sqlite_engine_memory, make_user_image):
    """Committed inserts are visible to later units of work."""
    uow = SqlAlchemyUnitOfWork(sqlite_engine_memory)
    image = make_user_image(id=100)
    with uow:
        uow.user_images.insert(image)
        uow.commit()

    with uow:
        assert uow.user_images.get_by_id(100) == image


def test_uow_rollback_discards_image(sqlite_engine_memory, make_user_image):
    """Leaving the block without commit() discards the insert."""
    uow = SqlAlchemyUnitOfWork(sqlite_engine_memory)
    with uow:
        uow.user_images.insert(make_user_image(id=100))
        # Intentionally not calling commit()

    with uow:
        assert uow.user_images.get_by_id(100) is None


def test_rolls_back_on_error(sqlite_engine_memory, make_user_image):
    """An exception inside the block triggers a rollback."""

    class MyException(Exception):
        """Custom exception for testing."""

    uow = SqlAlchemyUnitOfWork(sqlite_engine_memory)
    with pytest.raises(MyException):
        with uow:
            uow.user_images.insert(make_user_image(id=100))
            raise MyException()

    with uow:
        assert uow.user_images.get_all_by_owner("66") == []


def test_uow_remove_is_committed(sqlite_engine_file, make_user_image):
    uow = SqlAlchemyUnitOfWork(sqlite_engine_file)
    with uow:
        image_id = uow.user_images.insert(make_user_image())
        uow.commit()
    with uow:
        assert uow.user_images.remove(image_id) is True
        uow.commit()
    with uow:
        assert uow.user_images.get_by_id(image_id) is None
