"""Pytest fixtures for UserImageRepository contract tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from ricoai.adapters.user_images import (
    InMemoryUserImageRepository,
    SqlAlchemyUserImageRepository,
)
from ricoai.interfaces.user_images import UserImage, UserImageRepository

# pylint: disable=redefined-outer-name

ENGINE_FIXTURES = {
    "sql_memory": "sqlite_engine_memory",
    "sql_file": "sqlite_engine_file",
    "postgres": "postgres_engine",
}


@pytest.fixture(params=["memory", "sql_memory", "sql_file", "postgres"])
def empty_repository(request: pytest.FixtureRequest) -> Iterator[UserImageRepository]:
    """Return a fresh, empty UserImageRepository for the requested backend.

    Supported params:
      - `"memory"` → InMemoryUserImageRepository
      - `"sql_memory"` → SQLite in memory (tables from metadata)
      - `"sql_file"` → SQLite file migrated with Alembic
      - `"postgres"` → PostgreSQL via Testcontainers

    Engines are requested lazily so SQLite runs do not need Docker.
    """
    if request.param == "memory":
        yield InMemoryUserImageRepository()
        return

    try:
        fixture_name = ENGINE_FIXTURES[request.param]
    except KeyError as e:
        raise ValueError(f"unknown store type: {request.param}") from e

    engine = request.getfixturevalue(fixture_name)
    with engine.connect() as conn:
        yield SqlAlchemyUserImageRepository(conn)
        conn.rollback()


@pytest.fixture
def repository(
    empty_repository: UserImageRepository, seed_images: list[UserImage]
) -> UserImageRepository:
    """A repository holding the eleven seed images, inserted in order."""
    for image in seed_images:
        empty_repository.insert(image)
    return empty_repository
