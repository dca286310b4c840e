"""Global pytest fixtures and collection hooks for RICOAI."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

# pylint: disable=unused-argument

pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.postgres",
    "tests.fixtures.datagen",
]

TESTS_ROOT = Path(__file__).parent.resolve()

# top-level test directory -> marker applied to everything under it
DIRECTORY_MARKERS = {
    "unit": "unit",
    "contract": "contract",
    "integration": "integration",
    "functional": "functional",
    "e2e": "e2e",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark each test after the top-level directory it lives in."""
    for item in items:
        try:
            relative = item.path.resolve().relative_to(TESTS_ROOT)
        except ValueError:
            continue
        marker_name = DIRECTORY_MARKERS.get(relative.parts[0])
        if marker_name is None:
            continue
        if not any(marker.name == marker_name for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, marker_name))


@pytest.fixture
def engine(request: pytest.FixtureRequest) -> Engine:
    """Indirection fixture to parametrize over engine-providing fixtures.

    Example:
        ```py
        @pytest.mark.parametrize("engine", ["postgres_engine", "sqlite_engine_file"], indirect=True)
        def test_something(engine): ...
        ```
    """
    return request.getfixturevalue(request.param)
