"""Build the application container from configuration."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ricoai import config
from ricoai.adapters.db.engine import make_engine
from ricoai.adapters.unit_of_work import SqlAlchemyUnitOfWork
from ricoai.interfaces.unit_of_work import AbstractUnitOfWork

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """Application wiring handed to entry points."""

    uow_factory: Callable[[], AbstractUnitOfWork]


def build_uow_factory(url: str) -> Callable[[], AbstractUnitOfWork]:
    """Return a factory of units of work sharing one engine for ``url``."""
    engine = make_engine(url)
    return lambda: SqlAlchemyUnitOfWork(engine)


def bootstrap(url: str | None = None) -> AppContainer:
    """Assemble the application.

    Args:
        url: Database URL; defaults to ``RICOAI_DB_URL``.

    Raises:
        DatabaseUrlNotSetError: If no URL is given and ``RICOAI_DB_URL`` is unset.
    """
    url = url or config.get_db_url()
    logger.debug("Bootstrapping RICOAI")
    return AppContainer(uow_factory=build_uow_factory(url))
