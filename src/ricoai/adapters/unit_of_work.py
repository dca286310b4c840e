"""SQLAlchemy-backed Unit of Work for RICOAI.

Provides a context-managed UnitOfWork using a SQLAlchemy Connection
and the SqlAlchemyUserImageRepository.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ricoai.adapters.user_images import SqlAlchemyUserImageRepository
from ricoai.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.connection: Connection

    def __enter__(self):
        self.connection = self.engine.connect()
        self.user_images = SqlAlchemyUserImageRepository(self.connection)
        return super().__enter__()

    def __exit__(self, *args):
        super().__exit__(*args)
        self.connection.close()

    def commit(self):
        logger.debug("Committing unit of work")
        self.connection.commit()

    def rollback(self):
        self.connection.rollback()
