"""Database engine factory.

All code that needs an Engine goes through `make_engine()` so connections are
configured the same way everywhere. SQLite connections get a set of PRAGMAs;
other backends are used as-is.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url

if TYPE_CHECKING:
    from sqlite3 import Connection as SQLiteConnection

    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

SQLITE_NAMES = {"sqlite", "sqlite+pysqlite"}

SQLITE_PRAGMAS = (
    "PRAGMA foreign_keys=ON;",
    "PRAGMA journal_mode=WAL;",
    "PRAGMA synchronous=NORMAL;",
    "PRAGMA temp_store=MEMORY;",
)


def is_sqlite(url: str | URL) -> bool:
    """Return True if the given SQLAlchemy URL or string points at SQLite."""
    u = make_url(str(url))
    return u.get_backend_name() in SQLITE_NAMES


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create a SQLAlchemy Engine for the given URL.

    For SQLite, every new DBAPI connection runs ``SQLITE_PRAGMAS``:
        - ``foreign_keys=ON`` (enforce referential integrity)
        - ``journal_mode=WAL`` (write-ahead logging for concurrency)
        - ``synchronous=NORMAL`` (balanced durability)
        - ``temp_store=MEMORY`` (reduce temp file I/O)

    Args:
        url: Database connection URL (str or :class:`URL`).
        echo: If True, log SQL statements.

    Returns:
        Engine: Configured SQLAlchemy Engine.
    """
    engine = create_engine(url, echo=echo, future=True)
    logger.debug("Created engine for %s", engine.url.render_as_string(hide_password=True))

    if is_sqlite(url):

        @event.listens_for(engine, "connect")
        def _sqlite_pragmas(dbapi_conn: SQLiteConnection, conn_record):  # type: ignore #pylint: disable=W0613
            cur = dbapi_conn.cursor()
            for pragma in SQLITE_PRAGMAS:
                cur.execute(pragma)
            cur.close()

    return engine
