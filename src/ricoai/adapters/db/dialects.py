"""Supported database dialects.

Keeps the backend names RICOAI knows how to talk to in one Enum so adapters
can branch on a dialect without comparing raw strings such as
``"postgresql"`` or ``"sqlite"``.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class UnsupportedDialect(Exception):
    """Raised when a database backend is not one RICOAI supports."""


class DialectName(str, Enum):
    """Supported SQLAlchemy dialect names.

    Attributes:
        POSTGRES: PostgreSQL (``"postgresql"``).
        SQLITE:   SQLite (``"sqlite"``).
    """

    POSTGRES = "postgresql"
    SQLITE = "sqlite"

    @classmethod
    def from_string(cls, dialect_str: str) -> DialectName:
        """Map a raw dialect string to a DialectName.

        Driver suffixes and common aliases are accepted, e.g. ``'postgres'``,
        ``'postgresql+psycopg'`` or ``'sqlite+pysqlite'``.

        Args:
            dialect_str: a raw dialect string

        Returns:
            The matching DialectName member.

        Raises:
            UnsupportedDialect: if the backend is not supported.
        """
        base = (dialect_str or "").strip().lower().split("+", 1)[0]
        if base in {"postgres", "postgresql", "pg"}:
            return cls.POSTGRES
        if base == "sqlite":
            return cls.SQLITE
        raise UnsupportedDialect(f"Unsupported dialect: {dialect_str!r}")

    @classmethod
    def from_sqlalchemy(cls, obj: Engine | Connection) -> DialectName:
        """Read the dialect of a SQLAlchemy Engine or Connection.

        Raises:
            UnsupportedDialect: if the object has no ``.dialect.name`` or the
                backend is not supported.
        """
        try:
            name = obj.dialect.name
        except AttributeError as e:
            raise UnsupportedDialect(
                f"Object {type(obj).__name__} does not expose .dialect.name"
            ) from e
        return cls.from_string(name)
