"""Concrete implementations of the UserImageRepository interface.

- `SqlAlchemyUserImageRepository`: relational store (SQLite, PostgreSQL).
- `InMemoryUserImageRepository`: test double with the same contract.
"""

from .in_memory import InMemoryUserImageRepository
from .sqlalchemy_repository import SqlAlchemyUserImageRepository

__all__ = [
    "InMemoryUserImageRepository",
    "SqlAlchemyUserImageRepository",
]
