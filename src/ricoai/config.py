"""Configuration helpers for RICOAI.

Reads settings from the environment and builds the Alembic configuration used
by the migration CLI and test fixtures.
"""

import os
import sys
from importlib.resources import files
from typing import TextIO

from alembic.config import Config

DB_URL_ENV_VAR = "RICOAI_DB_URL"  # pragma: no mutate

ALEMBIC_URL_KEY = "sqlalchemy.url"  # pragma: no mutate
ALEMBIC_SCRIPT_LOCATION_KEY = "script_location"  # pragma: no mutate


class DatabaseUrlNotSetError(Exception):
    """Raised when the RICOAI_DB_URL environment variable is not set."""


def get_db_url() -> str:
    """Get the database URL from the environment.

    Returns:
        The value of the `RICOAI_DB_URL` environment variable.

    Raises:
        DatabaseUrlNotSetError: If `RICOAI_DB_URL` is unset or empty.
    """
    if not (url := os.environ.get(DB_URL_ENV_VAR)):
        raise DatabaseUrlNotSetError
    return url


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Build an Alembic `Config` for RICOAI's packaged migrations.

    Args:
        db_url: SQLAlchemy database URL. May be `None` where Alembic won't
            connect (e.g. `heads`, offline `history`).
        stdout: Stream Alembic writes status lines to; override in tests to
            capture output.

    Returns:
        An `alembic.config.Config` pointing at `ricoai.adapters.db.alembic`.
    """
    cfg = Config(stdout=stdout)
    if db_url is not None:
        cfg.set_main_option(ALEMBIC_URL_KEY, db_url)
    cfg.set_main_option(
        ALEMBIC_SCRIPT_LOCATION_KEY,
        str(files("ricoai.adapters.db.alembic")),
    )
    return cfg
