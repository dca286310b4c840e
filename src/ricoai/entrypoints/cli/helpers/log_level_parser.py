"""Parse ``NAME=LEVEL`` logger-level options.

Values may be repeated on the command line or given as one comma/space
separated string (e.g. from an environment variable).
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"sqlalchemy": logging.WARNING, "alembic": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten the raw option value into non-empty ``NAME=LEVEL`` items."""
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning ``NAME=LEVEL`` items into a name->level dict.

    Starts from ``DEFAULT_LIB_LEVELS``; later items override earlier ones.
    Level names are case-insensitive.

    Raises:
        click.BadParameter: If an item is not ``NAME=LEVEL`` or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        lvl = logging.getLevelName(level_str.strip().upper())
        if not isinstance(lvl, int):
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
