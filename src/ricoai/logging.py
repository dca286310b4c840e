"""Logging setup for the RICOAI CLI and library.

Console output goes through Rich. Optionally, an in-memory "flight recorder"
keeps recent DEBUG records and dumps them to a file when a WARNING or worse
is logged, so a failed run leaves a full trace behind without making the
console noisy.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

import alembic
import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "ricoai"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from other libraries with a short ``[lib]`` prefix.

    ``sqlalchemy.engine.Engine`` becomes ``[sqlalchemy]``; RICOAI's own
    records get an empty prefix. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Minimum level shown (forced to DEBUG in debug mode).
        debug_mode: Show timestamps, logger names and source paths.
        color: Disable to match click-extra's ``--no-color``.

    Returns:
        RichHandler: Handler ready to attach to the root logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the flight recorder: a MemoryHandler in front of a file.

    Args:
        path: File the buffer is written to (truncated on first flush).
        capacity: Number of records kept in memory.
        flush_level: Records at or above this level trigger a flush.
        flush_on_close: Also flush when the handler is closed.

    Returns:
        MemoryHandler: The buffering handler.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] "
            "%(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


@dataclass(frozen=True)
class LoggingSettings:
    """Resolved logging options, usually straight from the CLI."""

    # pylint: disable=too-many-instance-attributes

    level: int = logging.WARNING
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    flight_recorder: bool = False
    flight_capacity: int = 2000
    force_flush: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)


def configure_logging(settings: LoggingSettings) -> list[logging.Handler]:
    """Install RICOAI's handlers on the root logger.

    The root logger is set to DEBUG so each handler does its own filtering;
    per-logger overrides in ``settings.logger_levels`` apply to every handler.

    Returns:
        list[logging.Handler]: The handlers that were installed.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(
            level=settings.level, debug_mode=settings.debug, color=settings.color
        )
    ]
    if settings.flight_recorder and settings.log_path is not None:
        handlers.append(
            config_flight_recorder(
                path=settings.log_path,
                capacity=settings.flight_capacity,
                flush_on_close=settings.force_flush,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, lvl in settings.logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    return handlers


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    settings: LoggingSettings,
    handlers: list[logging.Handler],
) -> None:
    """Log a one-line INFO summary followed by DEBUG diagnostics.

    The diagnostics cover interpreter, platform, process, working directory,
    SQLAlchemy/Alembic versions, installed handlers and logger overrides.
    """
    logger.info(
        "RICOAI %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(settings.level),
        "ON" if settings.flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("Alembic: %s", alembic.__version__)
    logger.debug("SQLAlchemy: %s", sqlalchemy.__version__)
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if settings.flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            settings.log_path if settings.log_path else "<none>",
            settings.flight_capacity,
            settings.force_flush,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in settings.logger_levels.items()}
        or "<none>",
    )
