"""RICOAI CLI entry point.

Defines the top-level ``ricoai`` command (via Click-Extra), configures
logging from the global options, and registers subcommands.

Currently available groups
- ``ricoai db``: forward-only schema management (upgrade/current/heads/history/status).

Examples
    $ ricoai --version
    $ ricoai -v db status
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from ricoai import __version__
from ricoai.logging import LoggingSettings, configure_logging, log_startup

from .db import db as db_group
from .helpers.log_level_parser import parse_log_level

logger = logging.getLogger(__name__)


HELP = """RICOAI command-line interface.

    Manages the database behind RICOAI's user image store: photo metadata
    recording each image's owner, storage and thumbnail locations, and
    whether it is publicly visible.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Lower the console threshold by one level per repetition (default WARNING).",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Raise the console threshold by one level per repetition (default WARNING).",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names and source paths).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Flight recorder output file.",
    default=Path(user_log_dir("ricoai", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="RICOAI_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="RICOAI_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity and write them to "
        "--log-path when a WARNING/ERROR occurs (or on exit with --force-flush). "
        "Console verbosity is unaffected."
    ),
    default=True,
    envvar="RICOAI_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush",
    is_flag=True,
    help="Always write the flight recorder buffer to --log-path on exit.",
    default=False,
    show_default=True,
    envvar="RICOAI_FORCE_FLUSH",
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set the minimum level of specific loggers (NAME=LEVEL). Applies to "
        "console and flight recorder. Repeatable, e.g. -L sqlalchemy=INFO."
    ),
    default=("sqlalchemy=WARNING", "alembic=WARNING"),
    show_default=True,
    envvar="RICOAI_LOGGER_LEVELS",
    show_envvar=True,
)
@clickx.pass_context
def ricoai(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """RICOAI command-line interface."""

    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    settings = LoggingSettings(
        level=level,
        debug=debug,
        color=ctx.color is not False,  # None or True => allow color
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity,
        force_flush=force_flush,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)
    log_startup(logger, app_version=__version__, settings=settings, handlers=handlers)

    ctx.call_on_close(logging.shutdown)


ricoai.add_command(db_group)
