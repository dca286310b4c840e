"""Fixtures for end-to-end CLI logging tests.

Registers a test-only ``log-demo`` command on the top-level ``ricoai`` group
and runs each test inside an isolated filesystem.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from ricoai.entrypoints.cli.main import ricoai

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Log what a short repository session would, at every level.

    Records go to ``ricoai.adapters.user_images`` and, standing in for the
    database driver, to ``psycopg.pool`` so logger-level overrides and the
    flight recorder can be checked against both.
    """
    logger = logging.getLogger("ricoai.adapters.user_images")
    logger.debug("debug-level: looking up images for owner 66")
    logger.info("info-level: stored image 100 for owner 66")
    logger.warning("warning-level: image 100 has no thumbnail yet")
    logger.error("error-level: could not remove image 14")
    logger.critical("critical-level: user image store unreachable")
    driver_logger = logging.getLogger("psycopg.pool")
    driver_logger.debug("debug-level: driver checked out a connection")
    driver_logger.info("info-level: driver pool resized to 4")
    driver_logger.warning("warning-level: driver connection was slow")
    logger.debug("debug-level: closing repository session")


def _remove_command_everywhere(group, name: str) -> None:
    """Drop ``name`` from the group and from click-extra's section registries."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register ``log-demo`` on ``ricoai`` for the duration of a test."""
    ricoai.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(ricoai, "log-demo")


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside ``runner.isolated_filesystem()``."""
    with runner.isolated_filesystem():
        yield
