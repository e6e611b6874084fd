"""Fixtures for end-to-end CLI logging tests.

Provides a test-only `log-demo` command that emits log messages on a project
logger and a third-party logger, and a fixture that registers it on the
top-level `propnames` group for the duration of a test.
"""

import logging

import click
import pytest

from propnames.entrypoints.cli.main import propnames

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages for CLI/flight-recorder tests."""
    logger = logging.getLogger("propnames.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a group and from the help sections Click-Extra keeps."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    propnames.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(propnames, "log-demo")
        # per-logger levels set by -L must not leak into other tests
        logging.getLogger("some.thirdparty").setLevel(logging.NOTSET)
