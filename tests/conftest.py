"""Global pytest fixtures for PROPNAMES."""

from __future__ import annotations

import logging
from logging.handlers import MemoryHandler

import pytest
from click.testing import CliRunner
from rich.logging import RichHandler

# pylint: disable=redefined-outer-name


@pytest.fixture(autouse=True)
def _reset_root_logger():
    """Drop the handlers a CLI invocation installs on the root logger."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler, (RichHandler, MemoryHandler)):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def runner() -> CliRunner:
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner: CliRunner):
    """Run the test inside an isolated filesystem so log files stay contained."""
    with runner.isolated_filesystem():
        yield
