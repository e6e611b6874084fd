"""Logging setup for the PROPNAMES CLI.

Two handlers are built here and installed on the root logger by the CLI
entry point:

- a Rich console handler on stderr, whose verbosity follows ``-v``/``-q``;
- a "flight recorder": a memory buffer of DEBUG records that is written to a
  log file only when something goes wrong (a WARNING or worse), or at exit
  when explicitly requested.

Library modules never touch handlers; they only create module loggers.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from importlib.metadata import version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "propnames"

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
FLIGHT_RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

# distributions whose versions are reported at startup
REPORTED_DISTRIBUTIONS = ("click", "click-extra", "rich")

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from other projects with their top-level package name.

    ``urllib3.connectionpool`` records get ``record.prefix == "[urllib3]"``;
    records from ``propnames`` loggers get an empty prefix. Nothing is
    filtered out.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        top_level = record.name.partition(".")[0]
        record.prefix = "" if top_level == PROJECT_PREFIX else f"[{top_level}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Minimum level shown. Ignored in debug mode, which shows DEBUG.
        debug_mode: Show timestamps, logger names and source locations
            instead of the third-party prefix.
        color: False disables colour, matching ``--no-color``.

    Returns:
        RichHandler: Handler to install on the root logger.
    """
    color_system: ColorSystem | None = "auto" if color else None

    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(fmt=DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path, capacity: int = 2000, flush_on_close: bool = False
) -> MemoryHandler:
    """Build the flight recorder writing to ``path``.

    The file is truncated when the recorder is created. Up to ``capacity``
    records are buffered; the buffer is written out whenever a WARNING or
    worse is recorded, or when it fills up.

    Args:
        path: Log file receiving flushed records.
        capacity: Number of records buffered between flushes.
        flush_on_close: Also write the remaining buffer when the recorder
            is closed with :func:`close_flight_recorder`.

    Returns:
        MemoryHandler: Buffering handler with a ``FileHandler`` target.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FLIGHT_RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=logging.WARNING,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def close_flight_recorder(handler: MemoryHandler) -> None:
    """Close the flight recorder and its log file.

    Records still buffered are written only if the recorder was built with
    ``flush_on_close``; otherwise they are dropped. Must run before
    :func:`logging.shutdown`, which flushes every handler regardless of
    ``flushOnClose`` on Python 3.11.
    """
    target = handler.target
    if not handler.flushOnClose:
        handler.acquire()
        try:
            handler.buffer.clear()
        finally:
            handler.release()
    handler.close()
    if target is not None:
        target.close()


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
) -> None:
    """Log what this run was configured with.

    One INFO line sums up the version, console level and flight recorder
    state. Everything else (interpreter, platform, process, library
    versions, handlers, per-logger levels) goes out at DEBUG, so it normally
    only reaches the flight recorder.
    """
    logger.info(
        "PROPNAMES %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    for dist in REPORTED_DISTRIBUTIONS:
        logger.debug("%s: %s", dist.replace("-", " ").title(), version(dist))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])

    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            log_path if log_path else "<none>",
            flight_capacity,
            force_flush_fr,
        )

    overrides = {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
    logger.debug("Per-logger overrides: %s", overrides or "<none>")
