"""PROPNAMES CLI entry point.

Defines the top-level ``propnames`` command (via Click-Extra), wires up
console logging and the flight recorder, and registers the name commands.

Notes
- The CLI version is sourced from `propnames.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Additional commands should be registered here via ``propnames.add_command(...)``.

Examples
    $ propnames encode 'my.prop[0].key' --upper
    $ propnames decode MY_PROP_0__KEY
    $ propnames split 'a,b\\,c,d'
"""

import logging
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from propnames import __version__
from propnames.config import ENV_PREFIX
from propnames.logging import (
    close_flight_recorder,
    config_console_handler,
    config_flight_recorder,
    log_startup,
)

from .helpers.log_level_parser import parse_log_level
from .names import COMMANDS

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """PROPNAMES command-line interface.

    Translate configuration property names between their dotted canonical form
    (my.prop[0].key) and their environment-variable form (MY_PROP_0__KEY), split
    and join backslash-escaped list values, and turn camelCase identifiers into
    kebab-case.
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('Examples:', fg='blue', bold=True, underline=True)}",
        "  propnames encode 'my.prop[0].key' --upper",
        "  propnames decode MY_PROP_0__KEY",
        "  propnames skewer HTTPServer",
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("propnames", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar=f"{ENV_PREFIX}_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar=f"{ENV_PREFIX}_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        f"(tunable via {ENV_PREFIX}_FLIGHT_RECORDER_CAPACITY) at DEBUG granularity "
        "and writes them to --log-path when a WARNING/ERROR occurs, or on clean exit "
        "if --force-flush is set. Use --no-flight-recorder to disable."
    ),
    default=True,
    envvar=f"{ENV_PREFIX}_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help=(
        "Force-flush the flight recorder buffer to --log-path on program exit. "
        "Normally the buffer only dumps on WARNING/ERROR."
    ),
    default=False,
    envvar=f"{ENV_PREFIX}_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to BOTH "
        "console and flight-recorder. Repeatable (e.g. -L propnames.config=INFO) or "
        f"via {ENV_PREFIX}_LOGGER_LEVEL (comma/space list)."
    ),
    default=(),
    envvar=f"{ENV_PREFIX}_LOGGER_LEVEL",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def propnames(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """PROPNAMES command-line interface."""

    # 0) compute effective verbosity
    base_level = logging.WARNING
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    # 1) console handler; None or True from --color both allow colour
    use_color = ctx.color is not False
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    # 2) flight recorder
    recorder = None
    if flight_recorder:
        recorder = config_flight_recorder(
            path=log_path,
            capacity=flight_recorder_capacity,
            flush_on_close=force_flush_flight_recorder,
        )
        handlers.append(recorder)

    # 3) root logger captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 4) per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )

    # closers run last-in first-out: the recorder is closed before shutdown
    ctx.call_on_close(logging.shutdown)
    if recorder is not None:
        ctx.call_on_close(partial(close_flight_recorder, recorder))


for command in COMMANDS:
    propnames.add_command(command)
