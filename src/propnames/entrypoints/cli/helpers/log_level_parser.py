"""Helpers for parsing logger-level CLI options.

This module provides utilities used by the CLI to parse options of the
form NAME=LEVEL (repeatable, comma- or space-separated). Comma lists follow
the escaped list syntax of :mod:`propnames.utils.lists`.
"""

import logging

import click

from propnames.utils.lists import split

# Loggers quieted unless overridden, e.g. {"urllib3": logging.WARNING}
DEFAULT_LIB_LEVELS: dict[str, int] = {}


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Normalize an option value into a flat list of NAME=LEVEL items.

    Accepts a single string (e.g. from an environment variable) or the tuple
    Click builds for a repeatable option. Each string is split on commas and
    then on whitespace; empty fragments are dropped.

    Args:
        value (str | list[str] | tuple[str, ...]): The option value from Click.

    Returns:
        list[str]: A flat list of non-empty item strings.
    """
    values = [value] if isinstance(value, str) else list(value)
    items: list[str] = []
    for v in values:
        for fragment in split(v):
            items.extend(fragment.split())
    return items


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Combines DEFAULT_LIB_LEVELS with any overrides supplied via the CLI. Each
    item must be of the form NAME=LEVEL where LEVEL is a standard logging level
    name (e.g. DEBUG, INFO, WARNING). Later items win.

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        click.BadParameter: If an item is malformed (not NAME=LEVEL) or LEVEL is invalid.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        try:
            name, level_str = item.split("=", 1)
        except ValueError as e:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}") from e
        lvl = logging.getLevelNamesMapping().get(level_str.strip().upper())
        if lvl is None:
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
