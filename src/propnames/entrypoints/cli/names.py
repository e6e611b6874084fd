"""PROPNAMES name commands.

Thin wrappers over :mod:`propnames.utils` and :mod:`propnames.config`.
Results go to **stdout**, one item per line; warnings and errors go to
**stderr**.

Failure modes
- ``skewer`` with an empty identifier → ``ClickException``.
- ``env`` when no environment variable refers to the name → ``ClickException``.
- ``match`` exits with status 1 when the names do not match.
"""

import logging

import click

from propnames import config
from propnames.errors import EmptyIdentifierError, EnvOverrideNotSetError
from propnames.utils import humps, lists, names

from .helpers import warn

logger = logging.getLogger(__name__)

NOT_ROUND_TRIP_MSG = (
    "{name!r} decodes to {decoded!r}, which does not encode back to it."
)


@click.command("split")
@click.argument("text")
def split_cmd(text: str) -> None:
    """Split an escaped, comma-separated list value (one item per line)."""
    items = lists.split(text)
    logger.debug("Split %r into %d item(s)", text, len(items))
    for item in items:
        click.echo(item)


@click.command("join")
@click.argument("items", nargs=-1)
def join_cmd(items: tuple[str, ...]) -> None:
    """Join ITEMS into a comma-separated list value, escaping as needed."""
    if "" in items:
        warn("Empty items are dropped when the list value is split again.")
    click.echo(lists.join(items))


@click.command("encode")
@click.argument("name")
@click.option(
    "--upper/--no-upper",
    default=False,
    help="Upper-case the result, as environment variables usually are.",
)
def encode_cmd(name: str, upper: bool) -> None:
    """Encode a property NAME into its environment-variable form."""
    encoded = names.replace_non_alphanumeric_by_underscores(name)
    click.echo(encoded.upper() if upper else encoded)


@click.command("decode")
@click.argument("name")
def decode_cmd(name: str) -> None:
    """Decode an environment-variable NAME into a property name."""
    decoded = names.to_lower_case_and_dotted(name)
    if not names.equals_ignore_case_replacing_non_alphanumeric_by_underscores(
        name, decoded
    ):
        warn(NOT_ROUND_TRIP_MSG.format(name=name, decoded=decoded))
    click.echo(decoded)


@click.command("match")
@click.argument("candidate")
@click.argument("canonical")
@click.pass_context
def match_cmd(ctx: click.Context, candidate: str, canonical: str) -> None:
    """Check whether CANDIDATE is an environment-style spelling of CANONICAL."""
    matched = names.equals_ignore_case_replacing_non_alphanumeric_by_underscores(
        candidate, canonical
    )
    click.echo("true" if matched else "false")
    if not matched:
        ctx.exit(1)


@click.command("skewer")
@click.argument("identifier")
@click.option(
    "--separator",
    "-s",
    default=humps.DEFAULT_SEPARATOR,
    show_default=True,
    help="Text inserted between words.",
)
def skewer_cmd(identifier: str, separator: str) -> None:
    """Split a camel-hump IDENTIFIER into separated lower-case words."""
    try:
        click.echo(humps.skewer(identifier, separator))
    except EmptyIdentifierError as e:
        raise click.ClickException(str(e)) from e


@click.command("env")
@click.argument("name")
def env_cmd(name: str) -> None:
    """Print the environment override for property NAME."""
    try:
        click.echo(config.require_env_override(name))
    except EnvOverrideNotSetError as e:
        candidates = ", ".join(config.env_candidates(name))
        raise click.ClickException(f"{e} Tried: {candidates}") from e


COMMANDS = [split_cmd, join_cmd, encode_cmd, decode_cmd, match_cmd, skewer_cmd, env_cmd]
