"""Terminal message helpers for the PROPNAMES CLI.

Messages go to stderr so stdout only carries command results (split items,
encoded names, ...) and stays safe to pipe.
"""

import sys

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    The stream is looked up on every call; tests and terminals may swap it.
    """
    try:
        character.encode(sys.stderr.encoding or "utf-8")
    except UnicodeEncodeError:
        return False
    return True


def caution_glyph() -> str:
    """Return "⚠️", or "[!]" on terminals that cannot encode it."""
    emoji, fallback = ("⚠️", "[!]")  # pragma: no mutate
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr** with a caution glyph.

    Example:
        ``⚠️  'a_b__c' decodes to 'a.b."c', which does not encode back to it.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)
