"""CLI helpers for PROPNAMES.

Utilities used by the command-line interface: a warning emitter that writes
to stderr with an emoji→ASCII fallback, and the NAME=LEVEL logger-level
option parser.
"""

from .messages import warn

__all__ = ["warn"]
