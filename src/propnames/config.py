"""Environment-variable overrides for configuration property names.

This module centralizes how a canonical property name (``my.prop[0].key``)
is looked up in the process environment, where it may be spelled exactly,
encoded (``my_prop_0__key``) or encoded and upper-cased (``MY_PROP_0__KEY``).
"""

import logging
import os
from collections.abc import Mapping

from propnames.errors import EnvOverrideNotSetError
from propnames.utils.names import (
    equals_ignore_case_replacing_non_alphanumeric_by_underscores,
    replace_non_alphanumeric_by_underscores,
    to_lower_case_and_dotted,
)

ENV_PREFIX = "PROPNAMES"  # pragma: no mutate

logger = logging.getLogger(__name__)


def env_candidates(name: str) -> list[str]:
    """Return the environment variable names tried for ``name``, in order.

    Args:
        name: Canonical property name.

    Returns:
        ``name`` itself, its encoded form and its upper-cased encoded form,
        without duplicates.
    """
    encoded = replace_non_alphanumeric_by_underscores(name)
    candidates: list[str] = []
    for candidate in (name, encoded, encoded.upper()):
        if candidate and candidate not in candidates:
            candidates.append(candidate)
    return candidates


def find_env_override(
    name: str, environ: Mapping[str, str] | None = None
) -> str | None:
    """Look up the environment override for a property name.

    Exact candidates from :func:`env_candidates` are tried first. Failing
    that, the environment keys are scanned in sorted order for the first one
    that is an encoding of ``name`` under any letter case.

    Args:
        name: Canonical property name.
        environ: Environment to search. Defaults to ``os.environ``.

    Returns:
        The override value, or None if no variable refers to ``name``.
    """
    if environ is None:
        environ = os.environ

    for candidate in env_candidates(name):
        if candidate in environ:
            logger.debug("Property %r set by environment variable %s", name, candidate)
            return environ[candidate]

    for key in sorted(environ):
        if equals_ignore_case_replacing_non_alphanumeric_by_underscores(key, name):
            logger.debug("Property %r matched environment variable %s", name, key)
            return environ[key]

    logger.debug("No environment override for property %r", name)
    return None


def require_env_override(name: str, environ: Mapping[str, str] | None = None) -> str:
    """Like :func:`find_env_override` but fail when nothing is set.

    Raises:
        EnvOverrideNotSetError: If no environment variable refers to ``name``.
    """
    if (value := find_env_override(name, environ)) is None:
        raise EnvOverrideNotSetError(name)
    return value


def property_name_for_env(env_name: str) -> str:
    """Return the canonical property name an environment variable most likely sets."""
    return to_lower_case_and_dotted(env_name)
