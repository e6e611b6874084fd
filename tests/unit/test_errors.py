"""Unit tests for propnames.errors."""

import pytest

from propnames.errors import EmptyIdentifierError, EnvOverrideNotSetError, NamingError


@pytest.mark.parametrize(
    "error", [EmptyIdentifierError(), EnvOverrideNotSetError("my.prop")]
)
def test_errors_share_a_base_class(error):
    """All PROPNAMES errors derive from NamingError."""
    assert isinstance(error, NamingError)


def test_empty_identifier_error_message():
    """The message names what was empty."""
    assert str(EmptyIdentifierError()) == "Cannot split an empty identifier."
    assert str(EmptyIdentifierError("method name")) == "Cannot split an empty method name."


def test_env_override_not_set_error_message():
    """The message names the property."""
    err = EnvOverrideNotSetError("my.prop")
    assert str(err) == "No environment override is set for property 'my.prop'."
    assert err.name == "my.prop"
