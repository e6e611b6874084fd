"""Error definitions for PROPNAMES."""


class NamingError(Exception):
    """Base class for PROPNAMES errors."""


class EmptyIdentifierError(NamingError, ValueError):
    """Raised when an identifier that must be non-empty is empty."""

    def __init__(self, what: str = "identifier") -> None:
        super().__init__(f"Cannot split an empty {what}.")
        self.what = what


class EnvOverrideNotSetError(NamingError):
    """Raised when no environment variable maps to a property name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No environment override is set for property '{name}'.")
        self.name = name
