"""PROPNAMES

Name-transcoding utilities for configuration keys. Translates between the
dotted/indexed canonical form of a property name, its environment-variable
form, and backslash-escaped list values.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
