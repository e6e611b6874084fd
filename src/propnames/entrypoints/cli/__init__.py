"""The ``propnames`` command-line interface."""
