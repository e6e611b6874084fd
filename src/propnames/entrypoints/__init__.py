"""Entrypoints (inbound adapters) for PROPNAMES.

Expose the name-transcoding helpers to the outside world. Parse and validate
inputs, call into `propnames.utils` and `propnames.config`, and present
results.
"""
