"""Support namespace for the name-transcoding helpers.

Scope:
- Small, stateless helpers that only depend on the standard library.
- Pure functions: no I/O, no logging on the hot path, no shared state.
- One module per concern: ``lists`` (escaped list values), ``names``
  (property name <-> environment name) and ``humps`` (camel-hump splitting).

Public API:
- Nothing is re-exported at the package level. Import specific helpers from
  their defining modules.
"""
