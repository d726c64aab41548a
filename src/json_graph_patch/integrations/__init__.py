"""Integrations subpackage for json-graph-patch.

- ``_pytest_plugin``: fixtures for testing code built on the edit pipeline.
  Registered through the ``pytest11`` entry point, so installing the
  package is enough for pytest to discover it.
"""

__all__: list[str] = []
