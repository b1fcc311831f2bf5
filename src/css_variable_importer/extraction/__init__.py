# css_variable_importer/extraction/__init__.py

"""
extraction.
==========

Does: Group the import engine: `general` (tokenizer, naming, scopes, utils),
      `color` (literal bridge, relative colors), `variables` (classification,
      modes, aliases), plus the orchestrator and serializer.
"""
from __future__ import annotations

__all__: list[str] = []
__docformat__ = "google"
