# css_variable_importer/extraction/general/__init__.py
"""
general.
=======

Does: Domain-neutral helpers of the import engine: stylesheet tokenization,
      name mapping, scope inference, config loading and debug logging.
Used by: Color bridge, variables layer, orchestrator.
"""

from __future__ import annotations

from .naming import PATH_SEPARATOR, group_of, to_flat_name, to_hierarchical_name

__all__ = [
    "PATH_SEPARATOR",
    "to_hierarchical_name",
    "to_flat_name",
    "group_of",
]
