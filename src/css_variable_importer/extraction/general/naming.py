# css_variable_importer/extraction/general/naming.py
"""
naming.

Does: Map flat declaration names (`brand-color-500`) to the hierarchical
      group/leaf convention of the design tool (`brand/color/500`) and back.
Returns: to_hierarchical_name(), to_flat_name(), group_of().
Used by: Orchestrator (entry names), scope inference (group overrides),
         existing-variable snapshot indexing.
"""

from __future__ import annotations

__all__ = ["PATH_SEPARATOR", "to_hierarchical_name", "to_flat_name", "group_of"]

PATH_SEPARATOR = "/"
_FLAT_SEPARATOR = "-"


def to_hierarchical_name(name: str) -> str:
    """
    Does: Turn every hyphen boundary into a path separator, so all segments but
          the last form the group path and the last one is the leaf.
    Returns: `a-b-c` → `a/b/c`; single-segment names unchanged.
    """
    parts = name.split(_FLAT_SEPARATOR)
    if len(parts) <= 1:
        return name
    return PATH_SEPARATOR.join(parts)


def to_flat_name(name: str) -> str:
    """Does: Exact inverse of to_hierarchical_name()."""
    return name.replace(PATH_SEPARATOR, _FLAT_SEPARATOR)


def group_of(name: str) -> str:
    """Does: Return the group path of a flat or hierarchical name ("" if none)."""
    path, sep, _leaf = to_hierarchical_name(to_flat_name(name)).rpartition(PATH_SEPARATOR)
    return path if sep else ""
