"""
variables.
=========

Does: Turn declarations into typed variables and resolve them: in-pass
      lookup table, value classifier, mode variant extractor, alias resolver.
Used By: Orchestrator.
"""

from __future__ import annotations

from .aliases import (
    ResolutionReport,
    collect_mode_aliases,
    lookup_mode_target,
    lookup_target,
    resolve_aliases,
    resolve_mode_aliases,
)
from .classify import (
    classify_color_or_alias,
    classify_declaration,
    classify_mode_value,
    description_from_comment,
    parse_number,
)
from .lookup import VariableTable
from .modes import extract_mode_variants, settle_fallbacks

__all__ = [
    # lookup
    "VariableTable",
    # classify
    "parse_number",
    "description_from_comment",
    "classify_color_or_alias",
    "classify_mode_value",
    "classify_declaration",
    # modes
    "extract_mode_variants",
    "settle_fallbacks",
    # aliases
    "ResolutionReport",
    "lookup_target",
    "lookup_mode_target",
    "resolve_aliases",
    "collect_mode_aliases",
    "resolve_mode_aliases",
]
