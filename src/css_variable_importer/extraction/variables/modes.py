# css_variable_importer/extraction/variables/modes.py
"""
modes.

Does: Merge declarations found in mode blocks (`[data-theme="dark"] { ... }`)
      into the per-mode slots of the variables table, creating fallback
      variables for names that never appear at top level, and settle those
      fallbacks once their slots are resolved.
Returns: extract_mode_variants() → number of mode slots written;
         settle_fallbacks() → names of fallback variables dropped.
Used by: Orchestrator, around alias resolution.
"""

from __future__ import annotations

import logging

from css_variable_importer.extraction.color import (
    DEFAULT_MODELS,
    DEFAULT_REM_BASE,
    ZERO_COLOR,
    ZERO_NUMBER,
    ColorModelTable,
)
from css_variable_importer.extraction.general.token import Stylesheet
from css_variable_importer.extraction.types import ParsedVariable, VariableKind
from css_variable_importer.extraction.variables.classify import (
    classify_mode_value,
    description_from_comment,
)
from css_variable_importer.extraction.variables.lookup import VariableTable

__all__ = ["extract_mode_variants", "settle_fallbacks"]

logger = logging.getLogger(__name__)


def extract_mode_variants(
    stylesheet: Stylesheet,
    table: VariableTable,
    models: ColorModelTable = DEFAULT_MODELS,
    rem_base: float = DEFAULT_REM_BASE,
) -> int:
    """
    Does: Write every alias, number or plain-color declaration of every mode
          block into `table[name].modes[mode]`. Alias slots are kept as ALIAS
          and resolved per mode after all blocks are merged.
    Returns: Count of mode slots written.
    """
    written = 0
    for block in stylesheet.mode_blocks():
        for decl in block.declarations:
            slot = classify_mode_value(decl.raw_value, table, models, rem_base)
            if slot is None:
                logger.debug(
                    "Skipping --%s in mode %r: unsupported value %r",
                    decl.name,
                    block.mode,
                    decl.raw_value,
                )
                continue

            var = table.get(decl.name)
            if var is None:
                var = ParsedVariable(
                    decl.name,
                    VariableKind.COLOR,
                    ZERO_COLOR,
                    description=description_from_comment(decl.comment),
                    fallback=True,
                )
                table.put(var)

            var.set_mode(block.mode, slot)
            written += 1
    return written


def settle_fallbacks(table: VariableTable) -> list[str]:
    """
    Does: Give every mode-only variable a base of its first slot's kind
          (zero color or 0.0), drop slots of another kind, and remove the
          variable when no slot is left. Settled variables stop being
          placeholders, so aliases may target them from then on.
    Returns: Names removed from the table.
    """
    dropped: list[str] = []
    for var in list(table):
        if not var.fallback:
            continue
        slots = var.modes or {}
        kinds = [s.kind for s in slots.values() if s.kind is not VariableKind.ALIAS]
        if not kinds:
            table.remove(var.name)
            dropped.append(var.name)
            continue
        kind = kinds[0]
        for mode in [m for m, s in slots.items() if s.kind is not kind]:
            logger.warning(
                "Dropping %s slot of --%s: %s value for a %s variable",
                mode,
                var.name,
                slots[mode].kind.value,
                kind.value,
            )
            del slots[mode]
        var.kind = kind
        var.value = ZERO_NUMBER if kind is VariableKind.NUMBER else ZERO_COLOR
        var.fallback = False
    if dropped:
        logger.debug("Dropped mode-only variables without slots: %s", ", ".join(dropped))
    return dropped
