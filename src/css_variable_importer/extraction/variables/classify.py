# css_variable_importer/extraction/variables/classify.py
"""
classify.

Does: Decide the kind of one raw declaration and produce its typed value.
      Order (first match wins): alias `var(--x)` → number → unit literal →
      `light-dark(a, b)` → relative color → hue indirection → plain color.
Returns: ParsedVariable or None (unsupported grammar, silently skipped).
Used by: Orchestrator (top-level declarations), mode extractor (mode values).

Unit scaling: `rem` × rem_base (16 by default), `%` ÷ 100, any other unit
keeps its numeric part.
"""

from __future__ import annotations

import logging
import math
import re

from css_variable_importer.extraction.color import (
    DEFAULT_MODELS,
    DEFAULT_REM_BASE,
    DUAL_MODE_NAMES,
    PERCENT_DIVISOR,
    ColorModelTable,
    evaluate_hue_indirection,
    evaluate_relative_color,
    is_relative_color,
    parse_color,
    rgba_or_none,
)
from css_variable_importer.extraction.general.token import (
    function_call,
    split_top_level,
    var_reference,
)
from css_variable_importer.extraction.types import (
    Declaration,
    ModeSlot,
    ParsedVariable,
    VariableKind,
)
from css_variable_importer.extraction.variables.lookup import VariableTable

__all__ = [
    "parse_number",
    "description_from_comment",
    "classify_color_or_alias",
    "classify_mode_value",
    "classify_declaration",
]

logger = logging.getLogger(__name__)

_NUMERIC = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_NUMBER_RE = re.compile(rf"^{_NUMERIC}$")
_UNIT_RE = re.compile(rf"^(?P<number>{_NUMERIC})(?P<unit>%|[a-zA-Z]+)$")
_DIRECTIVE_PREFIX = "-"


# ── Scalars ──────────────────────────────────────────────────────────────────
def parse_number(raw_value: str, rem_base: float = DEFAULT_REM_BASE) -> float | None:
    """
    Does: Parse a bare number or a number with a unit suffix.
    Returns: float (rem scaled by rem_base, % divided by 100) or None.
    """
    text = raw_value.strip()
    if _NUMBER_RE.match(text):
        number = float(text)
    else:
        m = _UNIT_RE.match(text)
        if not m:
            return None
        number = float(m.group("number"))
        unit = m.group("unit").lower()
        if unit == "rem":
            number *= rem_base
        elif unit == "%":
            number /= PERCENT_DIVISOR
    return number if math.isfinite(number) else None


def description_from_comment(comment: str | None) -> str | None:
    """Does: Keep a trailing comment as description unless it is a `-` directive."""
    if not comment:
        return None
    text = comment.strip()
    if not text or text.startswith(_DIRECTIVE_PREFIX):
        return None
    return text


# ── Colors & aliases ─────────────────────────────────────────────────────────
def classify_color_or_alias(
    raw_value: str,
    lookup: VariableTable,
    *,
    derived: bool = True,
    models: ColorModelTable = DEFAULT_MODELS,
) -> ModeSlot | None:
    """
    Does: Run the alias and color grammars on one value. With derived=False
          only alias and plain-color forms are recognised (mode blocks).
    Returns: ModeSlot (ALIAS with the target name, or COLOR) or None.
    """
    target = var_reference(raw_value)
    if target is not None:
        return ModeSlot(VariableKind.ALIAS, target)

    if derived:
        if is_relative_color(raw_value):
            rgba = evaluate_relative_color(raw_value, lookup, models)
            return ModeSlot(VariableKind.COLOR, rgba) if rgba is not None else None
        rgba = evaluate_hue_indirection(raw_value, lookup, models)
        if rgba is not None:
            return ModeSlot(VariableKind.COLOR, rgba)

    color = parse_color(raw_value)
    if color is None:
        return None
    rgba = rgba_or_none(color, models)
    return ModeSlot(VariableKind.COLOR, rgba) if rgba is not None else None


def classify_mode_value(
    raw_value: str,
    lookup: VariableTable,
    models: ColorModelTable = DEFAULT_MODELS,
    rem_base: float = DEFAULT_REM_BASE,
) -> ModeSlot | None:
    """
    Does: Classify a value found inside a mode block: alias, number / unit
          literal or plain color. Derived colors are not evaluated here.
    """
    number = parse_number(raw_value, rem_base)
    if number is not None:
        return ModeSlot(VariableKind.NUMBER, number)
    return classify_color_or_alias(raw_value, lookup, derived=False, models=models)


def _classify_dual_mode(
    inner: str,
    lookup: VariableTable,
    models: ColorModelTable,
) -> dict[str, ModeSlot] | None:
    args = split_top_level(inner, ",")
    if args is None or len(args) != len(DUAL_MODE_NAMES):
        return None
    slots: dict[str, ModeSlot] = {}
    for mode, arg in zip(DUAL_MODE_NAMES, args):
        slot = classify_color_or_alias(arg, lookup, models=models)
        if slot is None:
            return None
        slots[mode] = slot
    return slots


# ── Entry point ──────────────────────────────────────────────────────────────
def classify_declaration(
    decl: Declaration,
    lookup: VariableTable,
    *,
    rem_base: float = DEFAULT_REM_BASE,
    models: ColorModelTable = DEFAULT_MODELS,
) -> ParsedVariable | None:
    """
    Does: Classify one top-level declaration against the values classified so far.
    Returns: ParsedVariable (NUMBER, COLOR or ALIAS) or None when no grammar matches.
    """
    raw = decl.raw_value.strip()
    description = description_from_comment(decl.comment)

    # 1) alias
    target = var_reference(raw)
    if target is not None:
        return ParsedVariable(decl.name, VariableKind.ALIAS, target, description=description)

    # 2) + 3) number / unit literal
    number = parse_number(raw, rem_base)
    if number is not None:
        return ParsedVariable(decl.name, VariableKind.NUMBER, number, description=description)

    # 4) light-dark(a, b)
    call = function_call(raw)
    if call is not None and call[0] == "light-dark":
        modes = _classify_dual_mode(call[1], lookup, models)
        if modes is None:
            logger.debug("Skipping --%s: unsupported light-dark arguments %r", decl.name, raw)
            return None
        # mode slots holding aliases are settled per mode after resolution
        base = modes[DUAL_MODE_NAMES[0]]
        return ParsedVariable(
            decl.name, base.kind, base.value, modes=modes, description=description
        )

    # 5) – 7) relative color, hue indirection, plain literal
    slot = classify_color_or_alias(raw, lookup, models=models)
    if slot is None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Skipping --%s: no supported grammar for %r", decl.name, raw)
        return None
    return ParsedVariable(decl.name, slot.kind, slot.value, description=description)
