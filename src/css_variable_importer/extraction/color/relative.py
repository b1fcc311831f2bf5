"""
relative.py
===========

Does: Evaluate colors derived from other declarations:
      - relative colors `oklch(from var(--base) l c h)` with per-channel
        keywords, literals, percentages, `var()` references and hue shifts
        `calc(h ± var(--x))`;
      - hue indirection `oklch(0.7 0.12 var(--brand-hue))`.
Used By: Value classifier (top-level and light-dark arguments).
Returns: Gamut-clamped RGBA, or None when any operand cannot be evaluated.

Evaluation is single-pass: a base color or numeric operand that has not been
classified yet makes the whole expression unparseable for this run.
"""

from __future__ import annotations

import logging
import re
from typing import Protocol

from css_variable_importer.extraction.color.bridge import (
    DEFAULT_MODELS,
    Color,
    ColorModelTable,
    alpha_literal,
    channel_literal,
    from_rgba,
    parse_color,
    rgba_or_none,
    split_alpha,
)
from css_variable_importer.extraction.color.constants import (
    CHROMA_REFERENCE_MAX,
    PERCEPTUAL_MODEL,
)
from css_variable_importer.extraction.general.token import function_call, var_reference
from css_variable_importer.extraction.types import RGBA

__all__ = [
    "ValueLookup",
    "is_relative_color",
    "evaluate_relative_color",
    "evaluate_hue_indirection",
]

logger = logging.getLogger(__name__)

_FROM_RE = re.compile(r"^\s*from\s+", re.IGNORECASE)
_HUE_SHIFT_RE = re.compile(r"^\s*h\s*(?P<op>[+-])\s*(?P<operand>.+?)\s*$", re.IGNORECASE | re.DOTALL)
_CHANNELS = ("l", "c", "h")


class ValueLookup(Protocol):
    """Read-only view of already-classified values (in-pass, then snapshot)."""

    def color(self, name: str) -> RGBA | None: ...
    def number(self, name: str) -> float | None: ...


# ── Grammar helpers ──────────────────────────────────────────────────────────
def is_relative_color(raw_value: str) -> bool:
    """Does: True when the value is an `oklch(from ...)` expression."""
    call = function_call(raw_value)
    return call is not None and call[0] == "oklch" and bool(_FROM_RE.match(call[1]))


def _base_color(token: str, lookup: ValueLookup) -> RGBA | None:
    ref = var_reference(token)
    if ref is not None:
        return lookup.color(ref)
    literal = parse_color(token)
    return rgba_or_none(literal) if literal is not None else None


def _hue_shift(inner: str, base_hue: float, lookup: ValueLookup) -> float | None:
    m = _HUE_SHIFT_RE.match(inner)
    if not m:
        return None
    operand = m.group("operand")
    ref = var_reference(operand)
    offset = lookup.number(ref) if ref is not None else channel_literal(operand, "h")
    if offset is None:
        return None
    return base_hue + offset if m.group("op") == "+" else base_hue - offset


def _operand(token: str, channel: str, base: dict[str, float], lookup: ValueLookup) -> float | None:
    """Evaluate one channel operand against the base color's OKLCH channels."""
    if token.strip().lower() == channel:
        return base[channel]
    ref = var_reference(token)
    if ref is not None:
        value = lookup.number(ref)
        if value is None:
            return None
        return value * CHROMA_REFERENCE_MAX if channel == "c" else value
    if channel == "h":
        call = function_call(token)
        if call is not None and call[0] == "calc":
            return _hue_shift(call[1], base["h"], lookup)
    return channel_literal(token, channel)


def _finish(lch: tuple[float, float, float], alpha: float, models: ColorModelTable) -> RGBA | None:
    return rgba_or_none(Color(PERCEPTUAL_MODEL, lch, alpha), models)


# ── Evaluators ───────────────────────────────────────────────────────────────
def evaluate_relative_color(
    raw_value: str,
    lookup: ValueLookup,
    models: ColorModelTable = DEFAULT_MODELS,
) -> RGBA | None:
    """
    Does: Evaluate `oklch(from <base> <l> <c> <h> [/ <alpha>])`.
    Returns: RGBA with the base alpha (unless an explicit alpha operand is
             given), or None when the base or any operand is unavailable.
    """
    call = function_call(raw_value)
    if call is None or call[0] != "oklch":
        return None
    m = _FROM_RE.match(call[1])
    if not m:
        return None
    split = split_alpha(call[1][m.end():])
    if split is None:
        return None
    tokens, alpha_token = split
    if len(tokens) != 4:
        return None

    base_rgba = _base_color(tokens[0], lookup)
    if base_rgba is None:
        logger.debug("[relative] base %r not available yet in %r", tokens[0], raw_value)
        return None
    L, C, H = from_rgba(base_rgba, PERCEPTUAL_MODEL, models).coords
    base = {"l": L, "c": C, "h": H}

    values: list[float] = []
    for token, channel in zip(tokens[1:], _CHANNELS):
        value = _operand(token, channel, base, lookup)
        if value is None:
            logger.debug("[relative] cannot evaluate %s operand %r in %r", channel, token, raw_value)
            return None
        values.append(value)

    alpha = base_rgba.a
    if alpha_token is not None and alpha_token.strip().lower() != "alpha":
        explicit = alpha_literal(alpha_token)
        if explicit is None:
            return None
        alpha = explicit
    return _finish((values[0], values[1], values[2]), alpha, models)


def evaluate_hue_indirection(
    raw_value: str,
    lookup: ValueLookup,
    models: ColorModelTable = DEFAULT_MODELS,
) -> RGBA | None:
    """
    Does: Evaluate `oklch(<L> <C> var(--hue) [/ <alpha>])` with literal or
          percentage lightness and chroma.
    Returns: RGBA, or None when the form does not match or the hue is unknown.
    """
    call = function_call(raw_value)
    if call is None or call[0] != "oklch" or _FROM_RE.match(call[1]):
        return None
    split = split_alpha(call[1])
    if split is None:
        return None
    tokens, alpha_token = split
    if len(tokens) != 3:
        return None
    ref = var_reference(tokens[2])
    if ref is None:
        return None
    L = channel_literal(tokens[0], "l")
    C = channel_literal(tokens[1], "c")
    H = lookup.number(ref)
    if L is None or C is None or H is None:
        return None
    alpha = 1.0
    if alpha_token is not None:
        explicit = alpha_literal(alpha_token)
        if explicit is None:
            return None
        alpha = explicit
    return _finish((L, C, H), alpha, models)
