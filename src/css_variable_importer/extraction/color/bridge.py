"""
bridge.py
=========

Does: Adapt color literals to normalized colors: parse a literal (hex, named,
      rgb()/hsl() via tinycss2, oklch()/oklab()), convert between models
      through an explicit model table, gamut-clamp for storage.
Used By: Value classifier (plain literals), relative color evaluator,
         mode variant extractor.
Returns: Color records, RGBA storage values, or None when a literal is rejected.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

import tinycss2.color3
import webcolors

from css_variable_importer.extraction.color.constants import (
    CHROMA_REFERENCE_MAX,
    PERCEPTUAL_MODEL,
    STORAGE_MODEL,
)
from css_variable_importer.extraction.color.utils import (
    Triple,
    clamp_unit,
    oklab_to_oklch,
    oklab_to_srgb,
    oklch_to_oklab,
    oklch_to_srgb,
    srgb_to_oklab,
    srgb_to_oklch,
)
from css_variable_importer.extraction.general.token import function_call, split_top_level
from css_variable_importer.extraction.types import RGBA

__all__ = [
    "Color",
    "ColorModel",
    "ColorModelTable",
    "DEFAULT_MODELS",
    "parse_color",
    "convert",
    "gamut_clamp",
    "to_rgba",
    "rgba_or_none",
    "from_rgba",
    "channel_literal",
    "alpha_literal",
    "split_alpha",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_IDENT_RE = re.compile(r"^[a-zA-Z]+$")


# =============================================================================
# 1) COLOR RECORD & MODEL TABLE
# =============================================================================

@dataclass(frozen=True)
class Color:
    """A color in one model; `alpha` is None when the literal did not state one."""

    model: str
    coords: Triple
    alpha: float | None = None


@dataclass(frozen=True)
class ColorModel:
    """Conversion pair between one model and the sRGB hub."""

    name: str
    to_rgb: Callable[[Triple], Triple]
    from_rgb: Callable[[Triple], Triple]


def _identity(coords: Triple) -> Triple:
    return coords


class ColorModelTable:
    """Static model-id → conversion table, built once and passed by reference."""

    def __init__(self, models: Iterable[ColorModel]):
        self._models = {m.name: m for m in models}

    @classmethod
    def default(cls) -> ColorModelTable:
        return cls(
            (
                ColorModel("rgb", _identity, _identity),
                ColorModel("oklab", oklab_to_srgb, srgb_to_oklab),
                ColorModel("oklch", oklch_to_srgb, srgb_to_oklch),
            )
        )

    def __contains__(self, name: object) -> bool:
        return name in self._models

    def model(self, name: str) -> ColorModel:
        try:
            return self._models[name]
        except KeyError:
            raise ValueError(f"Unknown color model: {name!r}") from None

    def convert(self, color: Color, target: str) -> Color:
        if color.model == target:
            return color
        # OKLab <-> OKLCH is a pure polar transform; skip the sRGB round trip
        if (color.model, target) == ("oklab", "oklch"):
            return Color(target, oklab_to_oklch(color.coords), color.alpha)
        if (color.model, target) == ("oklch", "oklab"):
            return Color(target, oklch_to_oklab(color.coords), color.alpha)
        rgb = self.model(color.model).to_rgb(color.coords)
        return Color(target, self.model(target).from_rgb(rgb), color.alpha)


DEFAULT_MODELS = ColorModelTable.default()


# =============================================================================
# 2) CHANNEL LITERALS (shared with relative colors)
# =============================================================================

def _number(token: str) -> float | None:
    if not _NUMBER_RE.match(token):
        return None
    value = float(token)
    return value if math.isfinite(value) else None


def channel_literal(token: str, channel: str) -> float | None:
    """
    Does: Parse one literal OKLCH/OKLab channel operand.
          l: number (0–1) or percentage (÷100);
          c / a / b: number or percentage of CHROMA_REFERENCE_MAX;
          h: number, optionally suffixed with `deg`.
    Returns: Channel on the model's native scale, or None.
    """
    token = token.strip().lower()
    channel = channel.lower()
    if channel == "h":
        if token.endswith("deg"):
            token = token[:-3]
        return _number(token)
    if token.endswith("%"):
        pct = _number(token[:-1])
        if pct is None:
            return None
        if channel == "l":
            return pct / 100.0
        return pct / 100.0 * CHROMA_REFERENCE_MAX
    return _number(token)


def alpha_literal(token: str) -> float | None:
    """Does: Parse an alpha operand (number or percentage), clamped to [0, 1]."""
    token = token.strip()
    if token.endswith("%"):
        pct = _number(token[:-1])
        value = None if pct is None else pct / 100.0
    else:
        value = _number(token)
    if value is None:
        return None
    return min(1.0, max(0.0, value))


def split_alpha(inner: str) -> tuple[list[str], str | None] | None:
    """Split `c1 c2 c3 [/ alpha]` into channel tokens and the alpha token."""
    halves = split_top_level(inner, "/")
    if halves is None or len(halves) > 2:
        return None
    channels = split_top_level(halves[0], None)
    if channels is None:
        return None
    return channels, (halves[1] if len(halves) == 2 else None)


# =============================================================================
# 3) LITERAL PARSING
# =============================================================================

def _parse_perceptual(name: str, inner: str) -> Color | None:
    if "var(" in inner or re.match(r"^\s*from\b", inner):
        return None
    split = split_alpha(inner)
    if split is None:
        return None
    channels, alpha_token = split
    if len(channels) != 3:
        return None
    letters = ("l", "c", "h") if name == "oklch" else ("l", "a", "b")
    coords = [channel_literal(tok, ch) for tok, ch in zip(channels, letters)]
    if any(c is None for c in coords):
        return None
    alpha = None
    if alpha_token is not None:
        alpha = alpha_literal(alpha_token)
        if alpha is None:
            return None
    c1, c2, c3 = coords
    return Color(name, (c1, c2, c3), alpha)  # type: ignore[arg-type]


def _parse_webcolor(text: str) -> Color | None:
    """Hex (#rgb / #rrggbb) and CSS named colors through webcolors."""
    try:
        if _HEX_RE.match(text):
            rgb = webcolors.hex_to_rgb(text)
        elif _IDENT_RE.match(text):
            rgb = webcolors.name_to_rgb(text.lower())
        else:
            return None
    except ValueError:
        return None
    return Color(STORAGE_MODEL, (rgb.red / 255.0, rgb.green / 255.0, rgb.blue / 255.0))


def _parse_css3(text: str) -> Color | None:
    """rgb()/rgba()/hsl()/hsla(), 4/8-digit hex and `transparent` through tinycss2."""
    parsed = tinycss2.color3.parse_color(text)
    if parsed is None or isinstance(parsed, str):
        # `currentColor` has no value of its own
        return None
    return Color(
        STORAGE_MODEL,
        (float(parsed.red), float(parsed.green), float(parsed.blue)),
        float(parsed.alpha),
    )


def parse_color(text: str) -> Color | None:
    """
    Does: Parse a color literal to a normalized Color.
    Returns: Color (model rgb, oklch or oklab) or None when the text is not a
             literal this bridge understands.
    """
    text = text.strip()
    if not text:
        return None
    call = function_call(text)
    if call is not None and call[0] in ("oklch", "oklab"):
        return _parse_perceptual(call[0], call[1])
    color = _parse_webcolor(text)
    if color is None:
        color = _parse_css3(text)
    if color is None and logger.isEnabledFor(logging.DEBUG):
        logger.debug("[bridge] rejected color literal %r", text)
    return color


# =============================================================================
# 4) CONVERSION & GAMUT
# =============================================================================

def convert(color: Color, target: str, models: ColorModelTable = DEFAULT_MODELS) -> Color:
    """Does: Convert `color` into the `target` model through the table."""
    return models.convert(color, target)


def gamut_clamp(color: Color, models: ColorModelTable = DEFAULT_MODELS) -> Color:
    """Does: Convert to sRGB and force every component (alpha included) into [0, 1]."""
    rgb = models.convert(color, STORAGE_MODEL)
    alpha = None if rgb.alpha is None else min(1.0, max(0.0, rgb.alpha))
    return Color(STORAGE_MODEL, clamp_unit(rgb.coords), alpha)


def to_rgba(color: Color, models: ColorModelTable = DEFAULT_MODELS) -> RGBA:
    """Does: Gamut-clamp and pack into the storage RGBA (alpha defaults to 1)."""
    clamped = gamut_clamp(color, models)
    r, g, b = clamped.coords
    return RGBA(r, g, b, 1.0 if clamped.alpha is None else clamped.alpha)


def rgba_or_none(color: Color, models: ColorModelTable = DEFAULT_MODELS) -> RGBA | None:
    """
    Does: to_rgba() for values taken from stylesheet text; a conversion that
          leaves float range is a rejection like any other.
    Returns: RGBA or None.
    """
    try:
        return to_rgba(color, models)
    except (OverflowError, ValueError) as e:
        logger.debug("[bridge] cannot convert %s%r: %s", color.model, color.coords, e)
        return None


def from_rgba(value: RGBA, model: str = PERCEPTUAL_MODEL, models: ColorModelTable = DEFAULT_MODELS) -> Color:
    """Does: Lift a stored RGBA back into `model` (OKLCH by default)."""
    return models.convert(Color(STORAGE_MODEL, (value.r, value.g, value.b), value.a), model)
