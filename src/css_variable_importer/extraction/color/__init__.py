"""
color.
=====

Does: Aggregate the color side of the import engine: the Color Literal Bridge
      (literal parsing, model table, gamut clamping) and relative color
      evaluation.
Used By: Value classifier, mode variant extractor, serializer.
Returns: Pure functions and immutable records; no side effects beyond the
         model table built once at import.
"""

# ── Constants ────────────────────────────────────────────────────────────────
from .constants import (
    CHROMA_REFERENCE_MAX,
    DEFAULT_REM_BASE,
    DUAL_MODE_NAMES,
    PERCENT_DIVISOR,
    ZERO_COLOR,
    ZERO_NUMBER,
)

# ── Bridge ───────────────────────────────────────────────────────────────────
from .bridge import (
    DEFAULT_MODELS,
    Color,
    ColorModel,
    ColorModelTable,
    convert,
    from_rgba,
    gamut_clamp,
    parse_color,
    rgba_or_none,
    to_rgba,
)

# ── Relative colors ──────────────────────────────────────────────────────────
from .relative import (
    ValueLookup,
    evaluate_hue_indirection,
    evaluate_relative_color,
    is_relative_color,
)

__all__ = [
    # constants
    "CHROMA_REFERENCE_MAX",
    "DEFAULT_REM_BASE",
    "PERCENT_DIVISOR",
    "ZERO_COLOR",
    "ZERO_NUMBER",
    "DUAL_MODE_NAMES",
    # bridge
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
    # relative
    "ValueLookup",
    "is_relative_color",
    "evaluate_relative_color",
    "evaluate_hue_indirection",
]
