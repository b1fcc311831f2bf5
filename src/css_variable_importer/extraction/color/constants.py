# constants.py
# ============

"""
constants.
=========

Does: Define immutable color-domain constants for declaration classification
      (relative-color scales, model names, unit scaling, fallbacks).
Used By: Color bridge, relative color evaluator, value classifier, mode extractor.
Returns: Pure data structures only (no side effects).
"""

from css_variable_importer.extraction.types import RGBA

# ── 1) Perceptual model scales ───────────────────────────────────────────────

# Chroma percentages and chroma references are fractions of this maximum
CHROMA_REFERENCE_MAX = 0.4

# Storage model and the perceptual models relative-color math runs in
STORAGE_MODEL = "rgb"
PERCEPTUAL_MODEL = "oklch"


# ── 2) Numeric literal units ─────────────────────────────────────────────────

DEFAULT_REM_BASE = 16.0
PERCENT_DIVISOR = 100.0


# ── 3) Fallbacks ─────────────────────────────────────────────────────────────

# Base value of a variable that only exists inside mode blocks
ZERO_COLOR = RGBA(0.0, 0.0, 0.0, 1.0)
ZERO_NUMBER = 0.0

# Dual-mode constructor names its modes in this order
DUAL_MODE_NAMES = ("light", "dark")
