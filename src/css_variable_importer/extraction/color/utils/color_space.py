"""
color_space.py
==============

Does: Convert between gamma-encoded sRGB, OKLab and OKLCH (float channels),
      and clamp sRGB results into the displayable [0, 1] range.
Used By: Color Literal Bridge (model table), relative color evaluation.
Returns: Channel triples as tuple[float, float, float].
"""

from __future__ import annotations

import math
from typing import Tuple

__all__ = [
    "Triple",
    "srgb_to_oklab",
    "oklab_to_srgb",
    "oklab_to_oklch",
    "oklch_to_oklab",
    "srgb_to_oklch",
    "oklch_to_srgb",
    "clamp_unit",
]
__docformat__ = "google"

# ── Types ─────────────────────────────────────────────────────────────────────
Triple = Tuple[float, float, float]

# Below this chroma the hue is meaningless and reported as 0
_ACHROMATIC_EPSILON = 1e-7


# =============================================================================
# 1) TRANSFER FUNCTIONS
# =============================================================================

def _srgb_to_linear(v: float) -> float:
    sign = -1.0 if v < 0 else 1.0
    v = abs(v)
    return sign * (v / 12.92 if v <= 0.04045 else ((v + 0.055) / 1.055) ** 2.4)


def _linear_to_srgb(v: float) -> float:
    sign = -1.0 if v < 0 else 1.0
    v = abs(v)
    return sign * (12.92 * v if v <= 0.0031308 else 1.055 * v ** (1 / 2.4) - 0.055)


def _cbrt(v: float) -> float:
    return math.copysign(abs(v) ** (1 / 3), v)


# =============================================================================
# 2) sRGB <-> OKLab (Ottosson matrices)
# =============================================================================

def srgb_to_oklab(rgb: Triple) -> Triple:
    """Does: Convert gamma-encoded sRGB (0–1) to OKLab."""
    r, g, b = (_srgb_to_linear(c) for c in rgb)
    l = _cbrt(0.4122214708 * r + 0.5363325363 * g + 0.0514459929 * b)
    m = _cbrt(0.2119034982 * r + 0.6806995451 * g + 0.1073969566 * b)
    s = _cbrt(0.0883024619 * r + 0.2817188376 * g + 0.6299787005 * b)
    return (
        0.2104542553 * l + 0.7936177850 * m - 0.0040720468 * s,
        1.9779984951 * l - 2.4285922050 * m + 0.4505937099 * s,
        0.0259040371 * l + 0.7827717662 * m - 0.8086757660 * s,
    )


def oklab_to_srgb(lab: Triple) -> Triple:
    """Does: Convert OKLab to gamma-encoded sRGB (may leave the [0, 1] gamut)."""
    L, a, b = lab
    l = (L + 0.3963377774 * a + 0.2158037573 * b) ** 3
    m = (L - 0.1055613458 * a - 0.0638541728 * b) ** 3
    s = (L - 0.0894841775 * a - 1.2914855480 * b) ** 3
    r = 4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s
    g = -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s
    bb = -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s
    return _linear_to_srgb(r), _linear_to_srgb(g), _linear_to_srgb(bb)


# =============================================================================
# 3) OKLab <-> OKLCH (polar form)
# =============================================================================

def oklab_to_oklch(lab: Triple) -> Triple:
    """Does: Convert OKLab to OKLCH; hue in degrees [0, 360)."""
    L, a, b = lab
    C = math.hypot(a, b)
    if C < _ACHROMATIC_EPSILON:
        return L, 0.0, 0.0
    H = math.degrees(math.atan2(b, a)) % 360.0
    return L, C, H


def oklch_to_oklab(lch: Triple) -> Triple:
    """Does: Convert OKLCH (hue in degrees) to OKLab."""
    L, C, H = lch
    rad = math.radians(H)
    return L, C * math.cos(rad), C * math.sin(rad)


def srgb_to_oklch(rgb: Triple) -> Triple:
    return oklab_to_oklch(srgb_to_oklab(rgb))


def oklch_to_srgb(lch: Triple) -> Triple:
    return oklab_to_srgb(oklch_to_oklab(lch))


# =============================================================================
# 4) GAMUT
# =============================================================================

def clamp_unit(values: Triple) -> Triple:
    """Does: Force each channel into [0, 1]."""
    c1, c2, c3 = (min(1.0, max(0.0, v)) for v in values)
    return c1, c2, c3
