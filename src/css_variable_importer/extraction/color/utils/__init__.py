"""
utils package.
=============

Does: Provide float color-space math (sRGB, OKLab, OKLCH) and gamut clamping
      shared by the color bridge and the relative color evaluator.
"""

from .color_space import (
    Triple,
    clamp_unit,
    oklab_to_oklch,
    oklab_to_srgb,
    oklch_to_oklab,
    oklch_to_srgb,
    srgb_to_oklab,
    srgb_to_oklch,
)

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
