"""Adaptive text color selection.

``accessible_text_color`` picks a readable foreground for a background from
the palette's own neutrals: neutral 50 or neutral 900, whichever yields the
higher contrast ratio. Ties go to the light color. The result is a
best-effort choice; callers needing a guarantee should check it with
``meets_aa``.
"""

from __future__ import annotations

from .codec import Color, ColorLike
from .contrast import contrast_ratio
from .palette import Palette

__all__ = ["accessible_text_color"]


def accessible_text_color(palette: Palette, background: ColorLike) -> Color:
    light = palette.neutral[50]
    dark = palette.neutral[900]
    if contrast_ratio(light, background) >= contrast_ratio(dark, background):
        return light
    return dark
