"""Tone classification for large-surface suitability.

Very dark fills (pure black and near-black grays) across large areas are
harsh and straining, so the palette validator flags them. Mid tones are never
flagged; the cut-off is ``settings.DARK_AREA_LUMINANCE_THRESHOLD``.
"""

from __future__ import annotations

from .codec import ColorLike, as_color
from .luminance import relative_luminance
from .settings import DARK_AREA_LUMINANCE_THRESHOLD

__all__ = ["is_pure_black", "is_too_dark_for_large_areas"]


def is_pure_black(color: ColorLike) -> bool:
    return as_color(color).rgb == (0, 0, 0)


def is_too_dark_for_large_areas(
    color: ColorLike, threshold: float = DARK_AREA_LUMINANCE_THRESHOLD
) -> bool:
    c = as_color(color)
    if c.rgb == (0, 0, 0):
        return True
    return relative_luminance(c) < threshold
