"""WCAG 2.1 relative luminance.

    L = 0.2126 * R + 0.7152 * G + 0.0722 * B

where each channel is normalized to [0,1] and linearized with the WCAG
piecewise transfer function (threshold 0.03928). Channels are 8-bit so the
256 linearized values are computed once up front; results are identical to
evaluating the formula per call.
"""

from __future__ import annotations

from typing import Tuple

from .codec import ColorLike, as_color

__all__ = ["relative_luminance", "linearize_channel"]


def linearize_channel(value: int) -> float:
    """Linearize one 8-bit sRGB channel value."""
    c = value / 255.0
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


_LINEAR: Tuple[float, ...] = tuple(linearize_channel(v) for v in range(256))


def relative_luminance(color: ColorLike) -> float:
    c = as_color(color)
    # Rec. 709 coefficients used by WCAG
    return 0.2126 * _LINEAR[c.red] + 0.7152 * _LINEAR[c.green] + 0.0722 * _LINEAR[c.blue]
