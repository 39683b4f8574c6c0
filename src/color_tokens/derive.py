"""Derived color artifacts: opacity variants and two-stop linear gradients.

Both are pure data constructors. ``with_opacity`` attaches an alpha value to
an unchanged RGB color; ``create_gradient`` builds a descriptor that a
presentation layer can render (``css()`` gives the CSS form) without this
package rendering anything itself.

Invalid inputs are rejected, never clamped or defaulted:
 - alpha outside [0,1] (or NaN / bool) -> InvalidAlpha
 - a direction that is neither a finite angle nor a known keyword -> InvalidDirection
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Dict, Tuple, Union

from .codec import Color, ColorLike, as_color, format_hex
from .errors import InvalidAlpha, InvalidDirection
from .palette import Palette

__all__ = [
    "RGBAColor",
    "GradientStop",
    "LinearGradient",
    "GRADIENT_KEYWORDS",
    "VARIANT_OPACITIES",
    "with_opacity",
    "create_gradient",
    "generate_color_variants",
    "primary_gradient",
    "secondary_gradient",
    "surface_gradient",
]

Direction = Union[int, float, str]

GRADIENT_KEYWORDS = frozenset(
    {
        "to top",
        "to right",
        "to bottom",
        "to left",
        "to top left",
        "to top right",
        "to bottom left",
        "to bottom right",
    }
)

_ANGLE_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)deg", re.ASCII)

# Interaction-state opacities applied by generate_color_variants
VARIANT_OPACITIES: Dict[str, float] = {
    "default": 1.0,
    "hover": 0.8,
    "active": 0.9,
    "disabled": 0.5,
    "subtle": 0.1,
    "muted": 0.6,
}


@dataclass(frozen=True)
class RGBAColor:
    color: Color
    alpha: float

    def as_tuple(self) -> Tuple[int, int, int, float]:
        return self.color.red, self.color.green, self.color.blue, self.alpha

    def css(self) -> str:
        c = self.color
        return f"rgba({c.red}, {c.green}, {c.blue}, {self.alpha:g})"

    def composite_over(self, background: ColorLike) -> Color:
        """Flatten this color onto an opaque background (source-over in sRGB)."""
        bg = as_color(background)
        a = self.alpha

        def _blend(fg_c: int, bg_c: int) -> int:
            return int(round(fg_c * a + bg_c * (1 - a)))

        return Color(
            _blend(self.color.red, bg.red),
            _blend(self.color.green, bg.green),
            _blend(self.color.blue, bg.blue),
        )


@dataclass(frozen=True)
class GradientStop:
    position: float  # 0.0 .. 1.0
    color: Color


@dataclass(frozen=True)
class LinearGradient:
    direction: str  # normalized angle ("135deg") or keyword ("to right")
    stops: Tuple[GradientStop, GradientStop]

    @property
    def start(self) -> Color:
        return self.stops[0].color

    @property
    def end(self) -> Color:
        return self.stops[1].color

    def css(self) -> str:
        parts = [self.direction]
        for stop in self.stops:
            parts.append(f"{format_hex(stop.color)} {stop.position * 100:g}%")
        return f"linear-gradient({', '.join(parts)})"


def with_opacity(color: ColorLike, alpha: float) -> RGBAColor:
    if isinstance(alpha, bool) or not isinstance(alpha, (int, float)):
        raise InvalidAlpha(f"alpha must be a number, got {type(alpha).__name__}")
    # NaN fails the range comparison as well
    if not 0 <= alpha <= 1:
        raise InvalidAlpha(f"alpha must be between 0 and 1: {alpha}")
    return RGBAColor(as_color(color), float(alpha))


def _finite_angle(value: Union[int, float, str], direction: Direction) -> float:
    try:
        angle = float(value)
    except OverflowError:
        raise InvalidDirection(f"Gradient angle must be finite: {direction!r}") from None
    if not math.isfinite(angle):
        raise InvalidDirection(f"Gradient angle must be finite: {direction!r}")
    return angle


def _normalize_direction(direction: Direction) -> str:
    if isinstance(direction, bool):
        raise InvalidDirection(f"Unsupported gradient direction: {direction!r}")
    if isinstance(direction, (int, float)):
        return f"{_finite_angle(direction, direction):g}deg"
    if isinstance(direction, str):
        token = " ".join(direction.split()).lower()
        if token in GRADIENT_KEYWORDS:
            return token
        if _ANGLE_RE.fullmatch(token):
            return f"{_finite_angle(token[:-3], direction):g}deg"
    raise InvalidDirection(f"Unsupported gradient direction: {direction!r}")


def create_gradient(start: ColorLike, end: ColorLike, direction: Direction = "135deg") -> LinearGradient:
    """Build a two-stop linear gradient descriptor.

    ``direction`` is a finite number of degrees, an angle string such as
    ``"135deg"``, or one of ``GRADIENT_KEYWORDS``.
    """
    return LinearGradient(
        direction=_normalize_direction(direction),
        stops=(GradientStop(0.0, as_color(start)), GradientStop(1.0, as_color(end))),
    )


def generate_color_variants(color: ColorLike) -> Dict[str, RGBAColor]:
    base = as_color(color)
    return {name: with_opacity(base, alpha) for name, alpha in VARIANT_OPACITIES.items()}


# Palette gradients ------------------------------------------------------
def primary_gradient(palette: Palette, direction: Direction = "135deg") -> LinearGradient:
    return create_gradient(palette.primary[500], palette.primary[600], direction)


def secondary_gradient(palette: Palette, direction: Direction = "135deg") -> LinearGradient:
    return create_gradient(palette.secondary[500], palette.secondary[600], direction)


def surface_gradient(palette: Palette, direction: Direction = "135deg") -> LinearGradient:
    return create_gradient(palette.neutral[50], palette.neutral[100], direction)
