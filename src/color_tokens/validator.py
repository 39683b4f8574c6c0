"""Palette validation.

Sweeps every shade of a palette and reports colors that are unsuitable for
large surface areas:

 - pure black (``#000000``) anywhere, including shade 950;
 - colors whose relative luminance is below the dark-area threshold, except
   at ``DARK_AREA_EXEMPT_SHADE`` (950), the one sanctioned very dark tier.

A pure-black shade is reported once, as pure black, even though it is also
below the threshold.

Traversal order is fixed: primary, secondary, neutral, then semantic success,
warning, error, info; shades lightest first. Issues are advisory findings
returned in that order. A structurally valid palette never makes
``validate_palette`` raise.

Contrast is not swept here. ``validate_contrast`` audits caller-chosen
foreground/background pairs separately.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple, Union

from .codec import Color, ColorLike, as_color
from .contrast import contrast_ratio
from .errors import ColorTokenError
from .palette import ColorScale, Palette
from .settings import AA_NORMAL, DARK_AREA_EXEMPT_SHADE, DARK_AREA_LUMINANCE_THRESHOLD
from .tone import is_pure_black, is_too_dark_for_large_areas

__all__ = [
    "ValidationIssue",
    "ValidationReport",
    "validate_palette",
    "validate_contrast",
]

_logger = logging.getLogger(__name__)

Locator = Tuple[Union[str, int], ...]


@dataclass(frozen=True)
class ValidationIssue:
    locator: Locator  # e.g. ("primary", 500) or ("semantic", "success", 900)
    kind: str  # "pure-black" | "too-dark"
    message: str

    @property
    def path(self) -> str:
        return ".".join(str(p) for p in self.locator)


@dataclass(frozen=True)
class ValidationReport:
    issues: Tuple[ValidationIssue, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.issues

    def summary(self) -> str:
        if self.is_valid:
            return "Palette OK (no issues)"
        return f"Palette issues ({len(self.issues)}): " + ", ".join(
            f"{i.path}:{i.kind}" for i in self.issues
        )


def _check_shade(locator: Locator, shade: int, color: Color, threshold: float) -> Iterator[ValidationIssue]:
    path = ".".join(str(p) for p in locator)
    if is_pure_black(color):
        yield ValidationIssue(locator, "pure-black", f"Pure black detected in {path}")
    elif shade != DARK_AREA_EXEMPT_SHADE and is_too_dark_for_large_areas(color, threshold):
        yield ValidationIssue(
            locator,
            "too-dark",
            f"Very dark color in {path} may not be suitable for large areas",
        )


def _check_scale(prefix: Locator, scale: ColorScale, threshold: float) -> Iterator[ValidationIssue]:
    for shade, color in scale.items():
        yield from _check_shade(prefix + (shade,), shade, color, threshold)


def validate_palette(
    palette: Palette, *, threshold: float = DARK_AREA_LUMINANCE_THRESHOLD
) -> ValidationReport:
    issues: List[ValidationIssue] = []
    for name, scale in palette.base_scales():
        issues.extend(_check_scale((name,), scale, threshold))
    for role, scale in palette.semantic.roles():
        issues.extend(_check_scale(("semantic", role), scale, threshold))
    report = ValidationReport(tuple(issues))
    _logger.debug("Palette validation finished with %d issue(s)", len(report.issues))
    return report


def _resolve(palette: Palette, ref: ColorLike) -> Color:
    if isinstance(ref, Color) or (isinstance(ref, str) and ref.startswith("#")):
        return as_color(ref)
    return palette.color(ref)


def validate_contrast(
    palette: Palette, pairs: Iterable[Tuple[ColorLike, ColorLike, str]], threshold: float = AA_NORMAL
) -> List[str]:
    """Validate a collection of foreground/background pairs against a palette.

    Parameters
    ----------
    palette : Palette
        Palette the token paths resolve against.
    pairs : Iterable[Tuple[ColorLike,ColorLike,str]]
        Each tuple is (foreground, background, label). Foreground and
        background are dotted token paths (``"semantic.error.600"``),
        literal ``#RRGGBB`` strings or ``Color`` values.
    threshold : float
        Minimum acceptable contrast ratio.

    Returns
    -------
    list[str]
        A list of failure messages (empty if all pass).
    """
    failures: List[str] = []
    for fg_ref, bg_ref, label in pairs:
        try:
            fg = _resolve(palette, fg_ref)
            bg = _resolve(palette, bg_ref)
        except (KeyError, ColorTokenError) as exc:
            failures.append(f"[resolve-error] {label}: {exc}")
            continue
        ratio = contrast_ratio(fg, bg)
        if ratio < threshold:
            failures.append(
                f"[contrast-fail] {label}: ratio={ratio:.2f} < {threshold} (fg={fg} bg={bg})"
            )
    return failures
