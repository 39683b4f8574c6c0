"""Contrast utilities for validating color accessibility.

Implements WCAG 2.1 contrast ratio calculations.

Public API:
- contrast_ratio(a, b) -> float
- meets_aa(a, b, is_large_text=False) -> bool
- meets_aaa(a, b, is_large_text=False) -> bool
- check_contrast(foreground, background) -> ContrastResult

Arguments accept either ``Color`` values or ``#RRGGBB`` strings. The ratio is
symmetric: the evaluator orders the two luminances itself, so argument order
never matters.
"""

from __future__ import annotations

from dataclasses import dataclass

from .codec import ColorLike
from .luminance import relative_luminance
from .settings import AA_LARGE, AA_NORMAL, AAA_LARGE, AAA_NORMAL

__all__ = [
    "ContrastResult",
    "contrast_ratio",
    "meets_aa",
    "meets_aaa",
    "check_contrast",
]


@dataclass(frozen=True)
class ContrastResult:
    ratio: float
    meets_aa: bool
    meets_aa_large: bool

    @property
    def meets_aaa(self) -> bool:
        return self.ratio >= AAA_NORMAL

    @property
    def meets_aaa_large(self) -> bool:
        return self.ratio >= AAA_LARGE


def contrast_ratio(a: ColorLike, b: ColorLike) -> float:
    l1 = relative_luminance(a)
    l2 = relative_luminance(b)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def meets_aa(a: ColorLike, b: ColorLike, is_large_text: bool = False) -> bool:
    threshold = AA_LARGE if is_large_text else AA_NORMAL
    return contrast_ratio(a, b) >= threshold


def meets_aaa(a: ColorLike, b: ColorLike, is_large_text: bool = False) -> bool:
    threshold = AAA_LARGE if is_large_text else AAA_NORMAL
    return contrast_ratio(a, b) >= threshold


def check_contrast(foreground: ColorLike, background: ColorLike) -> ContrastResult:
    """Compute the ratio once and evaluate both AA thresholds against it."""
    ratio = contrast_ratio(foreground, background)
    return ContrastResult(
        ratio=ratio,
        meets_aa=ratio >= AA_NORMAL,
        meets_aa_large=ratio >= AA_LARGE,
    )
