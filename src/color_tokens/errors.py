"""Error taxonomy for the color token engine.

Every failure raised by the package derives from ``ColorTokenError`` (itself a
``ValueError`` so callers that already guard hex parsing with ``ValueError``
keep working).
"""

from __future__ import annotations

__all__ = [
    "ColorTokenError",
    "InvalidFormat",
    "InvalidAlpha",
    "InvalidDirection",
    "StructuralPaletteError",
]


class ColorTokenError(ValueError):
    """Base class for all color token errors."""


class InvalidFormat(ColorTokenError):
    """Raised when a hex string or channel value is malformed."""


class InvalidAlpha(ColorTokenError):
    """Raised when an opacity value falls outside [0, 1]."""


class InvalidDirection(ColorTokenError):
    """Raised when a gradient direction is not a finite angle or known keyword."""


class StructuralPaletteError(ColorTokenError):
    """Raised when a palette is missing (or has unknown) scales, roles or shade keys."""
