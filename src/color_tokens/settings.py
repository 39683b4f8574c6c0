"""Global configuration and constants for the color token engine."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

# WCAG 2.1 contrast thresholds
AA_NORMAL: Final = 4.5
AA_LARGE: Final = 3.0
AAA_NORMAL: Final = 7.0
AAA_LARGE: Final = 4.5

# Relative luminance below which a color is too dark for full-surface fills.
# Sits between #151515 (~0.0075) and #161616 (~0.0080).
DARK_AREA_LUMINANCE_THRESHOLD: Final = 0.008

# The one shade tier allowed to be very dark.
DARK_AREA_EXEMPT_SHADE: Final = 950

DEFAULT_PALETTE_FILE: Final = Path(__file__).parent / "default_palette.json"
PALETTE_FILE: Final = Path(os.environ.get("COLOR_TOKENS_PALETTE_FILE", DEFAULT_PALETTE_FILE))
