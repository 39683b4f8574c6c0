"""Palette loading.

Responsibilities:
- Load a palette from JSON into a typed, validated ``Palette``.
- Provide the bundled default palette, parsed once and shared read-only.

Usage:
    from color_tokens import default_palette
    palette = default_palette()
    palette.primary_color(600)

The default file location comes from ``settings.PALETTE_FILE`` (override with
the ``COLOR_TOKENS_PALETTE_FILE`` environment variable).
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

from .palette import Palette
from .settings import PALETTE_FILE

__all__ = ["load_palette", "default_palette"]

_logger = logging.getLogger(__name__)


def load_palette(path: str | Path | None = None) -> Palette:
    """Load a palette from JSON.

    Parameters
    ----------
    path: optional explicit path override.
    """
    palette_path = Path(path) if path else PALETTE_FILE
    if not palette_path.exists():
        raise FileNotFoundError(f"Palette file not found: {palette_path}")
    with palette_path.open("r", encoding="utf-8") as f:
        data: Dict[str, Any] = json.load(f)
    palette = Palette.from_mapping(data)
    _logger.debug("Loaded palette from %s", palette_path)
    return palette


@lru_cache(maxsize=1)
def default_palette() -> Palette:
    return load_palette()
