"""Palette data model: color scales, semantic roles and the full palette.

A ``ColorScale`` maps the eleven fixed shade keys (50 ... 950) to colors, a
``SemanticPalette`` maps the four semantic roles to scales, and a ``Palette``
bundles the primary/secondary/neutral scales with the semantic map.

Every structural rule is enforced at construction time. A missing or unknown
shade key, scale or role raises ``StructuralPaletteError`` and malformed hex
raises ``InvalidFormat``, so any ``Palette`` instance that exists is
structurally valid and can be validated or queried without further checks.

All types are frozen. Derived palettes are built with the ``with_*`` helpers,
which copy and override instead of mutating.

Usage:
    palette = Palette.from_mapping(data)
    palette.color("semantic.error.600")
    darker = palette.with_shade("primary.500", "#1D4ED8")
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterator, Tuple, Union

from .codec import Color, ColorLike, as_color, format_hex
from .errors import StructuralPaletteError

__all__ = [
    "SHADE_KEYS",
    "SEMANTIC_ROLES",
    "BASE_SCALES",
    "ColorScale",
    "SemanticPalette",
    "Palette",
]

SHADE_KEYS: Tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)
SEMANTIC_ROLES: Tuple[str, ...] = ("success", "warning", "error", "info")
BASE_SCALES: Tuple[str, ...] = ("primary", "secondary", "neutral")

PathPart = Union[str, int]


def _shade_key(key: Any) -> int:
    """Coerce a shade key (int or its decimal string form) to int."""
    if isinstance(key, bool):
        raise StructuralPaletteError(f"Invalid shade key: {key!r}")
    if isinstance(key, int):
        shade = key
    elif isinstance(key, str) and key.isascii() and key.isdigit():
        shade = int(key)
    else:
        raise StructuralPaletteError(f"Invalid shade key: {key!r}")
    if shade not in SHADE_KEYS:
        raise StructuralPaletteError(f"Unknown shade key: {key!r}")
    return shade


def _split_path(path: Tuple[PathPart, ...]) -> Tuple[PathPart, ...]:
    if len(path) == 1 and isinstance(path[0], str) and "." in path[0]:
        return tuple(path[0].split("."))
    return path


@dataclass(frozen=True)
class ColorScale(Mapping):
    """Shade key -> Color for all eleven shade keys, iterated lightest first."""

    colors: Tuple[Color, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.colors, tuple):
            raise StructuralPaletteError(f"ColorScale colors must be a tuple, got {type(self.colors).__name__}")
        if len(self.colors) != len(SHADE_KEYS):
            raise StructuralPaletteError(
                f"ColorScale needs {len(SHADE_KEYS)} colors, got {len(self.colors)}"
            )
        for shade, color in zip(SHADE_KEYS, self.colors):
            if not isinstance(color, Color):
                raise StructuralPaletteError(
                    f"Shade {shade} must be a Color, got {type(color).__name__} (use ColorScale.from_mapping)"
                )

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, ColorLike]) -> "ColorScale":
        if not isinstance(mapping, Mapping):
            raise StructuralPaletteError(f"ColorScale must be a mapping, got {type(mapping).__name__}")
        by_shade: Dict[int, Color] = {}
        for key, value in mapping.items():
            shade = _shade_key(key)
            if shade in by_shade:
                raise StructuralPaletteError(f"Duplicate shade key: {key!r}")
            by_shade[shade] = as_color(value)
        missing = [k for k in SHADE_KEYS if k not in by_shade]
        if missing:
            raise StructuralPaletteError(f"Missing shade keys: {', '.join(map(str, missing))}")
        return cls(tuple(by_shade[k] for k in SHADE_KEYS))

    def __getitem__(self, shade: Any) -> Color:
        try:
            return self.colors[SHADE_KEYS.index(_shade_key(shade))]
        except StructuralPaletteError as exc:
            raise KeyError(shade) from exc

    def __iter__(self) -> Iterator[int]:
        return iter(SHADE_KEYS)

    def __len__(self) -> int:
        return len(SHADE_KEYS)

    def with_shade(self, shade: Any, color: ColorLike) -> "ColorScale":
        idx = SHADE_KEYS.index(_shade_key(shade))
        colors = list(self.colors)
        colors[idx] = as_color(color)
        return ColorScale(tuple(colors))

    def to_mapping(self) -> Dict[str, str]:
        return {str(k): format_hex(c) for k, c in zip(SHADE_KEYS, self.colors)}


def _require_scale(name: str, value: Any) -> None:
    if not isinstance(value, ColorScale):
        raise StructuralPaletteError(
            f"{name} must be a ColorScale, got {type(value).__name__} (use Palette.from_mapping)"
        )


@dataclass(frozen=True)
class SemanticPalette:
    success: ColorScale
    warning: ColorScale
    error: ColorScale
    info: ColorScale

    def __post_init__(self) -> None:
        for role in SEMANTIC_ROLES:
            _require_scale(f"semantic.{role}", getattr(self, role))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "SemanticPalette":
        if not isinstance(mapping, Mapping):
            raise StructuralPaletteError("semantic must be a mapping of roles to scales")
        unknown = sorted(set(mapping) - set(SEMANTIC_ROLES))
        if unknown:
            raise StructuralPaletteError(f"Unknown semantic roles: {', '.join(unknown)}")
        scales = {}
        for role in SEMANTIC_ROLES:
            if role not in mapping:
                raise StructuralPaletteError(f"Missing semantic role: {role}")
            scales[role] = ColorScale.from_mapping(mapping[role])
        return cls(**scales)

    def role(self, name: str) -> ColorScale:
        if name not in SEMANTIC_ROLES:
            raise KeyError(f"Unknown semantic role: {name}")
        return getattr(self, name)

    def roles(self) -> Iterator[Tuple[str, ColorScale]]:
        for name in SEMANTIC_ROLES:
            yield name, getattr(self, name)

    def to_mapping(self) -> Dict[str, Dict[str, str]]:
        return {name: scale.to_mapping() for name, scale in self.roles()}


@dataclass(frozen=True)
class Palette:
    primary: ColorScale
    secondary: ColorScale
    neutral: ColorScale
    semantic: SemanticPalette

    def __post_init__(self) -> None:
        for name in BASE_SCALES:
            _require_scale(name, getattr(self, name))
        if not isinstance(self.semantic, SemanticPalette):
            raise StructuralPaletteError(
                f"semantic must be a SemanticPalette, got {type(self.semantic).__name__}"
            )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "Palette":
        if not isinstance(mapping, Mapping):
            raise StructuralPaletteError("Palette must be a mapping")
        unknown = sorted(set(mapping) - set(BASE_SCALES) - {"semantic"})
        if unknown:
            raise StructuralPaletteError(f"Unknown palette scales: {', '.join(unknown)}")
        scales = {}
        for name in BASE_SCALES:
            if name not in mapping:
                raise StructuralPaletteError(f"Missing palette scale: {name}")
            scales[name] = ColorScale.from_mapping(mapping[name])
        if "semantic" not in mapping:
            raise StructuralPaletteError("Missing palette scale: semantic")
        return cls(semantic=SemanticPalette.from_mapping(mapping["semantic"]), **scales)

    def to_mapping(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {name: self.scale(name).to_mapping() for name in BASE_SCALES}
        data["semantic"] = self.semantic.to_mapping()
        return data

    # --- Lookup -------------------------------------------------------------
    def scale(self, name: str) -> ColorScale:
        """Return a base scale by name, or a semantic one as ``semantic.<role>``."""
        if name in BASE_SCALES:
            return getattr(self, name)
        prefix, _, role = name.partition(".")
        if prefix == "semantic" and role:
            return self.semantic.role(role)
        raise KeyError(f"Unknown palette scale: {name}")

    def base_scales(self) -> Iterator[Tuple[str, ColorScale]]:
        for name in BASE_SCALES:
            yield name, getattr(self, name)

    def color(self, *path: PathPart) -> Color:
        """Resolve a color by path.

        Accepts ``("primary", 500)``, ``("semantic", "error", 600)`` or the
        dotted string form ``"semantic.error.600"``.
        """
        parts = _split_path(path)
        if len(parts) == 2 and parts[0] in BASE_SCALES:
            return self.scale(parts[0])[parts[1]]
        if len(parts) == 3 and parts[0] == "semantic":
            return self.semantic.role(str(parts[1]))[parts[2]]
        raise KeyError(f"Missing color token path: {'.'.join(map(str, parts))}")

    def primary_color(self, shade: PathPart = 500) -> Color:
        return self.primary[shade]

    def secondary_color(self, shade: PathPart = 500) -> Color:
        return self.secondary[shade]

    def neutral_color(self, shade: PathPart = 500) -> Color:
        return self.neutral[shade]

    def semantic_color(self, role: str, shade: PathPart = 500) -> Color:
        return self.semantic.role(role)[shade]

    # --- Derivation (copy + override) -------------------------------------
    def with_scale(self, name: str, scale: ColorScale | Mapping[Any, ColorLike]) -> "Palette":
        if not isinstance(scale, ColorScale):
            scale = ColorScale.from_mapping(scale)
        if name in BASE_SCALES:
            return replace(self, **{name: scale})
        prefix, _, role = name.partition(".")
        if prefix == "semantic" and role in SEMANTIC_ROLES:
            return replace(self, semantic=replace(self.semantic, **{role: scale}))
        raise KeyError(f"Unknown palette scale: {name}")

    def with_semantic(self, semantic: SemanticPalette | Mapping[str, Any]) -> "Palette":
        if not isinstance(semantic, SemanticPalette):
            semantic = SemanticPalette.from_mapping(semantic)
        return replace(self, semantic=semantic)

    def with_shade(self, *args: Any) -> "Palette":
        """Return a copy with one shade replaced.

        ``with_shade("primary.500", color)`` or
        ``with_shade("semantic", "info", 500, color)``.
        """
        *path, color = args
        parts = _split_path(tuple(path))
        if len(parts) == 2 and parts[0] in BASE_SCALES:
            name, shade = str(parts[0]), parts[1]
        elif len(parts) == 3 and parts[0] == "semantic":
            name, shade = f"semantic.{parts[1]}", parts[2]
        else:
            raise KeyError(f"Missing color token path: {'.'.join(map(str, parts))}")
        try:
            updated = self.scale(name).with_shade(shade, color)
        except StructuralPaletteError as exc:
            raise KeyError(f"Missing color token path: {'.'.join(map(str, parts))}") from exc
        return self.with_scale(name, updated)
