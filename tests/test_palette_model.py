import dataclasses

import pytest

from color_tokens import (
    SHADE_KEYS,
    Color,
    ColorScale,
    InvalidFormat,
    Palette,
    SemanticPalette,
    StructuralPaletteError,
    default_palette,
)


def _scale(hex_value: str = "#777777") -> dict:
    return {k: hex_value for k in SHADE_KEYS}


def _palette_data() -> dict:
    return {
        "primary": _scale("#3B82F6"),
        "secondary": _scale("#A855F7"),
        "neutral": _scale("#78716C"),
        "semantic": {role: _scale() for role in ("success", "warning", "error", "info")},
    }


def test_scale_from_int_and_string_keys():
    a = ColorScale.from_mapping(_scale())
    b = ColorScale.from_mapping({str(k): "#777777" for k in SHADE_KEYS})
    assert a == b
    assert list(a) == list(SHADE_KEYS)
    assert a[500] == a["500"] == Color(119, 119, 119)
    assert 950 in a and "50" in a and 975 not in a and "abc" not in a


def test_scale_missing_key():
    data = _scale()
    del data[950]
    with pytest.raises(StructuralPaletteError, match="950"):
        ColorScale.from_mapping(data)


def test_scale_unknown_and_duplicate_keys():
    with pytest.raises(StructuralPaletteError):
        ColorScale.from_mapping({**_scale(), 975: "#000000"})
    with pytest.raises(StructuralPaletteError):
        ColorScale.from_mapping({**_scale(), "500": "#000000"})


def test_scale_malformed_hex():
    data = _scale()
    data[300] = "#12345"
    with pytest.raises(InvalidFormat):
        ColorScale.from_mapping(data)


def test_palette_missing_role_and_scale():
    data = _palette_data()
    del data["semantic"]["info"]
    with pytest.raises(StructuralPaletteError, match="info"):
        Palette.from_mapping(data)
    data = _palette_data()
    del data["neutral"]
    with pytest.raises(StructuralPaletteError, match="neutral"):
        Palette.from_mapping(data)
    data = _palette_data()
    del data["semantic"]
    with pytest.raises(StructuralPaletteError, match="semantic"):
        Palette.from_mapping(data)


def test_palette_unknown_entries():
    data = _palette_data()
    data["accent"] = _scale()
    with pytest.raises(StructuralPaletteError):
        Palette.from_mapping(data)
    data = _palette_data()
    data["semantic"]["danger"] = _scale()
    with pytest.raises(StructuralPaletteError):
        Palette.from_mapping(data)


def test_color_lookup_paths():
    palette = default_palette()
    assert palette.color("primary", 500).hex == "#3B82F6"
    assert palette.color("semantic.error.600").hex == "#DC2626"
    assert palette.color("semantic", "info", "950").hex == "#082F49"
    assert palette.primary_color() == palette.primary[500]
    assert palette.secondary_color(900).hex == "#581C87"
    assert palette.neutral_color(50).hex == "#FAFAF9"
    assert palette.semantic_color("warning", 600).hex == "#D97706"
    assert palette.scale("semantic.success") is palette.semantic.success


@pytest.mark.parametrize("path", [("primary",), ("primary", 975), ("accent", 500), ("semantic.danger.500",)])
def test_color_lookup_missing(path):
    with pytest.raises(KeyError):
        default_palette().color(*path)


def test_with_shade_copies():
    palette = default_palette()
    changed = palette.with_shade("primary.500", "#000000")
    assert changed.primary[500] == Color(0, 0, 0)
    assert palette.primary[500].hex == "#3B82F6"
    assert changed.secondary is palette.secondary
    semantic = palette.with_shade("semantic", "info", 500, Color(1, 2, 3))
    assert semantic.semantic.info[500] == Color(1, 2, 3)
    assert palette.semantic.info[500].hex == "#0EA5E9"
    with pytest.raises(KeyError):
        palette.with_shade("primary.975", "#000000")


def test_with_scale_and_semantic():
    palette = default_palette()
    gray = palette.with_scale("primary", _scale())
    assert all(c == Color(119, 119, 119) for c in gray.primary.values())
    info = palette.with_scale("semantic.info", _scale("#0000FF"))
    assert info.semantic.info[50].hex == "#0000FF"
    replaced = palette.with_semantic(_palette_data()["semantic"])
    assert replaced.semantic.error[600].hex == "#777777"
    with pytest.raises(KeyError):
        palette.with_scale("accent", _scale())


def test_palette_immutable():
    palette = default_palette()
    with pytest.raises(dataclasses.FrozenInstanceError):
        palette.primary = palette.secondary  # type: ignore[misc]


def test_to_mapping_roundtrip():
    palette = default_palette()
    data = palette.to_mapping()
    assert data["primary"]["500"] == "#3B82F6"
    assert data["semantic"]["success"]["950"] == "#052E16"
    assert Palette.from_mapping(data) == palette


@pytest.mark.parametrize("key", ["²", "٥٠٠", "5OO", " 500", -500])
def test_non_ascii_or_malformed_shade_keys_rejected(key):
    scale = default_palette().primary
    assert key not in scale
    with pytest.raises(KeyError):
        scale[key]
    with pytest.raises(StructuralPaletteError):
        ColorScale.from_mapping({**{k: "#777777" for k in SHADE_KEYS if k != 500}, key: "#777777"})


def test_scale_constructor_requires_colors():
    with pytest.raises(StructuralPaletteError):
        ColorScale(("#000000",) * len(SHADE_KEYS))
    with pytest.raises(StructuralPaletteError):
        ColorScale([Color(0, 0, 0)] * len(SHADE_KEYS))
    with pytest.raises(StructuralPaletteError):
        ColorScale((Color(0, 0, 0),) * 3)
    scale = ColorScale((Color(1, 2, 3),) * len(SHADE_KEYS))
    assert scale[950] == Color(1, 2, 3)


def test_palette_constructors_require_scales():
    palette = default_palette()
    with pytest.raises(StructuralPaletteError):
        SemanticPalette(
            success=palette.semantic.success,
            warning={50: "#zz"},
            error=palette.semantic.error,
            info=palette.semantic.info,
        )
    with pytest.raises(StructuralPaletteError):
        Palette(
            primary={50: "#zz"},
            secondary=palette.secondary,
            neutral=palette.neutral,
            semantic=palette.semantic,
        )
    with pytest.raises(StructuralPaletteError):
        Palette(
            primary=palette.primary,
            secondary=palette.secondary,
            neutral=palette.neutral,
            semantic=palette.semantic.to_mapping(),
        )
    rebuilt = Palette(
        primary=palette.primary,
        secondary=palette.secondary,
        neutral=palette.neutral,
        semantic=palette.semantic,
    )
    assert rebuilt == palette
