"""Hex color codec.

Parses ``#RRGGBB`` strings into immutable ``Color`` values and formats them
back. Input is case-insensitive; output is always upper-case so that
``format_hex(parse_hex(s)) == s.upper()`` for every valid ``s``.

Only the six digit form is accepted. Short (``#RGB``), alpha (``#RRGGBBAA``)
and unprefixed forms are rejected rather than expanded or truncated.

Public API:
    parse_hex(value: str) -> Color
    format_hex(color: Color) -> str
    as_color(value: Color | str) -> Color
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple, Union

from .errors import InvalidFormat

__all__ = ["Color", "ColorLike", "parse_hex", "format_hex", "as_color"]

_HEX_RE = re.compile(r"#[0-9a-fA-F]{6}")
_HEX_ERR = "Color must be a #RRGGBB hex string: {value!r}"


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            # bool is an int subclass; True/False are never channel values
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidFormat(f"{name} channel must be an int, got {type(value).__name__}")
            if not 0 <= value <= 255:
                raise InvalidFormat(f"{name} channel out of range [0,255]: {value}")

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        return parse_hex(value)

    @property
    def hex(self) -> str:
        return format_hex(self)

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self.red, self.green, self.blue

    def __str__(self) -> str:
        return format_hex(self)


ColorLike = Union[Color, str]


def parse_hex(value: str) -> Color:
    """Parse ``#RRGGBB`` (any case) into a Color.

    Raises InvalidFormat for any other length or character set.
    """
    if not isinstance(value, str) or _HEX_RE.fullmatch(value) is None:
        raise InvalidFormat(_HEX_ERR.format(value=value))
    return Color(int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16))


def format_hex(color: Color) -> str:
    return f"#{color.red:02X}{color.green:02X}{color.blue:02X}"


def as_color(value: ColorLike) -> Color:
    """Return ``value`` as a Color, parsing it when given a hex string."""
    if isinstance(value, Color):
        return value
    return parse_hex(value)
