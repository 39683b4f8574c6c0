import pytest

from color_tokens import Color, InvalidFormat, as_color, format_hex, parse_hex


def test_parse_hex_channels():
    assert parse_hex("#3B82F6") == Color(59, 130, 246)
    assert parse_hex("#000000") == Color(0, 0, 0)
    assert parse_hex("#ffffff") == Color(255, 255, 255)


def test_parse_is_case_insensitive():
    assert parse_hex("#3b82f6") == parse_hex("#3B82F6")


def test_format_is_uppercase_and_zero_padded():
    assert format_hex(Color(1, 10, 255)) == "#010AFF"
    assert Color(0, 0, 0).hex == "#000000"
    assert str(Color(37, 99, 235)) == "#2563EB"


@pytest.mark.parametrize("value", ["#eff6ff", "#1D4ED8", "#0c0a09", "#AbCdEf", "#000000", "#FFFFFF"])
def test_roundtrip_uppercases(value):
    assert format_hex(parse_hex(value)) == value.upper()


@pytest.mark.parametrize(
    "value",
    ["#FFF", "3B82F6", "#GGGGGG", "#3B82F6FF", " #3B82F6", "#3B82F6\n", "", "#12345", 0x3B82F6, None],
)
def test_invalid_hex_rejected(value):
    with pytest.raises(InvalidFormat):
        parse_hex(value)


def test_invalid_format_is_value_error():
    with pytest.raises(ValueError):
        parse_hex("red")


def test_channel_range_enforced():
    with pytest.raises(InvalidFormat):
        Color(256, 0, 0)
    with pytest.raises(InvalidFormat):
        Color(0, -1, 0)
    with pytest.raises(InvalidFormat):
        Color(True, 0, 0)
    with pytest.raises(InvalidFormat):
        Color(0, 0, 1.5)


def test_as_color_accepts_both_forms():
    c = Color(12, 34, 56)
    assert as_color(c) is c
    assert as_color("#0C2238") == c
    assert Color.from_hex("#0c2238").rgb == (12, 34, 56)


def test_color_is_hashable():
    assert len({parse_hex("#abcdef"), parse_hex("#ABCDEF")}) == 1
