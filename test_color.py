"""색상 파서 테스트."""

import logging

import pytest

from errors import ParseError
from renderer.color import FALLBACK_COLOR, parse_color, resolve_color


@pytest.mark.parametrize("value, expected", [
    ("#00ffff", (0, 255, 255)),
    ("00FFFF", (0, 255, 255)),
    ("#ff0000", (255, 0, 0)),
    ("abc", (170, 187, 204)),
    ("#FFF", (255, 255, 255)),
])
def test_parse_valid_hex(value, expected):
    assert parse_color(value) == expected


@pytest.mark.parametrize("value", ["", "#", "#12345", "#1234567", "ab"])
def test_unsupported_length_falls_back_to_black(value):
    assert parse_color(value) == FALLBACK_COLOR == (0, 0, 0)


@pytest.mark.parametrize("value", ["#gg0000", "12345z", "#x0f", "#12 456"])
def test_bad_digits_raise_parse_error(value):
    with pytest.raises(ParseError) as exc:
        parse_color(value)
    assert exc.value.value == value


def test_resolve_color_none_is_black():
    assert resolve_color(None) == (0, 0, 0)


def test_resolve_color_substitutes_black_and_logs(caplog):
    with caplog.at_level(logging.WARNING, logger="renderer.color"):
        assert resolve_color("#zzzzzz") == (0, 0, 0)
    assert "#zzzzzz" in caplog.text


def test_mixed_case_digits():
    assert parse_color("#Ab12Cd") == (171, 18, 205)
    assert parse_color("AbC") == (170, 187, 204)
