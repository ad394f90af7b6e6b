"""Tests for target literal parsing."""
from __future__ import annotations

import pytest

from common.errors import CounterError, ErrorCode
from common.text import describe_char, parse_target


def test_single_character_passes_through() -> None:
    assert parse_target("l") == "l"
    assert parse_target("x") == "x"
    assert parse_target("#") == "#"
    assert parse_target(" ") == " "


def test_hex_literal() -> None:
    assert parse_target("x64") == "d"
    assert parse_target("X6c") == "l"
    assert parse_target("x0") == "\0"


def test_decimal_literal() -> None:
    assert parse_target("#108") == "l"
    assert parse_target("#32") == " "


@pytest.mark.parametrize("value", ["xG", "#1a", "x80", "#200", "ab", "", "é", "\x80"])
def test_invalid_literals_rejected(value: str) -> None:
    with pytest.raises(CounterError) as exc:
        parse_target(value)
    assert exc.value.code == ErrorCode.INPUT_ERROR


def test_invalid_hex_message_names_literal() -> None:
    with pytest.raises(CounterError) as exc:
        parse_target("xG")
    assert "invalid hex literal 'xG'" in str(exc.value)


def test_describe_char() -> None:
    assert describe_char("d") == "d"
    assert describe_char("\0") == "x00"
    assert describe_char("\n") == "x0A"


def test_non_ascii_single_character_message() -> None:
    with pytest.raises(CounterError) as exc:
        parse_target("é")
    assert "outside the ASCII range" in str(exc.value)
