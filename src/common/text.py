"""Lightweight text helpers shared across modules."""
from __future__ import annotations

import re

from .errors import CounterError, ErrorCode

MAX_CHAR_CODE = 0x7F

_HEX_LITERAL = re.compile(r"^[xX]([0-9A-Za-z]+)$")
_DECIMAL_LITERAL = re.compile(r"^#([0-9A-Za-z]+)$")


def parse_target(value: str) -> str:
    """Resolve a target given as a character, ``xNN`` hex or ``#NN`` decimal literal."""

    if len(value) == 1:
        if ord(value) > MAX_CHAR_CODE:
            raise CounterError(
                ErrorCode.INPUT_ERROR,
                f"Target '{value}' is outside the ASCII range",
            )
        return value
    hex_match = _HEX_LITERAL.match(value)
    if hex_match:
        return _char_from_literal(hex_match.group(1), 16, f"invalid hex literal '{value}'")
    decimal_match = _DECIMAL_LITERAL.match(value)
    if decimal_match:
        return _char_from_literal(decimal_match.group(1), 10, f"invalid decimal literal '{value}'")
    raise CounterError(
        ErrorCode.INPUT_ERROR,
        f"Target must be a single character or an xNN/#NN literal, got '{value}'",
    )


def describe_char(value: str) -> str:
    """Printable rendering for log lines (control characters shown as hex)."""

    code = ord(value)
    if 0x20 <= code < MAX_CHAR_CODE:
        return value
    return f"x{code:02X}"


def _char_from_literal(digits: str, base: int, error_message: str) -> str:
    try:
        code = int(digits, base)
    except ValueError as exc:
        raise CounterError(ErrorCode.INPUT_ERROR, error_message) from exc
    if code > MAX_CHAR_CODE:
        raise CounterError(
            ErrorCode.INPUT_ERROR,
            f"{error_message}: code {code} is outside the ASCII range",
        )
    return chr(code)
