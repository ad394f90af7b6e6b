from __future__ import annotations

import dataclasses

import pytest

from common.errors import CounterError, ErrorCode
from common.models import TERMINATOR, CharSequence


def test_from_text_appends_terminator() -> None:
    sequence = CharSequence.from_text("abc")
    assert sequence.buffer == "abc" + TERMINATOR
    assert sequence.text == "abc"
    assert len(sequence) == 3
    assert list(sequence) == ["a", "b", "c", TERMINATOR]


def test_sequence_is_read_only() -> None:
    sequence = CharSequence.from_text("abc")
    with pytest.raises(dataclasses.FrozenInstanceError):
        sequence.buffer = "xyz"  # type: ignore[misc]


def test_non_ascii_text_rejected() -> None:
    with pytest.raises(CounterError) as exc:
        CharSequence.from_text("café")
    assert exc.value.code == ErrorCode.INPUT_ERROR
