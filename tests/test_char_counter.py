"""Tests for the terminator-aware character scan."""
from __future__ import annotations

import pytest

from common.models import TERMINATOR, CharSequence
from core.counting import CharacterCounter, count_char

CLASSIC = CharSequence.from_text("load rel address")


@pytest.mark.parametrize(
    ("target", "expected"),
    [("l", 2), ("d", 3), ("a", 2), ("s", 2), (" ", 2), ("z", 0)],
)
def test_counts_classic_string(target: str, expected: int) -> None:
    assert count_char(target, CLASSIC) == expected


def test_empty_sequence_counts_zero() -> None:
    empty = CharSequence.from_text("")
    assert empty.buffer == TERMINATOR
    for target in ("a", " ", TERMINATOR):
        assert count_char(target, empty) == 0


def test_terminator_never_matches() -> None:
    assert count_char(TERMINATOR, CharSequence.from_text("abc")) == 0


def test_repeated_character() -> None:
    assert count_char("a", CharSequence.from_text("aaaa")) == 4


def test_stops_at_first_terminator() -> None:
    sequence = CharSequence(buffer="ab\0bbb\0")
    assert sequence.text == "ab"
    assert count_char("b", sequence) == 1


def test_plain_string_without_terminator_scans_to_end() -> None:
    assert count_char("s", "address") == 2
    assert count_char("s", "addr\0ess") == 0


def test_matching_is_case_sensitive() -> None:
    assert count_char("L", CLASSIC) == 0


def test_count_never_exceeds_length() -> None:
    for text in ("", "x", "xyx", "load rel address"):
        sequence = CharSequence.from_text(text)
        for target in set(text) | {"q"}:
            assert 0 <= count_char(target, sequence) <= len(sequence)


def test_matches_naive_reference_count() -> None:
    text = "the quick brown fox jumps over the lazy dog"
    sequence = CharSequence.from_text(text)
    for target in set(text):
        assert count_char(target, sequence) == text.count(target)


def test_counter_is_stateless_between_calls() -> None:
    counter = CharacterCounter()
    first = counter.count("d", CLASSIC)
    second = counter.count("d", CLASSIC)
    assert first == second == 3
    assert counter.count("l", CLASSIC) == 2
