"""Linear scan counting occurrences of one character."""
from __future__ import annotations

from typing import Iterable

from common.models import TERMINATOR


def count_char(target: str, sequence: Iterable[str]) -> int:
    """Count cells equal to ``target`` before the first terminator.

    The terminator check runs before the comparison, so a ``target`` equal to
    the terminator never matches. A buffer without a terminator is scanned to
    its end.
    """

    count = 0
    for char in sequence:
        if char == TERMINATOR:
            break
        if char == target:
            count += 1
    return count


class CharacterCounter:
    """Stateless wrapper so callers can inject a counter."""

    def count(self, target: str, sequence: Iterable[str]) -> int:
        return count_char(target, sequence)
