"""Data models shared across UI, core counter, and storage layers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from .errors import CounterError, ErrorCode

TERMINATOR = "\0"

DEFAULT_PREFIX_MESSAGE = " occurrences of the letter '"
DEFAULT_SUFFIX_MESSAGE = "' in the string "


@dataclass(slots=True, frozen=True)
class CharSequence:
    """Read-only character buffer ending in the ``TERMINATOR`` sentinel.

    The buffer is kept exactly as built, sentinel included, so the counter
    walks the same cells a terminator-ended string would occupy in memory.
    Everything after the first sentinel is unreachable.
    """

    buffer: str = TERMINATOR

    @classmethod
    def from_text(cls, text: str) -> "CharSequence":
        if not text.isascii():
            raise CounterError(
                ErrorCode.INPUT_ERROR,
                "Only ASCII text can be scanned",
                context={"text": text},
            )
        return cls(buffer=text + TERMINATOR)

    @property
    def text(self) -> str:
        """Characters before the first terminator."""

        end = self.buffer.find(TERMINATOR)
        return self.buffer if end < 0 else self.buffer[:end]

    def __iter__(self) -> Iterator[str]:
        return iter(self.buffer)

    def __len__(self) -> int:
        return len(self.text)


@dataclass(slots=True, frozen=True)
class CountReport:
    """Result of one scan plus the literals used to present it."""

    target: str
    sequence: CharSequence
    count: int
    prefix_message: str = DEFAULT_PREFIX_MESSAGE
    suffix_message: str = DEFAULT_SUFFIX_MESSAGE

    @property
    def text(self) -> str:
        return self.sequence.text


@dataclass(slots=True)
class GlobalSettings:
    prefix_message: str = DEFAULT_PREFIX_MESSAGE
    suffix_message: str = DEFAULT_SUFFIX_MESSAGE


@dataclass(slots=True)
class ProfileSettings:
    """Fixed literals for one named run of the counter."""

    description: str
    target: str
    string: str


@dataclass(slots=True)
class RuntimeConfig:
    global_settings: GlobalSettings
    profile: ProfileSettings


@dataclass(slots=True)
class ScanRecord:
    """Row persisted for each scan in the SQLite history."""

    id: int
    target: str
    text: str
    count: int
    profile: Optional[str] = None
    created_at: float = 0.0
