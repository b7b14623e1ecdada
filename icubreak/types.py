from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class BreakType(IntEnum):
    """The possible types of text boundaries (ICU ``UBreakIteratorType``)."""

    CHARACTER = 0
    WORD = 1
    LINE = 2
    SENTENCE = 3


@dataclass(frozen=True)
class Boundary:
    """A segment of text delimited by two offsets into the source string.

    ``start == end == 0`` is allowed for the single point of an empty text.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start == self.end == 0:
            return
        if self.start < 0 or self.end <= self.start:
            raise ValueError(
                f"Invalid boundary ({self.start}, {self.end}): "
                "expected 0 <= start < end"
            )

    @property
    def length(self) -> int:
        return self.end - self.start

    def slice_of(self, text: str) -> str:
        return text[self.start : self.end]


@dataclass(frozen=True)
class Locale:
    """Locale identifier such as ``"en-US"`` or ``"de_DE"``."""

    id: str

    @classmethod
    def coerce(cls, value: Locale | str) -> Locale:
        if isinstance(value, Locale):
            return value
        if isinstance(value, str):
            return cls(value)
        raise TypeError(f"Expected Locale or str, got {type(value).__name__}")

    @property
    def icu_id(self) -> str:
        # ICU locale ids use "_" between subtags
        return self.id.replace("-", "_")

    def __str__(self) -> str:
        return self.id
