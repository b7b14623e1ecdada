from __future__ import annotations

from bisect import bisect_left, bisect_right

import pytest

from icubreak.constants import DONE, WordBreak
from icubreak.errors import EngineOpenError
from icubreak.types import BreakType

NONE = int(WordBreak.NONE)
NUMBER = int(WordBreak.NUMBER)
LETTER = int(WordBreak.LETTER)

HYPHENATED = "Good-day, kind sir !"
PARAGRAPH = "Good-day, kind sir !  Can I have a glass of water?  I am very parched."
MIXED = "Aa bb. Ccdef 3.5 x? Y?x! Z"

# (break type, text) -> [(boundary offset, rule status), ...] as reported by ICU
SCRIPTS: dict[tuple[BreakType, str], list[tuple[int, int]]] = {
    (BreakType.WORD, HYPHENATED): [
        (0, NONE), (4, LETTER), (5, NONE), (8, LETTER), (9, NONE), (10, NONE),
        (14, LETTER), (15, NONE), (18, LETTER), (19, NONE), (20, NONE),
    ],
    (BreakType.LINE, HYPHENATED): [(0, 0), (5, 0), (10, 0), (15, 0), (20, 0)],
    (BreakType.SENTENCE, PARAGRAPH): [(0, 0), (22, 0), (52, 0), (70, 0)],
    (BreakType.SENTENCE, "It is my birthday!  I hope something exciting happens."): [
        (0, 0), (20, 0), (54, 0),
    ],
    (BreakType.SENTENCE, "Good-bye, dear! That was a delicious dinner."): [
        (0, 0), (16, 0), (44, 0),
    ],
    (BreakType.CHARACTER, "Good-bye, dear!"): [(i, 0) for i in range(16)],
    (BreakType.CHARACTER, "abc"): [(i, 0) for i in range(4)],
    (BreakType.CHARACTER, "abc? 1"): [(i, 0) for i in range(7)],
    (BreakType.WORD, "Aa Bb. Cc"): [
        (0, NONE), (2, LETTER), (3, NONE), (5, LETTER), (6, NONE), (7, NONE),
        (9, LETTER),
    ],
    (BreakType.LINE, "Aa Bb. Cc"): [(0, 0), (3, 0), (7, 0), (9, 0)],
    (BreakType.SENTENCE, "Aa bb. Cc 3.5 x? Y?x! Z"): [
        (0, 0), (7, 0), (17, 0), (19, 0), (22, 0), (23, 0),
    ],
    (BreakType.WORD, MIXED): [
        (0, NONE), (2, LETTER), (3, NONE), (5, LETTER), (6, NONE), (7, NONE),
        (12, LETTER), (13, NONE), (16, NUMBER), (17, NONE), (18, LETTER),
        (19, NONE), (20, NONE), (21, LETTER), (22, NONE), (23, LETTER),
        (24, NONE), (25, NONE), (26, LETTER),
    ],
    (BreakType.LINE, MIXED): [
        (0, 0), (3, 0), (7, 0), (13, 0), (17, 0), (20, 0), (22, 0), (25, 0),
        (26, 0),
    ],
    (BreakType.SENTENCE, MIXED): [
        (0, 0), (7, 0), (20, 0), (22, 0), (25, 0), (26, 0),
    ],
}


class ScriptedHandle:
    """Stops are ``(offset, status)`` or ``(offset, status, status_vector)``."""

    def __init__(self, engine: ScriptedEngine, stops) -> None:
        self._engine = engine
        self._offsets = [stop[0] for stop in stops]
        self._statuses = [stop[1] for stop in stops]
        self._vectors = [
            list(stop[2]) if len(stop) > 2 else [stop[1]] for stop in stops
        ]
        self._pos = 0
        self.closed = False

    def _at(self, pos: int) -> int:
        self._pos = pos
        return self._offsets[pos]

    def first(self) -> int:
        return self._at(0)

    def next(self) -> int:
        if self._pos + 1 >= len(self._offsets):
            return DONE
        return self._at(self._pos + 1)

    def previous(self) -> int:
        if self._pos == 0:
            return DONE
        return self._at(self._pos - 1)

    def last(self) -> int:
        return self._at(len(self._offsets) - 1)

    def following(self, offset: int) -> int:
        pos = bisect_right(self._offsets, offset)
        return DONE if pos >= len(self._offsets) else self._at(pos)

    def preceding(self, offset: int) -> int:
        pos = bisect_left(self._offsets, offset) - 1
        return DONE if pos < 0 else self._at(pos)

    def is_boundary(self, offset: int) -> bool:
        return offset in self._offsets

    def rule_status(self) -> int:
        return self._statuses[self._pos]

    def rule_status_vector(self) -> list[int]:
        return list(self._vectors[self._pos])

    def close(self) -> None:
        self.closed = True
        self._engine.closed.append(self)
        if self._engine.close_error is not None:
            raise self._engine.close_error


class ScriptedEngine:
    """Boundary engine replaying recorded ICU output for known texts.

    ``stream`` replays the same offsets for any text; ``close_error`` is
    raised by every handle after it records its close.
    """

    def __init__(self, scripts=None, *, stream=None, close_error=None) -> None:
        self.scripts = dict(SCRIPTS if scripts is None else scripts)
        self.stream = stream
        self.close_error = close_error
        self.opened: list[ScriptedHandle] = []
        self.closed: list[ScriptedHandle] = []

    def open(self, break_type, locale, text) -> ScriptedHandle:
        if self.stream is not None:
            stops = [(offset, 0) for offset in self.stream]
        else:
            stops = self.scripts.get((break_type, text))
        if stops is None:
            raise EngineOpenError(f"No script for {break_type!r} {text!r}")
        handle = ScriptedHandle(self, stops)
        self.opened.append(handle)
        return handle


@pytest.fixture
def engine() -> ScriptedEngine:
    return ScriptedEngine()


@pytest.fixture
def make_engine():
    return ScriptedEngine
