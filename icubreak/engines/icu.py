"""Boundary engine backed by ICU through PyICU.

ICU reports offsets in UTF-16 code units. Python strings are indexed by
code point, so handles translate offsets in both directions whenever the
text contains characters outside the Basic Multilingual Plane.
"""

from __future__ import annotations

import logging

import icu
import numpy as np

from ..constants import DONE
from ..errors import BoundaryEngineError, EngineOpenError
from ..types import BreakType, Locale

logger = logging.getLogger(__name__)

_FACTORIES = {
    BreakType.CHARACTER: icu.BreakIterator.createCharacterInstance,
    BreakType.WORD: icu.BreakIterator.createWordInstance,
    BreakType.LINE: icu.BreakIterator.createLineInstance,
    BreakType.SENTENCE: icu.BreakIterator.createSentenceInstance,
}


def _utf16_offsets(text: str) -> np.ndarray | None:
    """Map code point index -> UTF-16 offset, or None for BMP-only text."""
    widths = np.fromiter(
        (2 if ord(ch) > 0xFFFF else 1 for ch in text),
        dtype=np.int64,
        count=len(text),
    )
    if not (widths > 1).any():
        return None
    return np.concatenate((np.zeros(1, dtype=np.int64), np.cumsum(widths)))


class IcuBoundaryHandle:
    def __init__(self, break_iterator, text: str) -> None:
        self._bi = break_iterator
        # Keep the UnicodeString alive for as long as ICU iterates over it
        self._ustr = icu.UnicodeString(text)
        self._bi.setText(self._ustr)
        self._length = len(text)
        self._utf16 = _utf16_offsets(text)

    def _iterator(self):
        if self._bi is None:
            raise BoundaryEngineError("Boundary handle is closed")
        return self._bi

    def _from_icu(self, offset: int) -> int:
        if offset == DONE or self._utf16 is None:
            return offset
        return int(np.searchsorted(self._utf16, offset))

    def _to_icu(self, offset: int) -> int:
        if self._utf16 is None or offset < 0:
            return offset
        if offset > self._length:
            return int(self._utf16[-1]) + offset - self._length
        return int(self._utf16[offset])

    def first(self) -> int:
        return self._from_icu(self._iterator().first())

    def next(self) -> int:
        return self._from_icu(self._iterator().nextBoundary())

    def previous(self) -> int:
        return self._from_icu(self._iterator().previous())

    def last(self) -> int:
        return self._from_icu(self._iterator().last())

    def following(self, offset: int) -> int:
        return self._from_icu(self._iterator().following(self._to_icu(offset)))

    def preceding(self, offset: int) -> int:
        return self._from_icu(self._iterator().preceding(self._to_icu(offset)))

    def is_boundary(self, offset: int) -> bool:
        return bool(self._iterator().isBoundary(self._to_icu(offset)))

    def rule_status(self) -> int:
        return int(self._iterator().getRuleStatus())

    def rule_status_vector(self) -> list[int]:
        return [int(status) for status in self._iterator().getRuleStatusVec()]

    def close(self) -> None:
        self._bi = None
        self._ustr = None
        self._utf16 = None


class IcuBoundaryEngine:
    """Opens ICU break iterators for a (type, locale, text) triple."""

    def open(
        self, break_type: BreakType, locale: Locale, text: str
    ) -> IcuBoundaryHandle:
        factory = _FACTORIES.get(break_type)
        if factory is None:
            raise EngineOpenError(f"Unsupported break type: {break_type!r}")
        try:
            break_iterator = factory(icu.Locale(locale.icu_id))
        except icu.ICUError as err:
            raise EngineOpenError(
                f"Failed to open {BreakType(break_type).name} break iterator "
                f"for locale {locale.id!r}: {err}"
            ) from err
        logger.debug(
            "Opened ICU %s break iterator for %s (%d chars)",
            BreakType(break_type).name,
            locale.id,
            len(text),
        )
        return IcuBoundaryHandle(break_iterator, text)
