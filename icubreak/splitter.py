"""One-shot splitting helpers built on :class:`BreakIterator`.

Every call opens and closes its own engine handle; nothing is cached
between calls.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from .classifier import is_token
from .constants import DONE
from .iterator import BreakIterator
from .types import Boundary, BreakType, Locale

if TYPE_CHECKING:
    from .engines.protocols import BoundaryEngine

__all__ = ["Tokens", "get_boundaries", "get_word_boundaries", "split"]


def _segments(
    break_type: BreakType,
    locale: Locale | str,
    text: str,
    engine: BoundaryEngine | None,
) -> list[tuple[Boundary, int]]:
    """Return every segment of ``text`` with the status of its end boundary."""
    segments: list[tuple[Boundary, int]] = []
    with BreakIterator(break_type, locale, engine=engine) as bi:
        bi.set_text(text)
        start = bi.move_first()
        end = bi.move_next()
        while end != DONE:
            segments.append((Boundary(start, end), bi.get_rule_status()))
            start = end
            end = bi.move_next()
    return segments


class Tokens:
    """Lazy, restartable sequence of the tokens of a text.

    Boundaries are computed on each iteration, not on construction, so an
    unsupported break type surfaces as ``EngineOpenError`` on iteration of a
    non-empty text, the same as in :func:`get_boundaries`.
    """

    def __init__(
        self,
        break_type: BreakType,
        locale: Locale | str,
        text: str | None,
        *,
        engine: BoundaryEngine | None = None,
    ) -> None:
        self.break_type = break_type
        self.locale = Locale.coerce(locale)
        self.text = text or ""
        self._engine = engine

    def __iter__(self) -> Iterator[str]:
        if not self.text:
            return
        for boundary, status in _segments(
            self.break_type, self.locale, self.text, self._engine
        ):
            if is_token(self.break_type, status):
                yield boundary.slice_of(self.text)


def split(
    break_type: BreakType,
    locale: Locale | str,
    text: str | None,
    *,
    engine: BoundaryEngine | None = None,
) -> Tokens:
    """Split ``text`` along ``break_type`` boundaries.

    Spaces and punctuation are dropped for word breaks. ``None`` or an
    empty string gives an empty sequence.
    """
    return Tokens(break_type, locale, text, engine=engine)


def get_boundaries(
    break_type: BreakType,
    locale: Locale | str,
    text: str | None,
    *,
    engine: BoundaryEngine | None = None,
) -> list[Boundary]:
    """Return every boundary pair of ``text``, covering it without gaps."""
    if not text:
        return []
    return [boundary for boundary, _ in _segments(break_type, locale, text, engine)]


def get_word_boundaries(
    locale: Locale | str,
    text: str | None,
    include_all: bool,
    *,
    engine: BoundaryEngine | None = None,
) -> list[Boundary]:
    """Return word boundary pairs of ``text``.

    With ``include_all`` the pairs for spaces and punctuation are kept and
    the result partitions the text.
    """
    if not text:
        return []
    return [
        boundary
        for boundary, status in _segments(BreakType.WORD, locale, text, engine)
        if include_all or is_token(BreakType.WORD, status)
    ]
