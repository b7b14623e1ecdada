from __future__ import annotations

from .constants import WordBreak
from .types import BreakType


def is_token(break_type: BreakType, status: int) -> bool:
    """Return True if a segment ending with ``status`` is a real token.

    Word segments tagged below ``WordBreak.NONE_LIMIT`` are spaces or
    punctuation. Every character, line and sentence segment is a token.
    """
    if break_type in (BreakType.CHARACTER, BreakType.LINE, BreakType.SENTENCE):
        return True
    if break_type == BreakType.WORD:
        return status < WordBreak.NONE or status >= WordBreak.NONE_LIMIT
    return False
