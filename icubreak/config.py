from __future__ import annotations

from dataclasses import dataclass

from .constants import DEFAULT_CONFIG
from .types import BreakType, Locale


@dataclass(frozen=True)
class BreakIteratorConfig:
    """Configuration for a :class:`~icubreak.iterator.BreakIterator`.

    Keep this frozen+hashable so it can be used as part of cache keys.
    """

    break_type: BreakType = BreakType.WORD
    locale: Locale | str = DEFAULT_CONFIG["locale"]

    # Reject boundary streams that are not strictly increasing over
    # [0, len(text)]
    validate_boundaries: bool = DEFAULT_CONFIG["validate_boundaries"]
