"""icubreak - locale-aware text boundary iteration on top of ICU."""

from .classifier import is_token
from .config import BreakIteratorConfig
from .constants import DONE, LineBreakTag, SentenceBreakTag, WordBreak
from .errors import (
    BoundaryEngineError,
    BreakIteratorError,
    EngineOpenError,
    NullTextError,
)
from .iterator import BreakIterator
from .splitter import get_boundaries, get_word_boundaries, split
from .types import Boundary, BreakType, Locale

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DONE",
    "Boundary",
    "BoundaryEngineError",
    "BreakIterator",
    "BreakIteratorConfig",
    "BreakIteratorError",
    "BreakType",
    "EngineOpenError",
    "LineBreakTag",
    "Locale",
    "NullTextError",
    "SentenceBreakTag",
    "WordBreak",
    "get_boundaries",
    "get_word_boundaries",
    "is_token",
    "split",
]
