from __future__ import annotations


class BreakIteratorError(Exception):
    """Base class for all icubreak errors."""


class NullTextError(BreakIteratorError, TypeError):
    """Raised when ``None`` is given where text is required."""

    def __init__(self, message: str = "text must not be None") -> None:
        super().__init__(message)


class BoundaryEngineError(BreakIteratorError, RuntimeError):
    """The boundary engine produced an unusable boundary stream."""


class EngineOpenError(BoundaryEngineError):
    """The boundary engine could not be opened for a type/locale pair."""
