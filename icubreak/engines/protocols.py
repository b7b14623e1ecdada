from __future__ import annotations

from typing import Protocol

from ..types import BreakType, Locale


class BoundaryHandle(Protocol):
    """Cursor over the boundaries of one text, owned by a single caller.

    Navigation methods return :data:`~icubreak.constants.DONE` when there
    is no boundary in the requested direction.
    """

    def first(self) -> int: ...
    def next(self) -> int: ...
    def previous(self) -> int: ...
    def last(self) -> int: ...
    def following(self, offset: int) -> int: ...
    def preceding(self, offset: int) -> int: ...
    def is_boundary(self, offset: int) -> bool: ...
    def rule_status(self) -> int: ...
    def rule_status_vector(self) -> list[int]: ...
    def close(self) -> None: ...


class BoundaryEngine(Protocol):
    def open(
        self, break_type: BreakType, locale: Locale, text: str
    ) -> BoundaryHandle:
        """Open a handle over ``text``; raises ``EngineOpenError`` on failure."""
        ...
