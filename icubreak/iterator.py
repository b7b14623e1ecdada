from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from .constants import DEFAULT_CONFIG, DONE
from .engines import default_engine
from .errors import BoundaryEngineError, EngineOpenError, NullTextError
from .types import BreakType, Locale

if TYPE_CHECKING:
    from .config import BreakIteratorConfig
    from .engines.protocols import BoundaryEngine, BoundaryHandle

logger = logging.getLogger(__name__)


def _frozen(values: list[int]) -> np.ndarray:
    array = np.asarray(values, dtype=np.int64)
    array.flags.writeable = False
    return array


_NO_BOUNDARIES = _frozen([])


class BreakIterator:
    """Locale-aware boundary iterator over an eagerly cached boundary list.

    ``set_text`` walks the boundary engine once and caches every boundary
    offset together with its rule status. All navigation afterwards is
    served from that cache; the cursor is an index into it.

    The iterator owns the engine handle of its last boundary pass rather
    than closing it as soon as the pass ends. Navigation never reads it; it
    is released when the next pass succeeds, on :meth:`close`, or when the
    iterator is used as a context manager and the block exits.
    Instances are not safe for concurrent use.
    """

    def __init__(
        self,
        break_type: BreakType,
        locale: Locale | str,
        *,
        engine: BoundaryEngine | None = None,
        validate_boundaries: bool = DEFAULT_CONFIG["validate_boundaries"],
    ) -> None:
        try:
            self._break_type = BreakType(break_type)
        except ValueError as err:
            raise EngineOpenError(f"Unsupported break type: {break_type!r}") from err
        self._locale = Locale.coerce(locale)
        self._engine = engine if engine is not None else default_engine()
        self._validate = validate_boundaries
        self._handle: BoundaryHandle | None = None
        self._text = ""
        self._boundaries = _NO_BOUNDARIES
        self._statuses: tuple[int, ...] = ()
        self._status_vectors: tuple[tuple[int, ...], ...] = ()
        self._index = 0

    @classmethod
    def from_config(
        cls, config: BreakIteratorConfig, *, engine: BoundaryEngine | None = None
    ) -> BreakIterator:
        return cls(
            config.break_type,
            config.locale,
            engine=engine,
            validate_boundaries=config.validate_boundaries,
        )

    @classmethod
    def create_character_instance(
        cls, locale: Locale | str, *, engine: BoundaryEngine | None = None
    ) -> BreakIterator:
        return cls(BreakType.CHARACTER, locale, engine=engine)

    @classmethod
    def create_word_instance(
        cls, locale: Locale | str, *, engine: BoundaryEngine | None = None
    ) -> BreakIterator:
        return cls(BreakType.WORD, locale, engine=engine)

    @classmethod
    def create_line_instance(
        cls, locale: Locale | str, *, engine: BoundaryEngine | None = None
    ) -> BreakIterator:
        return cls(BreakType.LINE, locale, engine=engine)

    @classmethod
    def create_sentence_instance(
        cls, locale: Locale | str, *, engine: BoundaryEngine | None = None
    ) -> BreakIterator:
        return cls(BreakType.SENTENCE, locale, engine=engine)

    def __enter__(self) -> BreakIterator:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self) -> None:
        # Last resort only; owners release through close()
        if getattr(self, "_handle", None) is not None:
            self.close()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._break_type.name}, "
            f"locale={self._locale.id!r}, boundaries={len(self._boundaries)}, "
            f"current={self.current})"
        )

    @property
    def break_type(self) -> BreakType:
        return self._break_type

    @property
    def locale(self) -> Locale:
        return self._locale

    @property
    def text(self) -> str:
        return self._text

    @property
    def boundaries(self) -> np.ndarray:
        """Read-only view of the cached boundary offsets."""
        return self._boundaries

    @property
    def current(self) -> int:
        if not len(self._boundaries):
            return 0
        return int(self._boundaries[self._index])

    def set_text(self, text: str) -> None:
        """Compute and cache every boundary of ``text``; reset the cursor.

        The previous text, boundaries and rule statuses are replaced as a
        whole. If the engine fails, nothing is replaced.
        """
        if text is None:
            raise NullTextError()
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text).__name__}")

        if text:
            handle, offsets, statuses, vectors = self._boundary_pass(text)
            boundaries = _frozen(offsets)
        else:
            handle, boundaries, statuses, vectors = None, _NO_BOUNDARIES, (), ()

        previous = self._handle
        self._handle = handle
        self._text = text
        self._boundaries = boundaries
        self._statuses = statuses
        self._status_vectors = vectors
        self._index = 0
        if previous is not None:
            self._release(previous)

    def _boundary_pass(self, text: str):
        handle = self._engine.open(self._break_type, self._locale, text)
        offsets: list[int] = []
        statuses: list[int] = []
        vectors: list[tuple[int, ...]] = []
        try:
            offset = handle.first()
            while offset != DONE:
                if self._validate and offsets and offset <= offsets[-1]:
                    raise BoundaryEngineError(
                        f"Boundary {offset} does not follow {offsets[-1]}"
                    )
                offsets.append(offset)
                statuses.append(handle.rule_status())
                vectors.append(tuple(handle.rule_status_vector()))
                offset = handle.next()
            if self._validate:
                self._check_span(offsets, len(text))
        except Exception:
            self._release(handle)
            raise
        logger.debug(
            "Cached %d %s boundaries for %d chars",
            len(offsets),
            self._break_type.name,
            len(text),
        )
        return handle, offsets, tuple(statuses), tuple(vectors)

    @staticmethod
    def _check_span(offsets: list[int], length: int) -> None:
        if not offsets or offsets[0] != 0 or offsets[-1] != length:
            span = (offsets[0], offsets[-1]) if offsets else ()
            raise BoundaryEngineError(
                f"Boundaries must span [0, {length}], got {span}"
            )

    def move_first(self) -> int:
        self._index = 0
        return self.current

    def move_last(self) -> int:
        self._index = max(len(self._boundaries) - 1, 0)
        return self.current

    def move_next(self) -> int:
        if self._index + 1 >= len(self._boundaries):
            return DONE
        self._index += 1
        return self.current

    def move_previous(self) -> int:
        if self._index == 0:
            return DONE
        self._index -= 1
        return self.current

    def move_following(self, offset: int) -> int:
        """Move to the first boundary after ``offset``."""
        boundaries = self._boundaries
        if not len(boundaries):
            self._index = 0
            return 0 if offset < 0 else DONE
        last = len(boundaries) - 1
        if offset < 0:
            self._index = 0
        elif offset >= boundaries[last]:
            self._index = last
            return DONE
        else:
            self._index = int(np.searchsorted(boundaries, offset, side="right"))
        return self.current

    def move_preceding(self, offset: int) -> int:
        """Move to the last boundary before ``offset``."""
        boundaries = self._boundaries
        self._index = 0
        if not len(boundaries):
            return DONE if offset == 0 else 0
        last = len(boundaries) - 1
        if offset == 0:
            return DONE
        if offset > boundaries[last]:
            self._index = last
        elif offset > 0:
            index = int(np.searchsorted(boundaries, offset, side="left")) - 1
            if index < 0:
                return DONE
            self._index = index
        return self.current

    def is_boundary(self, offset: int) -> bool:
        """Return True if ``offset`` is a boundary.

        Moves the cursor to the first boundary at or after ``offset``,
        clamped to the first and last boundaries.
        """
        boundaries = self._boundaries
        if not len(boundaries):
            self._index = 0
            return False
        index = int(np.searchsorted(boundaries, offset, side="left"))
        self._index = min(index, len(boundaries) - 1)
        return self.current == offset

    def get_rule_status(self) -> int:
        if not self._statuses:
            return 0
        return self._statuses[self._index]

    def get_rule_status_vector(self) -> list[int]:
        if not self._status_vectors or not self._status_vectors[self._index]:
            return [0]
        return list(self._status_vectors[self._index])

    def close(self) -> None:
        """Release the engine handle. Safe to call more than once."""
        handle, self._handle = self._handle, None
        if handle is not None:
            self._release(handle)

    dispose = close

    @staticmethod
    def _release(handle: BoundaryHandle) -> None:
        try:
            handle.close()
        except Exception:
            logger.warning("Failed to close boundary engine handle", exc_info=True)
        else:
            logger.debug("Closed boundary engine handle")
