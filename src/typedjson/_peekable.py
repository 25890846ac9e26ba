"""One-step lookahead over any single-pass iterable."""

from collections.abc import Iterable
from collections.abc import Iterator

from ._errors import InternalConsistencyError

_EXHAUSTED = object()


class Peekable[T]:
    """
    Wraps an iterable and exposes the current element plus one element ahead.

    Construction primes both the current element and the lookahead. ``None``
    means "exhausted", so the source itself must never yield ``None``.
    Every element seen is kept in ``history`` for error reporting; inputs are
    whole in-memory documents, so the log stays bounded by the input size.
    """

    def __init__(self, source: Iterable[T]):
        self._source: Iterator[T] = iter(source)
        self.position = 0
        self._history: list[T] = []
        self._current = self._pull()
        self._next = self._pull()

    def _pull(self) -> T | None:
        value = next(self._source, _EXHAUSTED)
        if value is _EXHAUSTED:
            return None
        if value is None:
            raise InternalConsistencyError("Stream value cannot be None")
        self._history.append(value)
        return value

    def current(self) -> T | None:
        """Returns the current element, or None once exhausted."""
        return self._current

    def peek(self) -> T | None:
        """Returns the element after the current one without advancing."""
        return self._next

    def advance(self) -> None:
        """Moves the window forward by one element."""
        self._current = self._next
        self._next = self._pull()
        self.position += 1

    @property
    def history(self) -> tuple[T, ...]:
        return tuple(self._history)
