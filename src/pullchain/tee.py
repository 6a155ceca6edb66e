"""
Split one source into several independently paced cursors.

All cursors created by one ``tee`` call share a single ``TeeBuffer``, which
owns the source iterator. Fetching a value from the source appends it to
the pending queue of every live cursor, and each cursor pops from its own
queue, so a value is held until the slowest cursor has consumed it.
Cursors must be advanced from one thread at a time.
"""

from __future__ import annotations

import logging
import typing as tp
import weakref
from collections import deque
from collections.abc import Iterable, Iterator

from pullchain.base import PullIterator

logger = logging.getLogger(__name__)


class TeeBuffer[T]:
    """
    Shared state behind a group of ``TeeCursor`` objects.

    Cursors are tracked weakly: a cursor that is dropped stops receiving
    values, so it does not hold the buffer open.
    """

    def __init__(self, source: Iterable[T]) -> None:
        self._source: Iterator[T] | None = iter(source)
        self._cursors: weakref.WeakSet[TeeCursor[T]] = weakref.WeakSet()
        self._pulled = 0

    @property
    def pulled(self) -> int:
        """Number of values fetched from the source so far."""
        return self._pulled

    @property
    def backlog(self) -> int:
        """Length of the longest pending queue among live cursors."""
        return max((cursor.pending for cursor in self._cursors), default=0)

    @property
    def exhausted(self) -> bool:
        return self._source is None

    def cursor(self, pending: Iterable[T] = ()) -> TeeCursor[T]:
        """Register and return a new cursor starting with ``pending`` queued."""
        cursor = TeeCursor(self, pending)
        self._cursors.add(cursor)
        return cursor

    def fetch(self) -> bool:
        """
        Pull one value from the source into every live cursor's queue.

        Returns:
            bool: False if the source is exhausted.
        """
        if self._source is None:
            return False
        try:
            item = next(self._source)
        except StopIteration:
            logger.debug("tee: source exhausted after %d value(s)", self._pulled)
            self._source = None
            return False
        self._pulled += 1
        for cursor in self._cursors:
            cursor._enqueue(item)  # pyright: ignore[reportPrivateUsage]
        return True


class TeeCursor[T](PullIterator[T]):
    """
    One branch of a ``tee``.

    ``copy.copy`` of a cursor gives a new cursor on the same ``TeeBuffer``,
    positioned where the original is; the source is never duplicated.

    Example:
        >>> import copy
        >>> a, = tee(iter([1, 2, 3, 4]), 1)
        >>> next(a)
        1
        >>> b = copy.copy(a)
        >>> list(a), list(b)
        ([2, 3, 4], [2, 3, 4])
    """

    def __init__(self, buffer: TeeBuffer[T], pending: Iterable[T] = ()) -> None:
        super().__init__()
        self._buffer = buffer
        self._pending = deque(pending)

    @property
    def buffer(self) -> TeeBuffer[T]:
        return self._buffer

    @property
    def pending(self) -> int:
        """Number of fetched values this cursor has not consumed yet."""
        return len(self._pending)

    def _enqueue(self, item: T) -> None:
        if not self._exhausted:
            self._pending.append(item)

    @tp.override
    def _advance(self) -> T:
        if not self._pending and not self._buffer.fetch():
            raise StopIteration
        return self._pending.popleft()

    @tp.override
    def _release(self) -> None:
        self._pending.clear()

    def __copy__(self) -> TeeCursor[T]:
        logger.debug("tee: copying cursor with %d pending value(s)", len(self._pending))
        clone = self._buffer.cursor(self._pending)
        if self._exhausted:
            clone._exhausted = True
        return clone


def tee[T](iterable: Iterable[T], n: int = 2) -> tuple[TeeCursor[T], ...]:
    """
    Return ``n`` independent cursors over ``iterable``.

    Raises:
        ValueError: If ``n`` is negative.

    Example:
        >>> a, b = tee("abc")
        >>> next(a), next(a), next(b)
        ('a', 'b', 'a')
        >>> list(b), list(a)
        (['b', 'c'], ['c'])
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"tee() n must be an int, not {type(n).__name__!r}")
    if n < 0:
        raise ValueError(f"tee() n must be >= 0, got {n}")
    buffer = TeeBuffer(iterable)
    logger.debug("tee: splitting source into %d cursor(s)", n)
    return tuple(buffer.cursor() for _ in range(n))
