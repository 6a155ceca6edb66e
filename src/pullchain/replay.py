"""
Combinators that replay buffered values: Cycle and Product2.
"""

from __future__ import annotations

import logging
import typing as tp
from collections.abc import Iterable, Iterator

from pullchain._helpers import empty_iterator
from pullchain.base import PullIterator

logger = logging.getLogger(__name__)


class Cycle[T](PullIterator[T]):
    """
    Yield the source's elements, then replay them forever.

    The first pass is streamed and saved; later laps come from the saved
    copy, so memory grows with the length of the source. An empty source
    gives an empty iterator. An infinite source never finishes its first
    pass.

    Example:
        >>> from pullchain.single import ISlice
        >>> list(ISlice(Cycle([1, 2, 3]), stop=7))
        [1, 2, 3, 1, 2, 3, 1]
        >>> list(Cycle([]))
        []
    """

    def __init__(self, source: Iterable[T]) -> None:
        super().__init__()
        self._source = iter(source)
        self._saved: list[T] = []
        self._first_pass = True
        self._index = 0

    @property
    def saved(self) -> int:
        """Number of elements buffered from the first pass."""
        return len(self._saved)

    @tp.override
    def _advance(self) -> T:
        if self._first_pass:
            try:
                item = next(self._source)
            except StopIteration:
                self._first_pass = False
            else:
                self._saved.append(item)
                return item
            self._source = empty_iterator()
            logger.debug("cycle: first pass complete, %d element(s) saved", len(self._saved))
        if not self._saved:
            raise StopIteration
        item = self._saved[self._index]
        self._index = (self._index + 1) % len(self._saved)
        return item

    @tp.override
    def _release(self) -> None:
        self._source = empty_iterator()


class Product2[T0, T1](PullIterator[tuple[T0, T1]]):
    """
    Cartesian product of two sources in lexicographic order.

    ``source0`` is consumed lazily, one element at a time. ``source1`` is
    iterated exactly once, on the first advance, into a buffer that is
    replayed for every element of ``source0``. If either side is empty the
    product is empty.

    Example:
        >>> list(Product2([1, 2], "ab"))
        [(1, 'a'), (1, 'b'), (2, 'a'), (2, 'b')]
        >>> list(Product2([], "ab"))
        []
    """

    def __init__(self, source0: Iterable[T0], source1: Iterable[T1]) -> None:
        super().__init__()
        self._outer = iter(source0)
        self._inner: Iterator[T1] | None = iter(source1)
        self._pool: list[T1] = []
        self._current: T0 | None = None
        self._has_current = False
        self._index = 0

    @tp.override
    def _advance(self) -> tuple[T0, T1]:
        if self._inner is not None:
            if not self._has_current:
                self._current = next(self._outer)
                self._has_current = True
            # values read before an error in the inner source stay pooled
            for item in self._inner:
                self._pool.append(item)
            self._inner = None
            logger.debug("product2: inner source materialized, %d element(s)", len(self._pool))
            if not self._pool:
                raise StopIteration
        elif self._index == len(self._pool):
            self._current = next(self._outer)
            self._index = 0
        item = self._pool[self._index]
        self._index += 1
        return tp.cast(T0, self._current), item

    @tp.override
    def _release(self) -> None:
        self._outer = empty_iterator()
        self._inner = None
        self._pool = []
        self._current = None
        self._has_current = False


def cycle[T](iterable: Iterable[T]) -> Cycle[T]:
    return Cycle(iterable)


def product2[T0, T1](iterable0: Iterable[T0], iterable1: Iterable[T1]) -> Product2[T0, T1]:
    return Product2(iterable0, iterable1)
