"""
Combinators pulling from several sources.
"""

from __future__ import annotations

import typing as tp
from collections.abc import Iterable, Iterator

from pullchain._helpers import empty_iterator
from pullchain.base import PullIterator
from pullchain.operators import NotEqual


class Chain[T](PullIterator[T]):
    """
    Concatenate sources strictly left to right.

    A source is only begun once every source before it is exhausted;
    empty sources contribute nothing and do not end the chain.

    Example:
        >>> list(Chain([1, 2], [], [3]))
        [1, 2, 3]
        >>> list(Chain())
        []
    """

    def __init__(self, *sources: Iterable[T]) -> None:
        super().__init__()
        self._sources: Iterator[Iterable[T]] = iter(sources)
        self._current: Iterator[T] | None = None

    @classmethod
    def from_iterable(cls, sources: Iterable[Iterable[T]]) -> Chain[T]:
        """
        Chain the iterables produced lazily by ``sources``.

        ``sources`` itself may be infinite.

        Example:
            >>> from pullchain.single import ISlice
            >>> from pullchain.sources import Repeat
            >>> list(ISlice(Chain.from_iterable(Repeat("ab")), stop=5))
            ['a', 'b', 'a', 'b', 'a']
        """
        chained = cls()
        chained._sources = iter(sources)
        return chained

    @tp.override
    def _advance(self) -> T:
        while True:
            if self._current is None:
                self._current = iter(next(self._sources))
            try:
                return next(self._current)
            except StopIteration:
                self._current = None

    @tp.override
    def _release(self) -> None:
        self._sources = empty_iterator()
        self._current = None


class Compress[T](PullIterator[T]):
    """
    Yield the ``data`` elements whose paired selector is truthy.

    Data and selectors are consumed one for one; the iterator ends as soon
    as either runs out.

    Example:
        >>> list(Compress("ABCDEF", [1, 0, 1, 0, 1, 1]))
        ['A', 'C', 'E', 'F']
        >>> list(Compress("ABCDEF", [True, False]))
        ['A']
    """

    def __init__(self, data: Iterable[T], selectors: Iterable[object]) -> None:
        super().__init__()
        self._data = iter(data)
        self._selectors = iter(selectors)

    @tp.override
    def _advance(self) -> T:
        while True:
            datum = next(self._data)
            if next(self._selectors):
                return datum

    @tp.override
    def _release(self) -> None:
        self._data = empty_iterator()
        self._selectors = empty_iterator()


class Zip[T0, T1](PullIterator[tuple[T0, T1]]):
    """
    Pair the two sources positionally, stopping with the shorter one.

    ``source1`` is not advanced once ``source0`` is exhausted.

    Example:
        >>> list(Zip([1, 2, 3], "ab"))
        [(1, 'a'), (2, 'b')]
    """

    def __init__(self, source0: Iterable[T0], source1: Iterable[T1]) -> None:
        super().__init__()
        self._source0 = iter(source0)
        self._source1 = iter(source1)

    @tp.override
    def _advance(self) -> tuple[T0, T1]:
        first = next(self._source0)
        return first, next(self._source1)

    @tp.override
    def _release(self) -> None:
        self._source0 = empty_iterator()
        self._source1 = empty_iterator()


class ZipFill[T0, T1, F0, F1](PullIterator[tuple[T0 | F0, T1 | F1]]):
    """
    Pair the two sources positionally until both are exhausted, padding
    the shorter one with its fill value.

    A side that has run out is never advanced again.

    Example:
        >>> list(ZipFill([1, 2, 3], "ab", 0, "z"))
        [(1, 'a'), (2, 'b'), (3, 'z')]
        >>> list(ZipFill("a", [1, 2], fill0="-"))
        [('a', 1), ('-', 2)]
    """

    def __init__(
        self,
        source0: Iterable[T0],
        source1: Iterable[T1],
        fill0: F0 = None,
        fill1: F1 = None,
    ) -> None:
        super().__init__()
        self._source0: Iterator[T0] | None = iter(source0)
        self._source1: Iterator[T1] | None = iter(source1)
        self._fill0 = fill0
        self._fill1 = fill1

    @tp.override
    def _advance(self) -> tuple[T0 | F0, T1 | F1]:
        first: T0 | F0 = self._fill0
        if self._source0 is not None:
            try:
                first = next(self._source0)
            except StopIteration:
                self._source0 = None
        second: T1 | F1 = self._fill1
        if self._source1 is not None:
            try:
                second = next(self._source1)
            except StopIteration:
                self._source1 = None
        if self._source0 is None and self._source1 is None:
            raise StopIteration
        return first, second

    @tp.override
    def _release(self) -> None:
        self._source0 = self._source1 = None


def chain[T](*iterables: Iterable[T]) -> Chain[T]:
    return Chain(*iterables)


def compress[T](data: Iterable[T], selectors: Iterable[object]) -> Compress[T]:
    return Compress(data, selectors)


def compress_nonzero[T](data: Iterable[T], selectors: Iterable[int]) -> Compress[T]:
    """
    ``Compress`` with integer selectors, nonzero meaning selected.

    Example:
        >>> list(compress_nonzero("ABCD", [0, 2, -1, 0]))
        ['B', 'C']
    """
    return Compress(data, map(NotEqual(0), selectors))


def zip_longest[T0, T1](
    source0: Iterable[T0], source1: Iterable[T1]
) -> ZipFill[T0, T1, None, None]:
    """
    Pair two sources until both are exhausted, using None for the side
    that ran out.

    Example:
        >>> list(zip_longest("abc", [1]))
        [('a', 1), ('b', None), ('c', None)]
    """
    return ZipFill(source0, source1, None, None)
