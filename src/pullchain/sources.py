"""
Leaf iterators that do not wrap another iterator.
"""

from __future__ import annotations

import typing as tp

from pullchain.base import PullIterator
from pullchain.wtyping import SupportsAdd


class Count[TNum: SupportsAdd](PullIterator[TNum]):
    """
    Arithmetic progression ``start, start + step, start + 2 * step, ...``.

    Always infinite; limit it with ``TakeWhile`` or ``ISlice``.

    Example:
        >>> from pullchain.single import ISlice
        >>> list(ISlice(Count(10, 5), stop=4))
        [10, 15, 20, 25]
        >>> list(ISlice(Count(0.5, 0.25), stop=3))
        [0.5, 0.75, 1.0]
    """

    def __init__(self, start: TNum = 0, step: TNum = 1) -> None:
        super().__init__()
        self._current = start
        self._step = step

    @tp.override
    def _advance(self) -> TNum:
        value = self._current
        self._current = self._current + self._step
        return value

    @tp.override
    def __repr__(self) -> str:
        return f"Count({self._current!r}, {self._step!r})"


class Repeat[T](PullIterator[T]):
    """
    Yield ``value`` ``times`` times, or forever when ``times`` is None
    or negative.

    Example:
        >>> list(Repeat("a", 3))
        ['a', 'a', 'a']
        >>> list(Repeat("a", 0))
        []
        >>> Repeat("a").remaining is None
        True
    """

    def __init__(self, value: T, times: int | None = None) -> None:
        super().__init__()
        if times is not None and not isinstance(times, int):
            raise TypeError(f"repeat() times must be an int or None, not {times!r}")
        self._value = value
        self._remaining = None if times is None or times < 0 else times

    @property
    def remaining(self) -> int | None:
        """Number of values left to yield, None if unbounded."""
        return self._remaining

    @tp.override
    def _advance(self) -> T:
        if self._remaining is None:
            return self._value
        if self._remaining == 0:
            raise StopIteration
        self._remaining -= 1
        return self._value

    @tp.override
    def __repr__(self) -> str:
        if self._remaining is None:
            return f"Repeat({self._value!r})"
        return f"Repeat({self._value!r}, {self._remaining})"


def count[TNum: SupportsAdd](start: TNum = 0, step: TNum = 1) -> Count[TNum]:
    return Count(start, step)


def repeat[T](value: T, times: int | None = None) -> Repeat[T]:
    return Repeat(value, times)
