"""
Combinators wrapping exactly one source iterator.
"""

from __future__ import annotations

import typing as tp
from collections.abc import Iterable
from operator import add

from pullchain._helpers import empty_iterator, require_callable, require_index
from pullchain.base import PullIterator
from pullchain.defaults import Default, NoDefault
from pullchain.wtyping import BinaryOp, Predicate


class Accumulate[T](PullIterator[T]):
    """
    Running fold of ``source`` with ``combine``.

    The first output is the first input unchanged (or ``initial``, if given),
    every later output is ``combine(previous_output, next_input)``.
    ``combine`` is never called for an empty source.

    Example:
        >>> list(Accumulate([1, 2, 3, 4]))
        [1, 3, 6, 10]
        >>> list(Accumulate([3, 1, 4, 1, 5], max))
        [3, 3, 4, 4, 5]
        >>> list(Accumulate([], initial=100))
        [100]
    """

    def __init__(
        self,
        source: Iterable[T],
        combine: BinaryOp[T] = add,
        *,
        initial: T | tp.Literal[Default.NoDefault] = NoDefault,
    ) -> None:
        super().__init__()
        require_callable(combine, name="combine", owner="accumulate")
        self._source = iter(source)
        self._combine = combine
        self._total: T | None = None
        self._started = False
        self._initial = initial

    @tp.override
    def _advance(self) -> T:
        if not self._started:
            if self._initial is NoDefault:
                self._total = next(self._source)
            else:
                self._total, self._initial = self._initial, NoDefault
            self._started = True
            return self._total
        self._total = self._combine(tp.cast(T, self._total), next(self._source))
        return self._total

    @tp.override
    def _release(self) -> None:
        self._source = empty_iterator()


class DropWhile[T](PullIterator[T]):
    """
    Skip the longest prefix satisfying ``predicate``, then yield the rest
    without testing it again.

    Example:
        >>> list(DropWhile([1, 4, 6, 4, 1], lambda x: x < 5))
        [6, 4, 1]
        >>> list(DropWhile([1, 2], lambda x: x < 5))
        []
    """

    def __init__(self, source: Iterable[T], predicate: Predicate[T]) -> None:
        super().__init__()
        require_callable(predicate, name="predicate", owner="dropwhile")
        self._source = iter(source)
        self._predicate = predicate
        self._dropping = True

    @property
    def dropping(self) -> bool:
        return self._dropping

    @tp.override
    def _advance(self) -> T:
        if not self._dropping:
            return next(self._source)
        while True:
            item = next(self._source)
            if not self._predicate(item):
                self._dropping = False
                return item

    @tp.override
    def _release(self) -> None:
        self._source = empty_iterator()


class TakeWhile[T](PullIterator[T]):
    """
    Yield elements while ``predicate`` holds.

    The first failing element is consumed and discarded, and the iterator
    stays exhausted from then on even if later elements would pass.

    Example:
        >>> it = iter([1, 4, 6, 4, 1])
        >>> list(TakeWhile(it, lambda x: x < 5))
        [1, 4]
        >>> list(it)
        [4, 1]
    """

    def __init__(self, source: Iterable[T], predicate: Predicate[T]) -> None:
        super().__init__()
        require_callable(predicate, name="predicate", owner="takewhile")
        self._source = iter(source)
        self._predicate = predicate

    @tp.override
    def _advance(self) -> T:
        item = next(self._source)
        if self._predicate(item):
            return item
        raise StopIteration

    @tp.override
    def _release(self) -> None:
        self._source = empty_iterator()


class FilterFalse[T](PullIterator[T]):
    """
    Yield the elements for which ``predicate`` is falsy.

    Example:
        >>> list(FilterFalse(range(10), lambda x: x % 3))
        [0, 3, 6, 9]
    """

    def __init__(self, source: Iterable[T], predicate: Predicate[T]) -> None:
        super().__init__()
        require_callable(predicate, name="predicate", owner="filterfalse")
        self._source = iter(source)
        self._predicate = predicate

    @tp.override
    def _advance(self) -> T:
        while True:
            item = next(self._source)
            if not self._predicate(item):
                return item

    @tp.override
    def _release(self) -> None:
        self._source = empty_iterator()


class ISlice[T](PullIterator[T]):
    """
    Yield the source elements at indices ``start, start + step, ...``
    below ``stop`` (unbounded when ``stop`` is None).

    Elements between two emitted indices are consumed from the source.
    Once the next index to emit reaches ``stop`` nothing more is consumed.

    Raises:
        ValueError: If ``start`` or ``stop`` is negative, or ``step`` is
            smaller than 1.

    Example:
        >>> list(ISlice(range(10), 2, 6, 2))
        [2, 4]
        >>> list(ISlice("ABCDEFG", stop=2))
        ['A', 'B']
        >>> list(ISlice("ABCDEFG", 2, None))
        ['C', 'D', 'E', 'F', 'G']
        >>> ISlice("ABC", step=0)
        Traceback (most recent call last):
            ...
        ValueError: Step for islice() must be a positive integer or None, got 0
    """

    def __init__(
        self,
        source: Iterable[T],
        start: int | None = 0,
        stop: int | None = None,
        step: int | None = 1,
    ) -> None:
        super().__init__()
        require_index(start, name="start", owner="islice")
        require_index(stop, name="stop", owner="islice")
        if step is not None and (
            isinstance(step, bool) or not isinstance(step, int) or step < 1
        ):
            raise ValueError(
                f"Step for islice() must be a positive integer or None, got {step!r}"
            )
        self._source = iter(source)
        self._stop = stop
        self._step = 1 if step is None else step
        self._position = 0
        self._target = 0 if start is None else start

    @tp.override
    def _advance(self) -> T:
        if self._stop is not None and self._target >= self._stop:
            raise StopIteration
        while self._position < self._target:
            _ = next(self._source)
            self._position += 1
        item = next(self._source)
        self._position += 1
        self._target += self._step
        return item

    @tp.override
    def _release(self) -> None:
        self._source = empty_iterator()


class Interpose[T, S](PullIterator[T | S]):
    """
    Yield the source elements with ``separator`` between each pair.

    One element of look-ahead decides whether a separator is due, so there
    is never a leading or trailing separator.

    Example:
        >>> list(Interpose(0, [1, 2, 3]))
        [1, 0, 2, 0, 3]
        >>> "".join(Interpose("-", "abc"))
        'a-b-c'
        >>> list(Interpose(0, []))
        []
    """

    def __init__(self, separator: S, source: Iterable[T]) -> None:
        super().__init__()
        self._separator = separator
        self._source = iter(source)
        self._pending: T | None = None
        self._has_pending = False
        self._separator_due = False

    @tp.override
    def _advance(self) -> T | S:
        if self._separator_due:
            self._separator_due = False
            return self._separator
        if self._has_pending:
            current = tp.cast(T, self._pending)
        else:
            current = next(self._source)
        try:
            self._pending = next(self._source)
        except StopIteration:
            self._pending, self._has_pending = None, False
            self._source = empty_iterator()
        else:
            self._has_pending = True
        self._separator_due = self._has_pending
        return current

    @tp.override
    def _release(self) -> None:
        self._source = empty_iterator()


def dropwhile[T](predicate: Predicate[T], iterable: Iterable[T]) -> DropWhile[T]:
    return DropWhile(iterable, predicate)


def takewhile[T](predicate: Predicate[T], iterable: Iterable[T]) -> TakeWhile[T]:
    return TakeWhile(iterable, predicate)


def filterfalse[T](predicate: Predicate[T], iterable: Iterable[T]) -> FilterFalse[T]:
    return FilterFalse(iterable, predicate)


@tp.overload
def islice[T](iterable: Iterable[T], stop: int | None, /) -> ISlice[T]: ...
@tp.overload
def islice[T](
    iterable: Iterable[T], start: int | None, stop: int | None, step: int | None = 1, /
) -> ISlice[T]: ...
def islice[T](iterable: Iterable[T], *args: int | None) -> ISlice[T]:
    """
    Positional form mirroring ``itertools.islice``.

    Example:
        >>> list(islice("ABCDEFG", 2))
        ['A', 'B']
        >>> list(islice("ABCDEFG", 0, None, 2))
        ['A', 'C', 'E', 'G']
    """
    match args:
        case (stop,):
            return ISlice(iterable, 0, stop)
        case (start, stop):
            return ISlice(iterable, start, stop)
        case (start, stop, step):
            return ISlice(iterable, start, stop, step)
        case _:
            raise TypeError(f"islice expected 2 to 4 arguments, got {len(args) + 1}")
