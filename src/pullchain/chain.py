# pyright: reportImportCycles=false
from __future__ import annotations

import typing as tp
from collections.abc import Callable, Iterable, Iterator
from functools import wraps
from operator import add

from pullchain._helpers import consume, prepend
from pullchain.defaults import Default, Exhausted, NoDefault
from pullchain.grouping import Group, GroupBy
from pullchain.multi import Chain, Compress, Zip, ZipFill, compress_nonzero
from pullchain.replay import Cycle, Product2
from pullchain.single import (
    Accumulate,
    DropWhile,
    FilterFalse,
    Interpose,
    ISlice,
    TakeWhile,
)
from pullchain.sources import Count, Repeat
from pullchain.tee import tee
from pullchain.wtyping import BinaryOp, KeyFunc, Predicate, SupportsAdd


class MethodKind[T]:
    @staticmethod
    def consumer[**P, R](
        func: Callable[tp.Concatenate[Iterable[T], P], R],
    ) -> Callable[tp.Concatenate[Iter[T], P], R]:
        @wraps(func)
        def inner(self: Iter[T], *args: P.args, **kwargs: P.kwargs) -> R:
            return func(self, *args, **kwargs)

        return inner

    @staticmethod
    def augmentor[**P, R](
        func: Callable[tp.Concatenate[Iterable[T], P], Iterable[R]],
    ) -> Callable[tp.Concatenate[Iter[T], P], Iter[R]]:
        @wraps(func)
        def inner(self: Iter[T], *args: P.args, **kwargs: P.kwargs) -> Iter[R]:
            return Iter(func(self, *args, **kwargs))

        return inner


@tp.final
class Iter[T](Iterator[T]):
    """
    Iterator over a given iterable, providing method chaining over the
    combinators of this package.

    Every method returning ``Iter`` takes ownership of ``self``: advance the
    result, not the original.

    Args:
        iterable: an iterable that is to be turned into an Iter

    Example:
        >>> (
        ...     Iter.count(1)
        ...     .takewhile(lambda x: x < 10)
        ...     .compress(Iter.repeat(True).interpose(False))
        ...     .accumulate()
        ...     .to_list()
        ... )
        [1, 4, 9, 16, 25]
    """

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        self.iterable = iterable
        self._iter: Iterator[T] = (
            iter(iterable) if not isinstance(iterable, Iter) else iterable._iter
        )

    @staticmethod
    def count[TNum: SupportsAdd](start: TNum = 0, step: TNum = 1) -> Iter[TNum]:
        """
        Infinite arithmetic progression, see ``pullchain.sources.Count``.

        Example:
            >>> Iter.count(10, 2).slice(stop=3).to_list()
            [10, 12, 14]
        """
        return Iter(Count(start, step))

    @staticmethod
    def repeat[V](value: V, times: int | None = None) -> Iter[V]:
        """
        Repeat ``value``, see ``pullchain.sources.Repeat``.

        Example:
            >>> Iter.repeat("x", 3).to_list()
            ['x', 'x', 'x']
        """
        return Iter(Repeat(value, times))

    @tp.overload
    def peek_next_value(
        self, default: tp.Literal[Default.Exhausted] = Exhausted
    ) -> T | tp.Literal[Default.Exhausted]: ...
    @tp.overload
    def peek_next_value[TDefault](self, default: TDefault) -> T | TDefault: ...
    @tp.no_type_check
    def peek_next_value[TDefault](self, default: TDefault = Exhausted) -> T | TDefault:
        """Peek the next value that would be yielded, if there is element left to yield.
        Otherwise, return default.

        Example:
            >>> itbl = Iter([1, 2])
            >>> itbl.peek_next_value()
            1
            >>> itbl.to_list()
            [1, 2]
            >>> itbl.peek_next_value()
            <Default.Exhausted: 1>
        """
        item = default
        for item in self._iter:
            self._iter = prepend(item, to=self._iter)
            break
        return item

    @tp.overload
    def next(self, default: tp.Literal[Default.NoDefault] = NoDefault) -> T: ...
    @tp.overload
    def next[TDefault](self, default: TDefault) -> T | TDefault: ...
    def next[TDefault](self, default: TDefault = NoDefault) -> T | TDefault:
        """next value in the iterator.

        Returns:
            next value or default

        Example:
            >>> itbl = Iter([1])
            >>> itbl.next()
            1
            >>> itbl.next(default=-1)
            -1
            >>> itbl.next()
            Traceback (most recent call last):
                ...
            StopIteration
        """
        return next(self) if default is NoDefault else next(self, default)

    @tp.override
    def __iter__(self) -> Iterator[T]:
        return self

    @tp.override
    def __next__(self) -> T:
        return next(self._iter)

    # Laziness preserving combinators.

    def accumulate(
        self,
        func: BinaryOp[T] = add,
        *,
        initial: T | tp.Literal[Default.NoDefault] = NoDefault,
    ) -> Iter[T]:
        """
        Running fold, see ``pullchain.single.Accumulate``.

        Example:
            >>> Iter([1, 2, 3]).accumulate().to_list()
            [1, 3, 6]
        """
        return Iter(Accumulate(self._iter, func, initial=initial))

    def chain[V](self, *others: Iterable[V]) -> Iter[T | V]:
        """
        Append ``others`` after self.

        Example:
            >>> Iter([1, 2]).chain([], [3]).to_list()
            [1, 2, 3]
        """
        return Iter(Chain(self._iter, *others))

    def chain_from_iter[V](self, others: Iterable[Iterable[V]]) -> Iter[T | V]:
        return Iter(Chain.from_iterable(prepend(self._iter, to=iter(others))))

    compress = MethodKind[T].augmentor(Compress)
    """see pullchain.multi.Compress"""

    def compress_nonzero(self, selectors: Iterable[int]) -> Iter[T]:
        return Iter(compress_nonzero(self._iter, selectors))

    dropwhile = MethodKind[T].augmentor(DropWhile)
    """see pullchain.single.DropWhile"""
    takewhile = MethodKind[T].augmentor(TakeWhile)
    """see pullchain.single.TakeWhile"""

    def filter(self, predicate: Predicate[T] | None, *, invert: bool = False) -> Iter[T]:
        """
        Filter self based on predicate.

        Example:
            >>> Iter([1, 2, 3, 4]).filter(lambda x: x % 2 == 0).to_list()
            [2, 4]
            >>> Iter([1, 2, 3, 4]).filter(lambda x: x % 2 == 0, invert=True).to_list()
            [1, 3]
        """
        pred: Predicate[T] = bool if predicate is None else predicate
        if invert:
            return Iter(FilterFalse(self._iter, pred))
        return Iter(filter(pred, self._iter))

    def map[R](self, func: Callable[[T], R]) -> Iter[R]:
        return Iter(map(func, self._iter))

    def groupby[K](self, key: KeyFunc[T, K] | None = None) -> Iter[Group[K, T]]:
        """
        Group consecutive runs, see ``pullchain.grouping.GroupBy``.

        Example:
            >>> Iter("aabccc").groupby().map(lambda g: (g.key, len(g.items))).to_list()
            [('a', 2), ('b', 1), ('c', 3)]
        """
        return Iter(GroupBy(self._iter, key))

    def interpose[S](self, separator: S) -> Iter[T | S]:
        """
        Example:
            >>> Iter("abc").interpose(", ").feed_into("".join)
            'a, b, c'
        """
        return Iter(Interpose(separator, self._iter))

    def slice(
        self, *, start: int | None = 0, stop: int | None = None, step: int | None = 1
    ) -> Iter[T]:
        """
        see ``pullchain.single.ISlice``

        Example:
            >>> Iter(range(10)).slice(start=2, stop=6, step=2).to_list()
            [2, 4]
        """
        return Iter(ISlice(self._iter, start, stop, step))

    def zip_with[T1](self, other: Iterable[T1]) -> Iter[tuple[T, T1]]:
        return Iter(Zip(self._iter, other))

    def zip_fill[T1, F0, F1](
        self, other: Iterable[T1], fill0: F0 = None, fill1: F1 = None
    ) -> Iter[tuple[T | F0, T1 | F1]]:
        """
        Example:
            >>> Iter([1, 2, 3]).zip_fill("ab", 0, "z").to_list()
            [(1, 'a'), (2, 'b'), (3, 'z')]
        """
        return Iter(ZipFill(self._iter, other, fill0, fill1))

    def zip_longest[T1](self, other: Iterable[T1]) -> Iter[tuple[T | None, T1 | None]]:
        return self.zip_fill(other, None, None)

    def product_with[T1](self, other: Iterable[T1]) -> Iter[tuple[T, T1]]:
        """
        Example:
            >>> Iter([1, 2]).product_with("ab").to_list()
            [(1, 'a'), (1, 'b'), (2, 'a'), (2, 'b')]
        """
        return Iter(Product2(self._iter, other))

    def cycle(self) -> Iter[T]:
        """
        Example:
            >>> Iter([1, 2, 3]).cycle().slice(stop=7).to_list()
            [1, 2, 3, 1, 2, 3, 1]
        """
        return Iter(Cycle(self._iter))

    def tee(self, n: int = 2) -> tuple[Iter[T], ...]:
        """
        Split into ``n`` independent Iters, see ``pullchain.tee.tee``.

        Example:
            >>> evens, odds = Iter(range(6)).tee()
            >>> evens.slice(step=2).to_list(), odds.slice(start=1, step=2).to_list()
            ([0, 2, 4], [1, 3, 5])
        """
        return tuple(Iter(cursor) for cursor in tee(self._iter, n))

    # Consumers.

    to_list = MethodKind[T].consumer(list)
    """convert to list"""

    def feed_into[R, **P](
        self,
        func: Callable[tp.Concatenate[Iterable[T], P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """
        Apply a function which takes the whole of self as its first argument.

        Example:
            >>> Iter([("a", 0), ("b", 1)]).feed_into(dict)
            {'a': 0, 'b': 1}
        """
        return func(self, *args, **kwargs)

    @tp.overload
    def first[TDefault](self, default: tp.Literal[Default.NoDefault]) -> T: ...
    @tp.overload
    def first[TDefault](self, default: TDefault = Exhausted) -> T | TDefault: ...
    def first[TDefault](self, default: TDefault = Exhausted) -> T | TDefault:
        """
        Return the first item of self, or default if Iterable is empty.

        Example:
            >>> Iter([1, 2]).first()
            1
            >>> Iter([]).first()
            <Default.Exhausted: 1>
        """
        return self.next(default)

    @tp.overload
    def last[TDefault](self, default: tp.Literal[Default.NoDefault]) -> T: ...
    @tp.overload
    def last[TDefault](self, default: TDefault = Exhausted) -> T | TDefault: ...
    def last[TDefault](self, default: TDefault = Exhausted) -> T | TDefault:
        """
        Return the last item of self, or default if Iterable is empty.

        Example:
            >>> Iter.count().takewhile(lambda x: x < 5).last()
            4
            >>> Iter([]).last(0)
            0
        """
        found = False
        item: T | None = None
        for item in self:
            found = True
        if found:
            return tp.cast(T, item)
        if default is NoDefault:
            raise StopIteration
        return default

    def exhaust(self) -> None:
        """
        Consume the remaining items.

        Example:
            >>> itbl = Iter(range(3))
            >>> itbl.exhaust()
            >>> itbl.to_list()
            []
        """
        consume(self)
