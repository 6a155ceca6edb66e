"""
Consecutive-run grouping.
"""

from __future__ import annotations

import typing as tp
from collections.abc import Iterable

from pullchain._helpers import empty_iterator, require_callable
from pullchain.base import PullIterator
from pullchain.operators import Identity
from pullchain.wtyping import KeyFunc


class Group[K, T](tp.NamedTuple):
    key: K
    items: list[T]


class GroupBy[T, K](PullIterator[Group[K, T]]):
    """
    Yield one ``Group(key, items)`` per maximal run of consecutive elements
    whose keys compare equal.

    Elements are not grouped globally: a key that reappears after a
    different key starts a new group. ``key`` defaults to the identity and
    is called exactly once per element.

    Example:
        >>> [tuple(g) for g in GroupBy([0, 0, 0, 1, 1, 2, 2, 2, 3])]
        [(0, [0, 0, 0]), (1, [1, 1]), (2, [2, 2, 2]), (3, [3])]
        >>> [g.items for g in GroupBy([0, 1, 0])]
        [[0], [1], [0]]
        >>> [g.key for g in GroupBy(range(7), key=lambda x: x // 3)]
        [0, 1, 2]
    """

    def __init__(self, source: Iterable[T], key: KeyFunc[T, K] | None = None) -> None:
        super().__init__()
        if key is not None:
            require_callable(key, name="key", owner="groupby")
        self._source = iter(source)
        self._key: KeyFunc[T, K] = Identity if key is None else key  # pyright: ignore[reportAssignmentType]
        self._pending: tuple[T, K] | None = None
        self._source_done = False

    @tp.override
    def _advance(self) -> Group[K, T]:
        if self._pending is None:
            if self._source_done:
                raise StopIteration
            first = next(self._source)
            current_key = self._key(first)
        else:
            (first, current_key), self._pending = self._pending, None

        items = [first]
        for item in self._source:
            item_key = self._key(item)
            if item_key != current_key:
                self._pending = (item, item_key)
                break
            items.append(item)
        else:
            self._source_done = True
        return Group(current_key, items)

    @tp.override
    def _release(self) -> None:
        self._source = empty_iterator()


def groupby[T, K](
    iterable: Iterable[T], key: KeyFunc[T, K] | None = None
) -> GroupBy[T, K]:
    return GroupBy(iterable, key)
