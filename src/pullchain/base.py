"""
Base class shared by every combinator in the package.
"""

from __future__ import annotations

import typing as tp
from abc import ABC, abstractmethod
from collections.abc import Iterator


class PullIterator[T](Iterator[T], ABC):
    """
    Single-pass iterator whose work happens entirely inside ``__next__``.

    Subclasses implement ``_advance``, which either returns the next value
    or raises ``StopIteration``. Once ``StopIteration`` has been raised the
    iterator is latched as exhausted: ``_release`` drops the references to
    any wrapped source and every later call raises ``StopIteration`` again
    without touching a source.

    Example:
        >>> class Countdown(PullIterator[int]):
        ...     def __init__(self, n: int) -> None:
        ...         super().__init__()
        ...         self.n = n
        ...     def _advance(self) -> int:
        ...         if self.n == 0:
        ...             raise StopIteration
        ...         self.n -= 1
        ...         return self.n
        >>> it = Countdown(2)
        >>> list(it)
        [1, 0]
        >>> it.exhausted
        True
        >>> next(it, "done")
        'done'
    """

    def __init__(self) -> None:
        self._exhausted: bool = False

    @property
    def exhausted(self) -> bool:
        """Whether the iterator has signalled end-of-sequence."""
        return self._exhausted

    @abstractmethod
    def _advance(self) -> T: ...

    def _release(self) -> None:
        """Drop references to wrapped sources once exhausted."""

    @tp.override
    def __iter__(self) -> Iterator[T]:
        return self

    @tp.override
    def __next__(self) -> T:
        if self._exhausted:
            raise StopIteration
        try:
            return self._advance()
        except StopIteration:
            self._exhausted = True
            self._release()
            raise

    @tp.override
    def __repr__(self) -> str:
        state = "exhausted" if self._exhausted else "active"
        return f"<{type(self).__name__} ({state})>"
