from collections.abc import Iterable, Iterator

import pytest


class CountingSource[T](Iterator[T]):
    """Iterator recording how many times it was advanced."""

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iter = iter(iterable)
        self.pulls = 0
        self.exhausted = False

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        self.pulls += 1
        try:
            return next(self._iter)
        except StopIteration:
            self.exhausted = True
            raise


class Resurrecting(Iterator[int]):
    """Badly behaved iterator that yields again after signalling the end."""

    def __init__(self) -> None:
        self.calls = 0

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        self.calls += 1
        if self.calls == 2:
            raise StopIteration
        return self.calls


@pytest.fixture
def counting():
    return CountingSource


@pytest.fixture
def integers_from_0_to_1000() -> list[int]:
    return list(range(0, 1_001))


@pytest.fixture
def resurrecting():
    return Resurrecting
