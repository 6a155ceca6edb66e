import itertools as itl
from collections.abc import Iterator

import pytest

from pullchain.replay import Cycle, Product2, cycle, product2
from pullchain.single import ISlice
from pullchain.sources import Count


def test_cycle():
    assert list(ISlice(Cycle([1, 2, 3]), stop=7)) == [1, 2, 3, 1, 2, 3, 1]
    assert list(ISlice(cycle("a"), stop=3)) == ["a", "a", "a"]


def test_cycle_empty_terminates():
    it = Cycle([])
    assert list(it) == []
    assert it.exhausted
    assert it.saved == 0


def test_cycle_streams_first_pass(counting):
    source = counting([1, 2, 3])
    it = Cycle(source)
    assert next(it) == 1
    assert source.pulls == 1
    assert it.saved == 1
    assert list(ISlice(it, stop=5)) == [2, 3, 1, 2, 3]
    assert source.pulls == 4
    assert it.saved == 3


def test_cycle_iterates_source_once(counting):
    source = counting("ab")
    _ = list(ISlice(Cycle(source), stop=100))
    assert source.pulls == 3


def test_product2():
    assert list(Product2([1, 2], ["a", "b"])) == [(1, "a"), (1, "b"), (2, "a"), (2, "b")]
    assert list(product2(range(3), "xy")) == list(itl.product(range(3), "xy"))


@pytest.mark.parametrize(("outer", "inner"), [([], "ab"), ([1, 2], ""), ([], [])])
def test_product2_empty(outer, inner):
    it = Product2(outer, inner)
    assert list(it) == []
    assert next(it, None) is None


def test_product2_materializes_inner_once(counting):
    outer, inner = counting([1, 2, 3]), counting("ab")
    it = Product2(outer, inner)
    assert inner.pulls == 0
    assert next(it) == (1, "a")
    assert inner.pulls == 3
    assert outer.pulls == 1
    assert list(it) == [(1, "b"), (2, "a"), (2, "b"), (3, "a"), (3, "b")]
    assert inner.pulls == 3
    assert outer.pulls == 4


def test_product2_outer_empty_skips_inner(counting):
    inner = counting("ab")
    assert list(Product2([], inner)) == []
    assert inner.pulls == 0


def test_product2_infinite_outer():
    assert list(ISlice(Product2(Count(), "ab"), stop=5)) == [
        (0, "a"),
        (0, "b"),
        (1, "a"),
        (1, "b"),
        (2, "a"),
    ]


class FlakyInner(Iterator[str]):
    """Yields "a", fails once, then yields "b"."""

    def __init__(self) -> None:
        self._steps = iter(["a", ValueError("flaky"), "b"])

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        step = next(self._steps)
        if isinstance(step, Exception):
            raise step
        return step


def test_product2_inner_error_keeps_progress(counting):
    outer = counting([1, 2])
    it = Product2(outer, FlakyInner())
    with pytest.raises(ValueError, match="flaky"):
        _ = next(it)
    assert outer.pulls == 1
    assert list(it) == [(1, "a"), (1, "b"), (2, "a"), (2, "b")]
    assert outer.pulls == 3
