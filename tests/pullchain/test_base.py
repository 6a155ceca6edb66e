import pytest

from pullchain.base import PullIterator
from pullchain.chain import Iter
from pullchain.defaults import Exhausted, NoDefault
from pullchain.grouping import Group, GroupBy
from pullchain.multi import Chain, Compress, Zip, ZipFill
from pullchain.replay import Cycle, Product2
from pullchain.single import Accumulate, DropWhile, FilterFalse, Interpose, ISlice, TakeWhile
from pullchain.sources import Repeat
from pullchain.tee import tee


class Ones(PullIterator[int]):
    def __init__(self, n: int) -> None:
        super().__init__()
        self.n = n
        self.released = False

    def _advance(self) -> int:
        if self.n == 0:
            raise StopIteration
        self.n -= 1
        return 1

    def _release(self) -> None:
        self.released = True


def test_iter_returns_self():
    it = Ones(2)
    assert iter(it) is it


def test_exhaustion_latches_and_releases():
    it = Ones(1)
    assert not it.exhausted
    assert list(it) == [1]
    assert it.exhausted
    assert it.released
    it.n = 5
    with pytest.raises(StopIteration):
        _ = next(it)
    assert next(it, None) is None


def test_repr():
    it = Ones(0)
    assert repr(it) == "<Ones (active)>"
    _ = list(it)
    assert repr(it) == "<Ones (exhausted)>"


def test_abstract():
    with pytest.raises(TypeError):
        _ = PullIterator()  # pyright: ignore[reportAbstractUsage]


@pytest.mark.parametrize(
    "make",
    [
        lambda src: Accumulate(src),
        lambda src: DropWhile(src, lambda _: False),
        lambda src: TakeWhile(src, lambda _: True),
        lambda src: FilterFalse(src, lambda _: False),
        lambda src: ISlice(src),
        lambda src: Interpose(0, src),
        lambda src: GroupBy(src),
        lambda src: Chain(src),
        lambda src: Compress(src, Repeat(True)),
        lambda src: Zip(src, Repeat(0)),
        lambda src: ZipFill(src, []),
        lambda src: Product2(src, [0]),
        lambda src: tee(src, 1)[0],
    ],
)
def test_no_resurrection(make, resurrecting):
    # the source yields again after its first StopIteration
    it = make(resurrecting())
    assert list(it)
    with pytest.raises(StopIteration):
        _ = next(it)
    with pytest.raises(StopIteration):
        _ = next(it)


def test_cycle_does_not_restart_source(resurrecting):
    source = resurrecting()
    assert list(ISlice(Cycle(source), stop=4)) == [1, 1, 1, 1]
    assert source.calls == 2


@pytest.mark.parametrize(
    ("make", "expected"),
    [
        (lambda: Chain([Exhausted], [], [NoDefault, 1]), [Exhausted, NoDefault, 1]),
        (
            lambda: ISlice(Cycle([1, Exhausted, 2]), stop=6),
            [1, Exhausted, 2, 1, Exhausted, 2],
        ),
        (lambda: ISlice(Cycle([NoDefault]), stop=3), [NoDefault] * 3),
        (lambda: tee([Exhausted, NoDefault], 1)[0], [Exhausted, NoDefault]),
        (
            lambda: Interpose(0, [Exhausted, NoDefault, Exhausted]),
            [Exhausted, 0, NoDefault, 0, Exhausted],
        ),
        (
            lambda: ZipFill([Exhausted, NoDefault], [Exhausted]),
            [(Exhausted, Exhausted), (NoDefault, None)],
        ),
        (
            lambda: ZipFill([1], [NoDefault, Exhausted]),
            [(1, NoDefault), (None, Exhausted)],
        ),
        (
            lambda: GroupBy([Exhausted, Exhausted, NoDefault]),
            [Group(Exhausted, [Exhausted, Exhausted]), Group(NoDefault, [NoDefault])],
        ),
        (
            lambda: Accumulate([NoDefault, 1, Exhausted], lambda _, b: b),
            [NoDefault, 1, Exhausted],
        ),
        (lambda: Product2([Exhausted], [NoDefault]), [(Exhausted, NoDefault)]),
    ],
)
def test_default_members_are_ordinary_values(make, expected):
    assert list(make()) == expected


def test_tee_second_cursor_sees_default_members():
    a, b = tee([Exhausted, NoDefault, Exhausted])
    assert list(a) == [Exhausted, NoDefault, Exhausted]
    assert list(b) == [Exhausted, NoDefault, Exhausted]


def test_last_returns_default_member_from_source():
    assert Iter([1, Exhausted]).last(0) is Exhausted
    assert Iter([NoDefault]).last() is NoDefault
