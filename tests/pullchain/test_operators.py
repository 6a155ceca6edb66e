from operator import eq, ge, gt, le, lt, ne

import pytest

from pullchain.operators import (
    GreaterEqual,
    GreaterThan,
    Identity,
    IsEqual,
    LessEqual,
    LessThan,
    Not,
    NotEqual,
)


@pytest.mark.parametrize(
    ("factory", "op"),
    [
        (LessThan, lt),
        (GreaterThan, gt),
        (LessEqual, le),
        (GreaterEqual, ge),
        (IsEqual, eq),
        (NotEqual, ne),
    ],
)
@pytest.mark.parametrize("lhs", [0, 1, 2])
def test_comparators(factory, op, lhs: int):
    assert factory(1)(lhs) == op(lhs, 1)


def test_comparator_type_error():
    with pytest.raises(TypeError, match="not supported"):
        _ = LessThan(1)("5")


def test_comparator_name():
    assert LessThan(3).__qualname__ == "lt(_, 3)"


def test_Not():
    assert Not(LessThan(3))(5)
    assert not Not(bool)(1)


def test_Identity():
    obj = object()
    assert Identity(obj) is obj
