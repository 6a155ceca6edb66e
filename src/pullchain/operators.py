"""
Predicate builders for the filtering combinators.
"""

from collections.abc import Callable
from operator import eq, ge, gt, le, lt, ne


def binop_factory[T1, T2](
    op: Callable[[T1, T2], bool],
) -> Callable[[T2], Callable[[T1], bool]]:
    def comparator(rhs: T2, /) -> Callable[[T1], bool]:
        """
        Fix the right operand, returning a one-argument predicate.

        Example:
            >>> from pullchain.single import TakeWhile
            >>> list(TakeWhile([1, 4, 6, 4, 1], LessThan(5)))
            [1, 4]
            >>> IsEqual(5)(6)
            False

        Returns:
            a predicate taking the left operand
        """

        def predicate(lhs: T1, /) -> bool:
            return op(lhs, rhs)

        predicate.__qualname__ = f"{op.__name__}(_, {rhs!r})"
        return predicate

    return comparator


LessThan = binop_factory(lt)
GreaterThan = binop_factory(gt)
LessEqual = binop_factory(le)
GreaterEqual = binop_factory(ge)

IsEqual = binop_factory(eq)
NotEqual = binop_factory(ne)


def Not[T](predicate: Callable[[T], object]) -> Callable[[T], bool]:
    """Negate ``predicate``."""
    return lambda x: not predicate(x)


def Identity[T](obj: T) -> T:
    return obj
