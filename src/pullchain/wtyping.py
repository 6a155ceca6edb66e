import typing as tp
from collections.abc import Callable


@tp.runtime_checkable
class SupportsAdd(tp.Protocol):
    def __add__(self, other: tp.Any, /) -> tp.Any: ...  # pyright: ignore[reportAny]  # noqa: ANN401


type Predicate[T] = Callable[[T], object]
type KeyFunc[T, K] = Callable[[T], K]
type BinaryOp[T] = Callable[[T, T], T]
