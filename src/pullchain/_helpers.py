from collections import deque
from collections.abc import Iterator
from itertools import chain


def prepend[T](*val: T, to: Iterator[T]) -> Iterator[T]:
    return chain(val, to)


consume = deque[object](maxlen=0).extend


def require_callable(func: object, *, name: str, owner: str) -> None:
    if not callable(func):
        raise TypeError(
            f"{owner}() {name} must be callable, not {type(func).__name__!r}"
        )


def require_index(value: int | None, *, name: str, owner: str) -> None:
    """Reject anything that is not None or a non-negative int."""
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(
            f"{name.capitalize()} argument for {owner}() must be None or "
            f"an integer: 0 <= x <= sys.maxsize, got {value!r}"
        )


def empty_iterator[T]() -> Iterator[T]:
    return iter(())
