"""Generic driver for the engine's "next unit from cursor" protocols."""

from __future__ import annotations

from typing import Callable, Iterator, Optional, TypeVar

C = TypeVar("C")
R = TypeVar("R")


def _never(_) -> bool:
    return False


def drive(
    cursor: C,
    step: Callable[[C], Optional[R]],
    advance: Callable[[C, R], C],
    is_last: Callable[[R], bool] = _never,
    exhausted: Callable[[C], bool] = _never,
) -> Iterator[R]:
    """Turn a cursor-based engine source into a lazy sequence.

    ``step`` returns ``None`` for the sentinel, which is never yielded.
    ``is_last`` marks a result that is yielded but ends the sequence.
    ``exhausted`` stops before calling the engine at all.
    """
    while not exhausted(cursor):
        result = step(cursor)
        if result is None:
            return
        yield result
        if is_last(result):
            return
        cursor = advance(cursor, result)


def index_cursor(array, read: Callable[[object], R]) -> Iterator[R]:
    """Walk a NULL-terminated pointer array, reading each element."""
    if not array:
        return iter(())

    def step(i: int) -> Optional[R]:
        item = array[i]
        # NULL reads back as None; b"" is a valid element
        if item is None:
            return None
        return read(item)

    return drive(0, step, lambda i, _: i + 1)
