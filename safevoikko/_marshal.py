"""Conversions between Python strings and the engine's C strings.

Everything the engine hands back is copied into Python objects before the
engine memory is released. Buffers the engine allocates for the caller are
wrapped in context managers so that they are freed exactly once, on every
exit path.
"""

from __future__ import annotations

import ctypes
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, Union

from safevoikko._cursor import index_cursor
from safevoikko.errors import EncodingError, InternalEngineError

ENCODING = "utf-8"

Raw = Union[bytes, int, None]


def to_foreign(s: Optional[str]) -> Optional[bytes]:
    """Encode ``s`` for the engine. ``None`` passes through as NULL."""
    if s is None:
        return None
    if "\0" in s:
        raise EncodingError(f"embedded NUL character in {s!r}")
    try:
        return s.encode(ENCODING)
    except UnicodeEncodeError as e:
        raise EncodingError(f"cannot encode {s!r} as UTF-8: {e.reason}") from e


def from_foreign(raw: Raw) -> str:
    """Copy an engine string into an owned ``str``.

    ``raw`` is either the bytes ctypes already copied for a ``c_char_p``
    result or the address of an engine buffer (``c_void_p`` result).
    Bytes that are not valid UTF-8 raise ``InternalEngineError``.
    """
    if not raw:
        return ""
    if isinstance(raw, int):
        raw = ctypes.string_at(raw)
    try:
        return raw.decode(ENCODING)
    except UnicodeDecodeError as e:
        raise InternalEngineError(f"engine returned invalid UTF-8 {raw!r}: {e.reason}") from e


def byte_length(text: str, start: int, count: int) -> int:
    """UTF-8 width of ``count`` characters of ``text`` starting at ``start``.

    Engine lengths are in characters, buffers are sliced in bytes.
    """
    return len(text[start:start + count].encode(ENCODING))


def read_string_array(array) -> list[str]:
    """Read a NULL-terminated ``char **`` into a list."""
    return list(index_cursor(array, from_foreign))


@contextmanager
def owned_string(free: Callable[[int], None], address: Optional[int]) -> Iterator[Optional[str]]:
    """Yield the copy of an engine-allocated string, then free it."""
    if not address:
        yield None
        return
    try:
        yield from_foreign(address)
    finally:
        free(address)


@contextmanager
def owned_array(free: Callable, array) -> Iterator:
    """Yield an engine-allocated NULL-terminated array, then free it."""
    try:
        yield array
    finally:
        if array:
            free(array)
