"""Tokenization of text into words, punctuation and whitespace."""

from __future__ import annotations

import ctypes
import logging
from ctypes import c_size_t

from safevoikko._cursor import drive
from safevoikko._marshal import byte_length, from_foreign, to_foreign
from safevoikko.errors import InternalEngineError
from safevoikko.handle import Handle
from safevoikko.results import Token, TokenType

logger = logging.getLogger(__name__)


def _token_type(kind: int) -> TokenType:
    try:
        return TokenType(kind)
    except ValueError:
        logger.warning("Unknown token type %d from engine, treating as UNKNOWN", kind)
        return TokenType.UNKNOWN


def tokenize(handle: Handle, text: str) -> list[Token]:
    """Split ``text`` into tokens.

    The tokens cover ``text`` without gaps or overlaps.
    """
    lib = handle.library
    encoded = to_foreign(text)
    buf = ctypes.create_string_buffer(encoded)
    base = ctypes.addressof(buf)
    total = len(encoded)
    token_len = c_size_t()

    # cursor: (offset in characters, offset in bytes)
    def step(cursor):
        chars, offset = cursor
        kind = lib.voikkoNextTokenCstr(
            handle.pointer, base + offset, total - offset, ctypes.pointer(token_len))
        if kind == TokenType.NONE:
            return None
        length = token_len.value
        if length == 0:
            raise InternalEngineError(f"zero-length token at character {chars}")
        size = byte_length(text, chars, length)
        token = Token(from_foreign(encoded[offset:offset + size]), _token_type(kind), chars)
        return token, size

    def advance(cursor, result):
        token, size = result
        return cursor[0] + len(token.text), cursor[1] + size

    return [token for token, _ in drive(
        (0, 0), step, advance, exhausted=lambda cursor: cursor[1] >= total)]
