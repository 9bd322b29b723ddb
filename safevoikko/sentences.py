"""Sentence boundary detection."""

from __future__ import annotations

import ctypes
import logging
from ctypes import c_size_t

from safevoikko._cursor import drive
from safevoikko._marshal import byte_length, to_foreign
from safevoikko.errors import InternalEngineError
from safevoikko.handle import Handle
from safevoikko.results import Sentence, SentenceType

logger = logging.getLogger(__name__)


def _sentence_type(kind: int) -> SentenceType:
    try:
        return SentenceType(kind)
    except ValueError:
        logger.warning("Unknown sentence type %d from engine, treating as NONE", kind)
        return SentenceType.NONE


def split_sentences(handle: Handle, text: str) -> list[Sentence]:
    """Split ``text`` into sentences.

    Each step hands the engine the rest of the text and gets back the length
    (in characters) of the sentence starting there, together with how likely
    it is that another sentence starts right after it. The last sentence
    carries ``SentenceType.NONE``.
    """
    lib = handle.library
    encoded = to_foreign(text)
    buf = ctypes.create_string_buffer(encoded)
    base = ctypes.addressof(buf)
    total = len(encoded)
    sentence_len = c_size_t()

    def step(cursor):
        chars, offset = cursor
        kind = _sentence_type(lib.voikkoNextSentenceStartCstr(
            handle.pointer, base + offset, total - offset, ctypes.pointer(sentence_len)))
        length = sentence_len.value
        if length == 0:
            if kind == SentenceType.NONE:
                return None
            raise InternalEngineError(f"zero-length sentence at character {chars}")
        return Sentence(text[chars:chars + length], kind), byte_length(text, chars, length)

    def advance(cursor, result):
        sentence, size = result
        return cursor[0] + len(sentence.text), cursor[1] + size

    return [sentence for sentence, _ in drive(
        (0, 0), step, advance,
        is_last=lambda result: result[0].next_start_type == SentenceType.NONE,
        exhausted=lambda cursor: cursor[1] >= total)]
