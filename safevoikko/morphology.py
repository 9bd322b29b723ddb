"""Morphological analysis."""

from __future__ import annotations

from safevoikko._cursor import index_cursor
from safevoikko._marshal import from_foreign, owned_array, owned_string, to_foreign
from safevoikko.handle import Handle
from safevoikko.results import Analysis


def analyze(handle: Handle, word: str) -> list[Analysis]:
    """Analyze the morphology of ``word``.

    Returns one mapping of attribute names to values per reading, in the
    order the engine ranks them. A word the dictionary does not know has no
    readings.
    """
    lib = handle.library

    def read_value(reading: int, name: bytes) -> str:
        ptr = lib.voikko_mor_analysis_value_cstr(reading, name)
        with owned_string(lib.voikko_free_mor_analysis_value_cstr, ptr) as value:
            return value or ""

    def read(reading: int) -> Analysis:
        # key strings belong to the engine
        keys = lib.voikko_mor_analysis_keys(reading)
        return {
            from_foreign(name): read_value(reading, name)
            for name in index_cursor(keys, lambda name: name)
        }

    readings = lib.voikkoAnalyzeWordCstr(handle.pointer, to_foreign(word))
    with owned_array(lib.voikko_free_mor_analysis, readings):
        return list(index_cursor(readings, read))
