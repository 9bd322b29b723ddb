"""ctypes declarations for the libvoikko C API."""

from __future__ import annotations

import ctypes
import ctypes.util
import logging
import os
import platform
import threading
from ctypes import (
    POINTER,
    c_char_p,
    c_int,
    c_size_t,
    c_void_p,
)
from typing import Optional

from safevoikko.errors import LibraryNotFoundError

logger = logging.getLogger(__name__)

LIBRARY_ENV_VAR = "VOIKKO_LIBRARY"


# ── Library loading ──────────────────────────────────────────────

def _default_name() -> str:
    system = platform.system()
    if system == "Darwin":
        return "libvoikko.1.dylib"
    elif system == "Windows":
        return "libvoikko-1.dll"
    return "libvoikko.so.1"


def find_library() -> str:
    """Find the libvoikko shared library."""
    # Check env var first
    env_path = os.environ.get(LIBRARY_ENV_VAR)
    if env_path and os.path.isfile(env_path):
        logger.debug("Using libvoikko from %s=%s", LIBRARY_ENV_VAR, env_path)
        return env_path

    found = ctypes.util.find_library("voikko")
    if found:
        return found

    # Fallback: let the dynamic loader search system paths
    return _default_name()


# ── Function signatures ─────────────────────────────────────────

_STRING_ARRAY = POINTER(c_char_p)
_POINTER_ARRAY = POINTER(c_void_p)

_PROTOTYPES = {
    "voikkoInit": ([POINTER(c_char_p), c_char_p, c_char_p], c_void_p),
    "voikkoTerminate": ([c_void_p], None),
    "voikkoSetBooleanOption": ([c_void_p, c_int, c_int], c_int),
    "voikkoSetIntegerOption": ([c_void_p, c_int, c_int], c_int),
    "voikkoSpellCstr": ([c_void_p, c_char_p], c_int),
    "voikkoSuggestCstr": ([c_void_p, c_char_p], _STRING_ARRAY),
    # raw pointer, must free
    "voikkoHyphenateCstr": ([c_void_p, c_char_p], c_void_p),
    "voikkoFreeCstrArray": ([_STRING_ARRAY], None),
    "voikkoFreeCstr": ([c_void_p], None),
    # text is passed as an address so that the remaining suffix needs no copy
    "voikkoNextTokenCstr": ([c_void_p, c_void_p, c_size_t, POINTER(c_size_t)], c_int),
    "voikkoNextSentenceStartCstr": ([c_void_p, c_void_p, c_size_t, POINTER(c_size_t)], c_int),
    "voikkoNextGrammarErrorCstr": ([c_void_p, c_char_p, c_size_t, c_size_t, c_int], c_void_p),
    "voikkoGetGrammarErrorCode": ([c_void_p], c_int),
    "voikkoGetGrammarErrorStartPos": ([c_void_p], c_size_t),
    "voikkoGetGrammarErrorLength": ([c_void_p], c_size_t),
    "voikkoGetGrammarErrorSuggestions": ([c_void_p], _STRING_ARRAY),
    "voikkoFreeGrammarError": ([c_void_p], None),
    "voikkoGetGrammarErrorShortDescription": ([c_void_p, c_char_p], c_void_p),
    "voikkoFreeErrorMessageCstr": ([c_void_p], None),
    "voikko_list_dicts": ([c_char_p], _POINTER_ARRAY),
    "voikko_free_dicts": ([_POINTER_ARRAY], None),
    "voikko_dict_language": ([c_void_p], c_char_p),
    "voikko_dict_script": ([c_void_p], c_char_p),
    "voikko_dict_variant": ([c_void_p], c_char_p),
    "voikko_dict_description": ([c_void_p], c_char_p),
    "voikkoListSupportedSpellingLanguages": ([c_char_p], _STRING_ARRAY),
    "voikkoListSupportedHyphenationLanguages": ([c_char_p], _STRING_ARRAY),
    "voikkoListSupportedGrammarCheckingLanguages": ([c_char_p], _STRING_ARRAY),
    "voikkoGetVersion": ([], c_char_p),
    "voikkoAnalyzeWordCstr": ([c_void_p, c_char_p], _POINTER_ARRAY),
    "voikko_free_mor_analysis": ([_POINTER_ARRAY], None),
    "voikko_mor_analysis_keys": ([c_void_p], _STRING_ARRAY),
    # raw pointer, must free
    "voikko_mor_analysis_value_cstr": ([c_void_p, c_char_p], c_void_p),
    "voikko_free_mor_analysis_value_cstr": ([c_void_p], None),
}


def load_library(path: Optional[str] = None) -> ctypes.CDLL:
    """Open libvoikko and declare the prototypes of every function used."""
    name = path or find_library()
    logger.debug("Loading libvoikko from %s", name)
    try:
        lib = ctypes.CDLL(name)
    except OSError as e:
        raise LibraryNotFoundError(name, str(e)) from e

    for fname, (argtypes, restype) in _PROTOTYPES.items():
        fn = getattr(lib, fname)
        fn.argtypes = argtypes
        fn.restype = restype
    return lib


_lib = None
_lib_lock = threading.Lock()


def get_library():
    """Return the process-wide libvoikko, loading it on first use."""
    global _lib
    if _lib is None:
        with _lib_lock:
            if _lib is None:
                _lib = load_library()
    return _lib


def resolve(library=None):
    """Use ``library`` if given, else the process-wide one."""
    return library if library is not None else get_library()
