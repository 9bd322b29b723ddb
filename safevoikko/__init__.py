"""Voikko natural language analysis — safe Python bindings for libvoikko (ctypes).

Usage:
    from safevoikko import Voikko

    with Voikko("fi") as v:
        v.spell("koira")         # SpellResult.OK
        v.suggest("koirra")      # ["koira", ...]
        v.hyphenate("koira")     # "koi-ra"
        v.tokens("Koira haukkuu.")
"""

import logging

from safevoikko.errors import (
    EncodingError,
    HyphenateError,
    InitError,
    InternalEngineError,
    LibraryNotFoundError,
    TerminatedHandleError,
    VoikkoError,
)
from safevoikko.handle import Handle
from safevoikko.lists import (
    list_dicts,
    list_languages,
    list_supported_grammar_checking_languages,
    list_supported_hyphenation_languages,
    list_supported_spelling_languages,
    version,
)
from safevoikko.options import DEFAULTS, BooleanOption, IntegerOption
from safevoikko.results import (
    Analysis,
    Dictionary,
    GrammarError,
    LanguageKind,
    Sentence,
    SentenceType,
    SpellResult,
    Token,
    TokenType,
)
from safevoikko.voikko import Voikko

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Analysis",
    "BooleanOption",
    "DEFAULTS",
    "Dictionary",
    "EncodingError",
    "GrammarError",
    "Handle",
    "HyphenateError",
    "InitError",
    "IntegerOption",
    "InternalEngineError",
    "LanguageKind",
    "LibraryNotFoundError",
    "Sentence",
    "SentenceType",
    "SpellResult",
    "TerminatedHandleError",
    "Token",
    "TokenType",
    "Voikko",
    "VoikkoError",
    "list_dicts",
    "list_languages",
    "list_supported_grammar_checking_languages",
    "list_supported_hyphenation_languages",
    "list_supported_spelling_languages",
    "version",
]
