"""The Voikko class: one session with all operations bound to it."""

from __future__ import annotations

import logging
from typing import Optional

from safevoikko import grammar, hyphenation, lists, morphology, sentences, tokenizer
from safevoikko._marshal import to_foreign
from safevoikko.handle import Handle
from safevoikko.options import (
    BooleanOption as Bool,
    IntegerOption as Int,
    set_boolean_option,
    set_integer_option,
)
from safevoikko.results import Analysis, Dictionary, GrammarError, Sentence, SpellResult, Token

logger = logging.getLogger(__name__)

_SPELL_RESULTS = {0: SpellResult.FAILED, 1: SpellResult.OK, 3: SpellResult.CHARSET_CONVERSION_FAILED}


class Voikko:
    """Natural language analysis for one language.

    Args:
        language: BCP 47 language tag for the language to be used.
                  Private use subtags can be used to specify the dictionary
                  variant, e.g. ``fi-x-morphoid``.
        path: Directory from which dictionary files are searched first
              before looking into the standard dictionary locations.
        library: Loaded libvoikko to use instead of the process-wide one.

    Raises:
        InitError: the engine could not create the session.
    """

    def __init__(self, language: str, path: Optional[str] = None, library=None):
        self._handle = Handle(language, path, library)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.terminate()

    def terminate(self) -> None:
        """Release resources."""
        self._handle.terminate()

    @property
    def handle(self) -> Handle:
        return self._handle

    def spell(self, word: str) -> SpellResult:
        """Check the spelling of ``word``."""
        code = self._handle.library.voikkoSpellCstr(self._handle.pointer, to_foreign(word))
        result = _SPELL_RESULTS.get(code)
        if result is None:
            logger.warning("Spell checker returned code %d for %r", code, word)
            return SpellResult.INTERNAL_ERROR
        return result

    def suggest(self, word: str) -> list[str]:
        """Get spelling suggestions. Empty if there are none."""
        return lists.suggest(self._handle, word)

    def hyphens(self, word: str) -> str:
        """Raw hyphenation mask, see :mod:`safevoikko.hyphenation`."""
        return hyphenation.hyphen_mask(self._handle, word)

    def hyphenate(self, word: str, hyphen: str = "-") -> str:
        """Hyphenate ``word``, inserting ``hyphen`` at all hyphenation points."""
        return hyphenation.hyphenate(self._handle, word, hyphen)

    def tokens(self, text: str) -> list[Token]:
        """Tokenize text."""
        return tokenizer.tokenize(self._handle, text)

    def sentences(self, text: str) -> list[Sentence]:
        """Split text into sentences."""
        return sentences.split_sentences(self._handle, text)

    def grammar_errors(self, text: str, language: str = "fi") -> list[GrammarError]:
        """Check text for grammar errors, described in ``language``."""
        return grammar.grammar_errors(self._handle, text, language)

    def analyze(self, word: str) -> list[Analysis]:
        """Morphological analysis."""
        return morphology.analyze(self._handle, word)

    def set_boolean_option(self, option: int, value: bool) -> bool:
        return set_boolean_option(self._handle, option, value)

    def set_integer_option(self, option: int, value: int) -> bool:
        return set_integer_option(self._handle, option, value)

    # -- Option setters --

    def set_opt_ignore_dot(self, v: bool) -> bool: return self.set_boolean_option(Bool.IGNORE_DOT, v)
    def set_opt_ignore_numbers(self, v: bool) -> bool: return self.set_boolean_option(Bool.IGNORE_NUMBERS, v)
    def set_opt_ignore_uppercase(self, v: bool) -> bool: return self.set_boolean_option(Bool.IGNORE_UPPERCASE, v)
    def set_opt_no_ugly_hyphenation(self, v: bool) -> bool: return self.set_boolean_option(Bool.NO_UGLY_HYPHENATION, v)
    def set_opt_accept_first_uppercase(self, v: bool) -> bool: return self.set_boolean_option(Bool.ACCEPT_FIRST_UPPERCASE, v)
    def set_opt_accept_all_uppercase(self, v: bool) -> bool: return self.set_boolean_option(Bool.ACCEPT_ALL_UPPERCASE, v)
    def set_opt_ocr_suggestions(self, v: bool) -> bool: return self.set_boolean_option(Bool.OCR_SUGGESTIONS, v)
    def set_opt_ignore_nonwords(self, v: bool) -> bool: return self.set_boolean_option(Bool.IGNORE_NONWORDS, v)
    def set_opt_accept_extra_hyphens(self, v: bool) -> bool: return self.set_boolean_option(Bool.ACCEPT_EXTRA_HYPHENS, v)
    def set_opt_accept_missing_hyphens(self, v: bool) -> bool: return self.set_boolean_option(Bool.ACCEPT_MISSING_HYPHENS, v)
    def set_opt_accept_titles_in_gc(self, v: bool) -> bool: return self.set_boolean_option(Bool.ACCEPT_TITLES_IN_GC, v)
    def set_opt_accept_unfinished_paragraphs_in_gc(self, v: bool) -> bool: return self.set_boolean_option(Bool.ACCEPT_UNFINISHED_PARAGRAPHS_IN_GC, v)
    def set_opt_hyphenate_unknown_words(self, v: bool) -> bool: return self.set_boolean_option(Bool.HYPHENATE_UNKNOWN_WORDS, v)
    def set_opt_accept_bulleted_lists_in_gc(self, v: bool) -> bool: return self.set_boolean_option(Bool.ACCEPT_BULLETED_LISTS_IN_GC, v)
    def set_min_hyphenated_word_length(self, v: int) -> bool: return self.set_integer_option(Int.MIN_HYPHENATED_WORD_LENGTH, v)
    def set_speller_cache_size(self, v: int) -> bool: return self.set_integer_option(Int.SPELLER_CACHE_SIZE, v)
    def set_max_suggestions(self, v: int) -> bool: return self.set_integer_option(Int.MAX_SUGGESTIONS, v)

    @staticmethod
    def version(library=None) -> str:
        """Get library version."""
        return lists.version(library)

    @staticmethod
    def list_dicts(path: str = "", library=None) -> list[Dictionary]:
        return lists.list_dicts(path, library)

    @staticmethod
    def list_supported_spelling_languages(path: str = "", library=None) -> list[str]:
        return lists.list_supported_spelling_languages(path, library)

    @staticmethod
    def list_supported_hyphenation_languages(path: str = "", library=None) -> list[str]:
        return lists.list_supported_hyphenation_languages(path, library)

    @staticmethod
    def list_supported_grammar_checking_languages(path: str = "", library=None) -> list[str]:
        return lists.list_supported_grammar_checking_languages(path, library)

    def __repr__(self) -> str:
        return f"Voikko({self._handle.language!r})"
