"""Operations that return flat lists: suggestions, dictionaries, languages."""

from __future__ import annotations

from safevoikko._binding import resolve
from safevoikko._cursor import index_cursor
from safevoikko._marshal import from_foreign, owned_array, read_string_array, to_foreign
from safevoikko.handle import Handle
from safevoikko.results import Dictionary, LanguageKind

_LANGUAGE_LISTS = {
    LanguageKind.SPELLING: "voikkoListSupportedSpellingLanguages",
    LanguageKind.HYPHENATION: "voikkoListSupportedHyphenationLanguages",
    LanguageKind.GRAMMAR: "voikkoListSupportedGrammarCheckingLanguages",
}


def suggest(handle: Handle, word: str) -> list[str]:
    """Suggested spellings for ``word``, best first."""
    lib = handle.library
    ptr = lib.voikkoSuggestCstr(handle.pointer, to_foreign(word))
    with owned_array(lib.voikkoFreeCstrArray, ptr):
        return read_string_array(ptr)


def list_dicts(path: str = "", library=None) -> list[Dictionary]:
    """Available dictionaries.

    ``path`` is searched before the standard dictionary locations. Pass an
    empty string to only look in the standard locations.
    """
    lib = resolve(library)

    def read(d: int) -> Dictionary:
        return Dictionary(
            from_foreign(lib.voikko_dict_language(d)),
            from_foreign(lib.voikko_dict_script(d)),
            from_foreign(lib.voikko_dict_variant(d)),
            from_foreign(lib.voikko_dict_description(d)),
        )

    dicts = lib.voikko_list_dicts(to_foreign(path))
    with owned_array(lib.voikko_free_dicts, dicts):
        return list(index_cursor(dicts, read))


def list_languages(kind: LanguageKind, path: str = "", library=None) -> list[str]:
    """BCP 47 codes of languages with at least one dictionary for ``kind``."""
    lib = resolve(library)
    fn = getattr(lib, _LANGUAGE_LISTS[LanguageKind(kind)])
    # the language lists are views owned by the engine
    return read_string_array(fn(to_foreign(path)))


def list_supported_spelling_languages(path: str = "", library=None) -> list[str]:
    return list_languages(LanguageKind.SPELLING, path, library)


def list_supported_hyphenation_languages(path: str = "", library=None) -> list[str]:
    return list_languages(LanguageKind.HYPHENATION, path, library)


def list_supported_grammar_checking_languages(path: str = "", library=None) -> list[str]:
    return list_languages(LanguageKind.GRAMMAR, path, library)


def version(library=None) -> str:
    """libvoikko version."""
    return from_foreign(resolve(library).voikkoGetVersion())
