"""Grammar checking."""

from __future__ import annotations

from safevoikko._cursor import drive
from safevoikko._marshal import owned_string, read_string_array, to_foreign
from safevoikko.errors import InternalEngineError
from safevoikko.handle import Handle
from safevoikko.results import GrammarError


def grammar_errors(handle: Handle, text: str, language: str = "fi") -> list[GrammarError]:
    """Find all grammar errors in ``text``.

    The text should usually begin at the start of a paragraph or sentence.
    ``language`` is the language of the error descriptions. The engine gets
    the whole text on every call together with the character offset where
    the search resumes.
    """
    lib = handle.library
    encoded = to_foreign(text)
    desc_lang = to_foreign(language)
    text_len = len(text)

    def step(offset: int):
        record = lib.voikkoNextGrammarErrorCstr(handle.pointer, encoded, len(encoded), offset, 0)
        if not record:
            return None
        try:
            suggestions = read_string_array(lib.voikkoGetGrammarErrorSuggestions(record))
            desc_ptr = lib.voikkoGetGrammarErrorShortDescription(record, desc_lang)
            with owned_string(lib.voikkoFreeErrorMessageCstr, desc_ptr) as description:
                return GrammarError(
                    lib.voikkoGetGrammarErrorCode(record),
                    lib.voikkoGetGrammarErrorStartPos(record),
                    lib.voikkoGetGrammarErrorLength(record),
                    suggestions,
                    description or "",
                )
        finally:
            lib.voikkoFreeGrammarError(record)

    def advance(offset: int, error: GrammarError) -> int:
        next_offset = error.start_pos + error.length
        if next_offset <= offset:
            raise InternalEngineError(
                f"grammar error at {error.start_pos} (length {error.length}) "
                f"does not advance past offset {offset}")
        return next_offset

    return list(drive(0, step, advance, exhausted=lambda offset: offset > text_len))
