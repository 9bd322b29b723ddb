"""Result types returned by the analysis operations."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Dict

Analysis = Dict[str, str]


class SpellResult(IntEnum):
    FAILED = 0
    OK = 1
    INTERNAL_ERROR = 2
    CHARSET_CONVERSION_FAILED = 3


class TokenType(IntEnum):
    NONE = 0
    WORD = 1
    PUNCTUATION = 2
    WHITESPACE = 3
    UNKNOWN = 4


class SentenceType(IntEnum):
    NONE = 0
    NO_START = 1
    PROBABLE = 2
    POSSIBLE = 3


class LanguageKind(Enum):
    SPELLING = "spelling"
    HYPHENATION = "hyphenation"
    GRAMMAR = "grammar"


class Token:
    """Text token."""

    __slots__ = ("text", "type", "position")

    def __init__(self, text: str, token_type: TokenType, position: int = 0):
        self.text = text
        self.type = token_type
        self.position = position

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.text, self.type, self.position) == (other.text, other.type, other.position)

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.text!r}, pos={self.position})"


class Sentence:
    """A sentence and the confidence that another one starts after it.

    ``next_start_type`` describes the boundary following ``text``.
    """

    __slots__ = ("text", "next_start_type")

    def __init__(self, text: str, next_start_type: SentenceType):
        self.text = text
        self.next_start_type = next_start_type

    def __eq__(self, other):
        if not isinstance(other, Sentence):
            return NotImplemented
        return (self.text, self.next_start_type) == (other.text, other.next_start_type)

    def __repr__(self) -> str:
        return f"Sentence({self.text!r}, next={self.next_start_type.name})"


class GrammarError:
    """Grammar error detected by Voikko.

    ``start_pos`` and ``length`` are in characters.
    """

    __slots__ = ("code", "start_pos", "length", "suggestions", "description")

    def __init__(self, code: int, start_pos: int, length: int, suggestions: list[str], description: str):
        self.code = code
        self.start_pos = start_pos
        self.length = length
        self.suggestions = suggestions
        self.description = description

    def __eq__(self, other):
        if not isinstance(other, GrammarError):
            return NotImplemented
        return self._key() == other._key()

    def _key(self):
        return (self.code, self.start_pos, self.length, self.suggestions, self.description)

    def __repr__(self) -> str:
        return (
            f"GrammarError(code={self.code}, pos={self.start_pos}, "
            f"len={self.length}, desc={self.description!r})"
        )


class Dictionary:
    """An installed dictionary."""

    __slots__ = ("language", "script", "variant", "description")

    def __init__(self, language: str, script: str, variant: str, description: str):
        self.language = language
        self.script = script
        self.variant = variant
        self.description = description

    def _key(self):
        return (self.language, self.script, self.variant, self.description)

    def __eq__(self, other):
        if not isinstance(other, Dictionary):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other):
        if not isinstance(other, Dictionary):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Dictionary({self.language!r}, {self.script!r}, {self.variant!r}, {self.description!r})"
