"""Engine options.

Option ids are those of libvoikko's ``voikko_defines.h``.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Mapping, Union

from safevoikko.handle import Handle


class BooleanOption(IntEnum):
    IGNORE_DOT = 0
    IGNORE_NUMBERS = 1
    IGNORE_UPPERCASE = 3
    NO_UGLY_HYPHENATION = 4
    ACCEPT_FIRST_UPPERCASE = 6
    ACCEPT_ALL_UPPERCASE = 7
    OCR_SUGGESTIONS = 8
    IGNORE_NONWORDS = 10
    ACCEPT_EXTRA_HYPHENS = 11
    ACCEPT_MISSING_HYPHENS = 12
    ACCEPT_TITLES_IN_GC = 13
    ACCEPT_UNFINISHED_PARAGRAPHS_IN_GC = 14
    HYPHENATE_UNKNOWN_WORDS = 15
    ACCEPT_BULLETED_LISTS_IN_GC = 16


class IntegerOption(IntEnum):
    MIN_HYPHENATED_WORD_LENGTH = 9
    SPELLER_CACHE_SIZE = 17
    # VOIKKO_MAX_SUGGESTIONS in upstream voikko_defines.h, newer than the rest;
    # older engines reject it and the setter returns False.
    MAX_SUGGESTIONS = 19


Option = Union[BooleanOption, IntegerOption]

DEFAULTS: dict[Option, Union[bool, int]] = {
    BooleanOption.IGNORE_DOT: False,
    BooleanOption.IGNORE_NUMBERS: False,
    BooleanOption.IGNORE_UPPERCASE: False,
    BooleanOption.NO_UGLY_HYPHENATION: False,
    BooleanOption.ACCEPT_FIRST_UPPERCASE: True,
    BooleanOption.ACCEPT_ALL_UPPERCASE: True,
    BooleanOption.OCR_SUGGESTIONS: False,
    BooleanOption.IGNORE_NONWORDS: True,
    BooleanOption.ACCEPT_EXTRA_HYPHENS: False,
    BooleanOption.ACCEPT_MISSING_HYPHENS: False,
    BooleanOption.ACCEPT_TITLES_IN_GC: False,
    BooleanOption.ACCEPT_UNFINISHED_PARAGRAPHS_IN_GC: False,
    BooleanOption.HYPHENATE_UNKNOWN_WORDS: True,
    BooleanOption.ACCEPT_BULLETED_LISTS_IN_GC: False,
    IntegerOption.MIN_HYPHENATED_WORD_LENGTH: 2,
    IntegerOption.SPELLER_CACHE_SIZE: 0,
}


def set_boolean_option(handle: Handle, option: int, value: bool) -> bool:
    """Set a boolean option. Returns False if the engine rejected it."""
    option = BooleanOption(option)
    if not isinstance(value, bool):
        raise TypeError(f"{option.name} expects a bool, got {type(value).__name__}")
    return bool(handle.library.voikkoSetBooleanOption(handle.pointer, option, int(value)))


def set_integer_option(handle: Handle, option: int, value: int) -> bool:
    """Set an integer option. Returns False if the engine rejected it."""
    option = IntegerOption(option)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{option.name} expects an int, got {type(value).__name__}")
    return bool(handle.library.voikkoSetIntegerOption(handle.pointer, option, value))


def apply_options(handle: Handle, options: Mapping[Option, Union[bool, int]]) -> dict[Option, bool]:
    """Set several options at once, returning whether each was accepted."""
    accepted = {}
    for option, value in options.items():
        if isinstance(option, BooleanOption):
            accepted[option] = set_boolean_option(handle, option, value)
        elif isinstance(option, IntegerOption):
            accepted[option] = set_integer_option(handle, option, value)
        else:
            raise TypeError(f"not an option: {option!r}")
    return accepted
