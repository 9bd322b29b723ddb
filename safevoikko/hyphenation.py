"""Hyphenation.

The engine describes the hyphenation of a word with a mask of the same
length, using the following notation:

* ``' '`` = no hyphenation at this character,
* ``'-'`` = hyphenation point (character at this position
  is preserved in the hyphenated form),
* ``'='`` = hyphenation point (character at this position
  is replaced by the hyphen.)

The mask and the word are aligned by grapheme cluster, so that combining
marks stay attached to their base character. The engine emits one mask
symbol per code point, so a word with combining marks gets a mask longer
than its cluster count; the sequences are zipped and the tail is dropped.
"""

from __future__ import annotations

import logging

import regex

from safevoikko._marshal import owned_string, to_foreign
from safevoikko.errors import HyphenateError
from safevoikko.handle import Handle

NO_BREAK = " "
BREAK = "-"
REPLACE = "="

logger = logging.getLogger(__name__)

_GRAPHEME = regex.compile(r"\X")


def graphemes(s: str) -> list[str]:
    return _GRAPHEME.findall(s)


def hyphen_mask(handle: Handle, word: str) -> str:
    """Return the raw hyphenation mask of ``word``."""
    lib = handle.library
    ptr = lib.voikkoHyphenateCstr(handle.pointer, to_foreign(word))
    with owned_string(lib.voikkoFreeCstr, ptr) as mask:
        if mask is None:
            raise HyphenateError(f"no hyphenation for {word!r}")
        return mask


def apply_mask(word: str, mask: str, hyphen: str = "-") -> str:
    """Insert ``hyphen`` into ``word`` at the points marked in ``mask``."""
    word_clusters = graphemes(word)
    mask_clusters = graphemes(mask)
    if len(word_clusters) != len(mask_clusters):
        logger.warning("Hyphenation mask %r has %d clusters, word %r has %d",
                       mask, len(mask_clusters), word, len(word_clusters))

    parts = []
    for w, h in zip(word_clusters, mask_clusters):
        if h == BREAK:
            parts.append(hyphen + w)
        elif h == REPLACE:
            parts.append(hyphen)
        else:
            parts.append(w)
    return "".join(parts)


def hyphenate(handle: Handle, word: str, hyphen: str = "-") -> str:
    """Return ``word`` with ``hyphen`` inserted at every hyphenation point."""
    return apply_mask(word, hyphen_mask(handle, word), hyphen)
