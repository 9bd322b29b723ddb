"""Ownership of a libvoikko session handle."""

from __future__ import annotations

import ctypes
import logging
from ctypes import c_char_p
from typing import Optional

from safevoikko._binding import resolve
from safevoikko._marshal import from_foreign, to_foreign
from safevoikko.errors import InitError, TerminatedHandleError

logger = logging.getLogger(__name__)


class Handle:
    """One configured engine session.

    The handle is released exactly once: by :meth:`terminate`, at the end of
    a ``with`` block, or when the object is collected. Using it afterwards
    raises :class:`TerminatedHandleError`. Handles cannot be copied and are
    not safe to share between threads without external locking.

    Args:
        language: BCP 47 language tag. Private use subtags select the
                  dictionary variant (e.g. ``fi-x-morphoid``).
        path: Directory searched for dictionaries before the standard
              locations, or ``None``.
        library: Loaded libvoikko; defaults to the process-wide one.
    """

    def __init__(self, language: str, path: Optional[str] = None, library=None):
        self._pointer = None
        lang = to_foreign(language)
        search_path = to_foreign(path)
        self.library = resolve(library)
        self.language = language

        error = c_char_p()
        pointer = self.library.voikkoInit(ctypes.pointer(error), lang, search_path)
        if not pointer:
            # the diagnostic is a static string owned by the engine
            raise InitError(from_foreign(error.value) or "unknown error")

        logger.debug("Initialized Voikko session for %s (path=%s)", language, path)
        self._pointer = pointer

    @property
    def pointer(self) -> int:
        if self._pointer is None:
            raise TerminatedHandleError("Voikko instance has been terminated")
        return self._pointer

    @property
    def terminated(self) -> bool:
        return self._pointer is None

    def terminate(self) -> None:
        """Release the session. Further calls do nothing."""
        pointer, self._pointer = self._pointer, None
        if pointer is not None:
            self.library.voikkoTerminate(pointer)
            logger.debug("Terminated Voikko session for %s", self.language)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.terminate()

    def __del__(self):
        if getattr(self, "_pointer", None) is not None:
            self.terminate()

    def __copy__(self):
        raise TypeError("Voikko handles cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("Voikko handles cannot be copied")

    def __reduce__(self):
        raise TypeError("Voikko handles cannot be pickled")

    def __repr__(self) -> str:
        state = "terminated" if self.terminated else "ready"
        return f"<Handle {self.language} {state}>"
