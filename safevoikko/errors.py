"""Exceptions raised by safevoikko."""

from __future__ import annotations


class VoikkoError(Exception):
    """Base class for all safevoikko errors."""


class LibraryNotFoundError(VoikkoError, OSError):
    """The libvoikko shared library could not be opened."""

    def __init__(self, name: str, reason: str = ""):
        self.name = name
        msg = f"Could not load libvoikko from {name!r}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class InitError(VoikkoError):
    """Session creation failed. No session exists afterwards."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Failed to initialize Voikko: {message}")


class EncodingError(VoikkoError, ValueError):
    """A string cannot cross the C boundary (embedded NUL)."""


class HyphenateError(VoikkoError):
    """The engine produced no usable hyphenation mask."""


class InternalEngineError(VoikkoError):
    """The engine returned a result the wrapper cannot make progress with."""


class TerminatedHandleError(VoikkoError, RuntimeError):
    """A session handle was used after it was released."""
