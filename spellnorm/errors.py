"""Exceptions raised by spellnorm.

Validators, classifiers and lossy transcoding never raise; only the strict
transcoding entry points and configuration loading do.
"""

from __future__ import annotations


class SpellnormError(Exception):
    """Base class for all spellnorm errors."""


class InvalidConfigError(SpellnormError, ValueError):
    """Raised when a configuration mapping fails schema validation."""


class TranscodeError(SpellnormError, ValueError):
    """Raised by strict transcoding when the conversion would lose information."""

    def __init__(self, message: str, *, codec: str, position: int) -> None:
        super().__init__(message)
        self.codec = codec
        self.position = position


class DecodeIncompleteError(TranscodeError):
    """Input ends in the middle of a multi-byte sequence."""


class DecodeIllegalError(TranscodeError):
    """Input contains a byte sequence the codec cannot decode."""


class EncodeUnmappableError(TranscodeError):
    """Input contains a character the codec cannot represent."""

    def __init__(self, message: str, *, codec: str, position: int, character: str) -> None:
        super().__init__(message, codec=codec, position=position)
        self.character = character
