"""Transcoding between byte strings and wide strings.

Every conversion runs one code point at a time against a CodecContext and
produces a TranscodeResult carrying the (possibly partial) output and an
outcome:

- EXACT: every byte or character was converted.
- LOSSY: encoding only; unmappable characters were replaced by one
  replacement byte each and the output is otherwise complete.
- FAILED: decoding only; the input ended inside a multi-byte sequence or
  contained an illegal byte. The output holds what was decoded before that.

The classic entry points are thin wrappers over the result API:

- to_wide() / to_narrow() are strict and raise on any information loss.
- to_wide_into() / to_narrow_into() never raise and report success as a bool.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
from typing import Generic, Protocol, TypeVar

from ..const import DEFAULT_REPLACEMENT
from ..errors import DecodeIllegalError, DecodeIncompleteError, EncodeUnmappableError
from .codec_context import UTF8_CODEC_CONTEXT, CodecContext, CodecStatus

_LOGGER = logging.getLogger(__name__)

_ValueT = TypeVar("_ValueT", str, bytes)


class TextSink(Protocol):
    """Anything with a ``write(str)`` method, such as io.StringIO."""

    def write(self, text: str, /) -> object:
        """Append text."""


class TranscodeOutcome(Enum):
    """How completely a conversion succeeded."""

    EXACT = "exact"
    LOSSY = "lossy"
    FAILED = "failed"


@dataclass(frozen=True)
class TranscodeResult(Generic[_ValueT]):
    """Output of a conversion together with how it went.

    Attributes:
        value: Converted text or bytes, partial when the outcome is FAILED.
        outcome: EXACT, LOSSY or FAILED.
        codec: Canonical name of the codec used.
        status: Codec status that stopped a FAILED decode.
        position: Byte offset where a FAILED decode stopped.
        substitutions: Number of replacement bytes written by a LOSSY encode.
    """

    value: _ValueT
    outcome: TranscodeOutcome
    codec: str
    status: CodecStatus | None = None
    position: int | None = None
    substitutions: int = 0

    @property
    def ok(self) -> bool:
        """True when nothing was lost."""
        return self.outcome is TranscodeOutcome.EXACT


def decode_bytes(data: bytes | bytearray, codec: CodecContext) -> TranscodeResult[str]:
    """Decode bytes to a wide string without raising.

    Args:
        data: Bytes to decode.
        codec: Codec context to decode with.

    Returns:
        Result with outcome EXACT, or FAILED with the text decoded before the
        offending position.
    """
    data = bytes(data)
    chars: list[str] = []
    index = 0
    while index < len(data):
        code_point, next_index = codec.decode_one(data, index)
        if isinstance(code_point, CodecStatus):
            _LOGGER.debug(
                "Decoding with %s stopped at byte %d: %s", codec.name, index, code_point.name
            )
            return TranscodeResult(
                "".join(chars),
                TranscodeOutcome.FAILED,
                codec.name,
                status=code_point,
                position=index,
            )
        chars.append(chr(code_point))
        index = next_index
    return TranscodeResult("".join(chars), TranscodeOutcome.EXACT, codec.name)


def encode_text(
    text: str,
    codec: CodecContext,
    replacement: str = DEFAULT_REPLACEMENT,
) -> TranscodeResult[bytes]:
    """Encode a wide string to bytes, substituting what cannot be mapped.

    Args:
        text: Text to encode.
        codec: Codec context to encode with.
        replacement: ASCII character written once per unmappable character.

    Returns:
        Result with outcome EXACT, or LOSSY when any substitution was made.
        The output is complete in both cases.

    Raises:
        ValueError: If replacement is not exactly one printable ASCII character.
    """
    if len(replacement) != 1 or not " " <= replacement <= "~":
        raise ValueError(
            f"Replacement must be one printable ASCII character, got {replacement!r}"
        )
    replacement_byte = replacement.encode("ascii")
    out = bytearray()
    substitutions = 0
    for char in text:
        encoded = codec.encode_one(ord(char))
        if isinstance(encoded, CodecStatus):
            out += replacement_byte
            substitutions += 1
        else:
            out += encoded

    if substitutions:
        _LOGGER.debug(
            "Substituted %d unmappable character(s) encoding to %s", substitutions, codec.name
        )
        return TranscodeResult(
            bytes(out), TranscodeOutcome.LOSSY, codec.name, substitutions=substitutions
        )
    return TranscodeResult(bytes(out), TranscodeOutcome.EXACT, codec.name)


def to_wide(data: bytes | bytearray, codec: CodecContext) -> str:
    """Decode bytes strictly.

    Raises:
        DecodeIncompleteError: If the input ends inside a multi-byte sequence.
        DecodeIllegalError: If the input holds a byte the codec cannot decode.
    """
    result = decode_bytes(data, codec)
    if result.outcome is TranscodeOutcome.FAILED:
        position = result.position if result.position is not None else 0
        if result.status is CodecStatus.INCOMPLETE:
            raise DecodeIncompleteError(
                f"Incomplete {codec.name} sequence at byte {position}",
                codec=codec.name,
                position=position,
            )
        raise DecodeIllegalError(
            f"Illegal {codec.name} sequence at byte {position}",
            codec=codec.name,
            position=position,
        )
    return result.value


def to_wide_into(data: bytes | bytearray, codec: CodecContext, out: TextSink) -> bool:
    """Decode bytes into a text sink.

    On failure ``out`` has received the text decoded before the bad bytes.

    Returns:
        True if every byte was decoded.
    """
    result = decode_bytes(data, codec)
    out.write(result.value)
    return result.ok


def to_narrow(text: str, codec: CodecContext) -> bytes:
    """Encode text strictly.

    Raises:
        EncodeUnmappableError: On the first character the codec cannot represent.
    """
    out = bytearray()
    for position, char in enumerate(text):
        encoded = codec.encode_one(ord(char))
        if isinstance(encoded, CodecStatus):
            raise EncodeUnmappableError(
                f"Character U+{ord(char):04X} at index {position} has no {codec.name} encoding",
                codec=codec.name,
                position=position,
                character=char,
            )
        out += encoded
    return bytes(out)


def to_narrow_into(
    text: str,
    codec: CodecContext,
    out: bytearray,
    replacement: str = DEFAULT_REPLACEMENT,
) -> bool:
    """Encode text into a bytearray, substituting what cannot be mapped.

    ``out`` is always extended with the full encoding, one replacement byte
    standing in for each unmappable character.

    Returns:
        True only if no substitution was needed.
    """
    result = encode_text(text, codec, replacement)
    out += result.value
    return result.ok


def get_unmappable_chars(text: str, codec: CodecContext) -> list[str]:
    """Get list of characters that cannot be encoded with the codec.

    Useful for debugging or warning users about characters that will
    be replaced.

    Args:
        text: Text to check.
        codec: Target codec context.

    Returns:
        List of unique characters that cannot be mapped, in order of appearance.
    """
    unmappable: list[str] = []
    for char in text:
        if char in unmappable:
            continue
        if isinstance(codec.encode_one(ord(char)), CodecStatus):
            unmappable.append(char)
    return unmappable


def utf8_to_wide(data: bytes | bytearray) -> str:
    """Decode UTF-8 strictly."""
    return to_wide(data, UTF8_CODEC_CONTEXT)


def wide_to_utf8(text: str) -> bytes:
    """Encode text as UTF-8 strictly."""
    return to_narrow(text, UTF8_CODEC_CONTEXT)
