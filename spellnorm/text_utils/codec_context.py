"""Codec contexts: one-character-at-a-time conversion between bytes and code points.

A codec context is the capability the transcoder works against. Two kinds
exist:

1. Utf8CodecContext: variable width, up to four bytes per code point.
2. SingleByteCodecContext: a fixed 256-entry table, one byte per code point.
   Tables are read from the Python codec registry (``cp1251``,
   ``iso8859-2`` ...) or supplied explicitly.

Callers pick a context at runtime with get_codec_context() and never need to
know which kind they hold. Contexts are immutable and safe to share between
threads.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import codecs
from collections.abc import Sequence
from enum import IntEnum
from functools import lru_cache
import logging

from ..const import DEFAULT_ENCODING, UTF8_ENCODING
from .encoding import Encoding, get_codec_name

_LOGGER = logging.getLogger(__name__)

_TABLE_SIZE = 256


class CodecStatus(IntEnum):
    """Returned by a codec context instead of a code point or encoded bytes."""

    INCOMPLETE = -1
    ILLEGAL = -2


class CodecContext(ABC):
    """Abstract byte <-> code point conversion rule for one encoding."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Canonical encoding name."""

    @property
    @abstractmethod
    def max_encoded_length(self) -> int:
        """Maximum number of bytes one code point encodes to."""

    @abstractmethod
    def decode_one(self, data: bytes, start: int = 0) -> tuple[int, int]:
        """Decode the code point starting at ``data[start]``.

        Returns:
            ``(code_point, next_index)`` on success. On failure the first
            item is CodecStatus.INCOMPLETE (input ends inside a sequence) or
            CodecStatus.ILLEGAL, and the index is ``start``.
        """

    @abstractmethod
    def encode_one(self, code_point: int) -> bytes | CodecStatus:
        """Encode one code point, or return CodecStatus.ILLEGAL.

        Output buffers grow as needed, so INCOMPLETE is never returned here.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class Utf8CodecContext(CodecContext):
    """Strict UTF-8 codec context."""

    @property
    def name(self) -> str:
        return UTF8_ENCODING

    @property
    def max_encoded_length(self) -> int:
        return 4

    def decode_one(self, data: bytes, start: int = 0) -> tuple[int, int]:
        end = min(len(data), start + self.max_encoded_length)
        if start >= end:
            return CodecStatus.INCOMPLETE, start

        # The incremental decoder buffers valid prefixes and raises as soon
        # as a byte cannot continue the sequence.
        decoder = codecs.getincrementaldecoder("utf-8")()
        for index in range(start, end):
            try:
                char = decoder.decode(data[index : index + 1])
            except UnicodeDecodeError:
                return CodecStatus.ILLEGAL, start
            if char:
                return ord(char), index + 1

        if end == len(data):
            return CodecStatus.INCOMPLETE, start
        return CodecStatus.ILLEGAL, start

    def encode_one(self, code_point: int) -> bytes | CodecStatus:
        try:
            return chr(code_point).encode("utf-8")
        except (UnicodeEncodeError, ValueError):
            # Lone surrogates and values outside the Unicode range
            return CodecStatus.ILLEGAL


class SingleByteCodecContext(CodecContext):
    """Codec context backed by a 256-entry decoding table.

    Table entries set to None mark bytes that are undefined in the encoding.
    """

    def __init__(self, name: str, decoding_table: Sequence[str | None]) -> None:
        if len(decoding_table) != _TABLE_SIZE:
            raise ValueError(
                f"Decoding table for {name} has {len(decoding_table)} entries, expected {_TABLE_SIZE}"
            )
        self._name = name
        self._decoding_table: tuple[str | None, ...] = tuple(decoding_table)
        encoding_table: dict[int, int] = {}
        for byte, char in enumerate(self._decoding_table):
            if char is not None:
                # First byte wins when a codec maps two bytes to one character
                encoding_table.setdefault(ord(char), byte)
        self._encoding_table = encoding_table

    @classmethod
    def from_codec(cls, name: str, codec: str) -> SingleByteCodecContext:
        """Build a table from a Python codec.

        Args:
            name: Canonical encoding name to report.
            codec: Python codec name (e.g. "cp1251").

        Raises:
            LookupError: If the codec does not exist or is not a single-byte
                codec (some byte only starts a longer sequence).
        """
        decoder_factory = codecs.getincrementaldecoder(codec)
        table: list[str | None] = []
        for byte in range(_TABLE_SIZE):
            try:
                char = decoder_factory().decode(bytes((byte,)), final=False)
            except UnicodeDecodeError:
                table.append(None)
                continue
            if not char:
                raise LookupError(
                    f"{codec} is not a single-byte codec: byte 0x{byte:02X} starts a sequence"
                )
            table.append(char if len(char) == 1 else None)
        return cls(name, table)

    @property
    def name(self) -> str:
        return self._name

    @property
    def max_encoded_length(self) -> int:
        return 1

    def decode_one(self, data: bytes, start: int = 0) -> tuple[int, int]:
        if start >= len(data):
            return CodecStatus.INCOMPLETE, start
        char = self._decoding_table[data[start]]
        if char is None:
            return CodecStatus.ILLEGAL, start
        return ord(char), start + 1

    def encode_one(self, code_point: int) -> bytes | CodecStatus:
        byte = self._encoding_table.get(code_point)
        if byte is None:
            return CodecStatus.ILLEGAL
        return bytes((byte,))


UTF8_CODEC_CONTEXT = Utf8CodecContext()


@lru_cache(maxsize=32)
def _build_codec_context(canonical: str) -> CodecContext:
    """Create the codec context for a canonical encoding name (cached)."""
    if canonical == UTF8_ENCODING:
        return UTF8_CODEC_CONTEXT

    codec = get_codec_name(canonical)
    try:
        return SingleByteCodecContext.from_codec(canonical, codec)
    except LookupError as err:
        if canonical == DEFAULT_ENCODING:
            raise
        _LOGGER.warning(
            "Unsupported encoding '%s' (%s), using %s", canonical, err, DEFAULT_ENCODING
        )
        return _build_codec_context(DEFAULT_ENCODING)


def get_codec_context(encoding: Encoding | str | None = None) -> CodecContext:
    """Get the codec context for an encoding.

    Args:
        encoding: Encoding or raw name. Empty or None selects ISO8859-1.

    Returns:
        A shared, immutable codec context. Encodings without a Python codec
        fall back to ISO8859-1.
    """
    if not isinstance(encoding, Encoding):
        encoding = Encoding(encoding or "")
    return _build_codec_context(encoding.value_or_default())


def clear_codec_context_cache() -> None:
    """Clear the codec context cache.

    Useful for testing.
    """
    _build_codec_context.cache_clear()
