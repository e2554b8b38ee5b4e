"""Text utilities for encoding classification and transcoding.

This package provides the byte-level half of spellnorm: canonical encoding
names, ASCII/UTF-8 classifiers, Latin-1 style widening, codec contexts and
the transcoder built on them.

Transcoding Strategy:
---------------------
Conversion runs one code point at a time against a codec context chosen at
runtime from an encoding name:

1. Decoding stops at the first incomplete or illegal sequence and reports
   FAILED together with the text decoded so far.

2. Encoding never stops: each character the codec cannot represent becomes a
   single replacement byte ("?") and the result is reported LOSSY.

Strict wrappers (to_wide, to_narrow) raise instead of returning a partial or
lossy result.
"""

from __future__ import annotations

from .byte_classifiers import is_all_ascii, is_ascii, validate_utf8
from .codec_context import (
    UTF8_CODEC_CONTEXT,
    CodecContext,
    CodecStatus,
    SingleByteCodecContext,
    Utf8CodecContext,
    clear_codec_context_cache,
    get_codec_context,
)
from .encoding import ENCODING_ALIASES, Encoding, get_codec_name, normalize_encoding_name
from .transcoding import (
    TranscodeOutcome,
    TranscodeResult,
    decode_bytes,
    encode_text,
    get_unmappable_chars,
    to_narrow,
    to_narrow_into,
    to_wide,
    to_wide_into,
    utf8_to_wide,
    wide_to_utf8,
)
from .widening import is_all_bmp, latin1_to_ucs2

__all__ = [
    "ENCODING_ALIASES",
    "UTF8_CODEC_CONTEXT",
    "CodecContext",
    "CodecStatus",
    "Encoding",
    "SingleByteCodecContext",
    "TranscodeOutcome",
    "TranscodeResult",
    "Utf8CodecContext",
    "clear_codec_context_cache",
    "decode_bytes",
    "encode_text",
    "get_codec_context",
    "get_codec_name",
    "get_unmappable_chars",
    "is_all_ascii",
    "is_all_bmp",
    "is_ascii",
    "latin1_to_ucs2",
    "normalize_encoding_name",
    "to_narrow",
    "to_narrow_into",
    "to_wide",
    "to_wide_into",
    "utf8_to_wide",
    "validate_utf8",
    "wide_to_utf8",
]
