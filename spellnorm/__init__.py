"""Locale-aware text normalization for spell-checking.

spellnorm validates and classifies byte encodings, transcodes between bytes
and text under an explicit codec context, and classifies and transforms word
casing with ICU locale rules.
"""

from __future__ import annotations

from .casing import (
    Casing,
    CasingService,
    IcuCasingService,
    classify_casing,
    has_uppercase_at_compound_word_boundary,
    to_lower,
    to_title,
    to_upper,
)
from .config import NormalizerConfig
from .errors import (
    DecodeIllegalError,
    DecodeIncompleteError,
    EncodeUnmappableError,
    InvalidConfigError,
    SpellnormError,
    TranscodeError,
)
from .locale_tag import LocaleTag, codec_context_for_locale
from .normalizer import NormalizedWord, TextNormalizer
from .text_utils import (
    CodecContext,
    CodecStatus,
    Encoding,
    SingleByteCodecContext,
    TranscodeOutcome,
    TranscodeResult,
    Utf8CodecContext,
    clear_codec_context_cache,
    decode_bytes,
    encode_text,
    get_codec_context,
    get_unmappable_chars,
    is_all_ascii,
    is_all_bmp,
    is_ascii,
    latin1_to_ucs2,
    normalize_encoding_name,
    to_narrow,
    to_narrow_into,
    to_wide,
    to_wide_into,
    utf8_to_wide,
    validate_utf8,
    wide_to_utf8,
)

__all__ = [
    "Casing",
    "CasingService",
    "CodecContext",
    "CodecStatus",
    "DecodeIllegalError",
    "DecodeIncompleteError",
    "EncodeUnmappableError",
    "Encoding",
    "IcuCasingService",
    "InvalidConfigError",
    "LocaleTag",
    "NormalizedWord",
    "NormalizerConfig",
    "SingleByteCodecContext",
    "SpellnormError",
    "TextNormalizer",
    "TranscodeError",
    "TranscodeOutcome",
    "TranscodeResult",
    "Utf8CodecContext",
    "classify_casing",
    "clear_codec_context_cache",
    "codec_context_for_locale",
    "decode_bytes",
    "encode_text",
    "get_codec_context",
    "get_unmappable_chars",
    "has_uppercase_at_compound_word_boundary",
    "is_all_ascii",
    "is_all_bmp",
    "is_ascii",
    "latin1_to_ucs2",
    "normalize_encoding_name",
    "to_lower",
    "to_narrow",
    "to_narrow_into",
    "to_title",
    "to_upper",
    "to_wide",
    "to_wide_into",
    "utf8_to_wide",
    "validate_utf8",
    "wide_to_utf8",
]
