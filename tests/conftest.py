from collections.abc import Generator

import pytest

from spellnorm.text_utils import (
    UTF8_CODEC_CONTEXT,
    CodecContext,
    SingleByteCodecContext,
    clear_codec_context_cache,
)


@pytest.fixture(autouse=True)
def fresh_codec_context_cache() -> Generator[None, None, None]:
    """Start every test without cached codec contexts."""
    clear_codec_context_cache()
    yield
    clear_codec_context_cache()


@pytest.fixture
def utf8_codec() -> CodecContext:
    return UTF8_CODEC_CONTEXT


@pytest.fixture
def latin1_codec() -> CodecContext:
    """Single-byte codec mapping each byte to the code point of the same value."""
    return SingleByteCodecContext("ISO8859-1", [chr(byte) for byte in range(256)])
