"""Byte-level classifiers for raw dictionary and input text."""

from __future__ import annotations

from ..const import UTF8_ENCODING


def is_ascii(byte: int | bytes | str) -> bool:
    """Return True if a single byte is in the 7-bit ASCII range.

    Args:
        byte: Byte value, or a one-element bytes/str.
    """
    if not isinstance(byte, int):
        byte = ord(byte)
    return 0 <= byte < 0x80


def is_all_ascii(data: bytes | bytearray) -> bool:
    """Return True if every byte is ASCII (True for empty input)."""
    return all(is_ascii(byte) for byte in data)


def validate_utf8(data: bytes | bytearray) -> bool:
    """Check that data is well-formed UTF-8.

    Overlong forms, encoded surrogates, values above U+10FFFF and truncated
    trailing sequences are all rejected.

    Args:
        data: Bytes to check.

    Returns:
        True if the whole input decodes as strict UTF-8.
    """
    try:
        bytes(data).decode(UTF8_ENCODING)
    except UnicodeDecodeError:
        return False
    return True
