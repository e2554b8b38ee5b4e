"""Legacy single-byte widening and BMP checks for wide strings."""

from __future__ import annotations

_SURROGATE_FIRST = 0xD800
_SURROGATE_LAST = 0xDFFF
_BMP_LAST = 0xFFFF


def latin1_to_ucs2(data: bytes | bytearray) -> str:
    """Widen each byte to the character with the same value (0-255).

    This is not a UTF-8 decode: multi-byte sequences come out as one
    character per byte, so the result always has the input's length.
    """
    return "".join(map(chr, data))


def is_all_bmp(text: str) -> bool:
    """Return True if text needs no surrogate pair in UTF-16.

    A character above U+FFFF, or a lone surrogate code unit, makes the
    result False.
    """
    for char in text:
        code_point = ord(char)
        if code_point > _BMP_LAST or _SURROGATE_FIRST <= code_point <= _SURROGATE_LAST:
            return False
    return True
