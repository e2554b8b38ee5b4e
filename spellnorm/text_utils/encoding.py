"""Encoding name registry.

This module resolves the many spellings of an encoding name found in
dictionaries and locale strings (``UTF8``, ``microsoft-cp1251``,
``ISO-8859-15`` ...) to one canonical name, and maps canonical names to
Python codec names.
"""

from __future__ import annotations

from dataclasses import dataclass
import re

from ..const import DEFAULT_ENCODING, UTF8_ENCODING

# Aliases resolved before any prefix rule is applied (keys are uppercase)
ENCODING_ALIASES: dict[str, str] = {
    "UTF8": UTF8_ENCODING,
    "UTF_8": UTF8_ENCODING,
    "CP65001": UTF8_ENCODING,
    "MICROSOFT-CP1251": "CP1251",
    "WINDOWS-1250": "CP1250",
    "WINDOWS-1251": "CP1251",
    "WINDOWS-1252": "CP1252",
    "LATIN1": "ISO8859-1",
    "LATIN-1": "ISO8859-1",
    "LATIN2": "ISO8859-2",
    "LATIN-2": "ISO8859-2",
    "LATIN9": "ISO8859-15",
    "LATIN-9": "ISO8859-15",
    "KOI8R": "KOI8-R",
    "KOI8U": "KOI8-U",
    "TIS620": "TIS620-2533",
    "TIS-620": "TIS620-2533",
}

# Mapping from canonical encoding names to Python codec names
ENCODING_TO_CODEC: dict[str, str] = {
    UTF8_ENCODING: "utf-8",
    "KOI8-R": "koi8-r",
    "KOI8-U": "koi8-u",
    "TIS620-2533": "tis-620",
}

_MICROSOFT_PREFIX = "MICROSOFT-"
_ISO8859_PATTERN = re.compile(r"ISO[-_ ]?8859[-_ ]?(\d{1,2})")


def normalize_encoding_name(name: str | None) -> str:
    """Return the canonical spelling of an encoding name.

    Unknown names are not rejected; they come back trimmed and uppercased.

    Args:
        name: Raw encoding name, alias or None.

    Returns:
        Canonical encoding name, or an empty string for empty input.
    """
    if not name:
        return ""

    normalized = name.strip().upper()
    if normalized in ENCODING_ALIASES:
        return ENCODING_ALIASES[normalized]

    if normalized.startswith(_MICROSOFT_PREFIX):
        normalized = normalized[len(_MICROSOFT_PREFIX) :]

    match = _ISO8859_PATTERN.fullmatch(normalized)
    if match:
        return f"ISO8859-{int(match.group(1))}"

    return normalized


@dataclass(frozen=True)
class Encoding:
    """Canonical encoding name.

    Built from any alias; an Encoding built from an empty name is falsy and
    reports the default single-byte encoding from ``value_or_default()``.
    """

    name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", normalize_encoding_name(self.name))

    def __bool__(self) -> bool:
        return bool(self.name)

    def __str__(self) -> str:
        return self.name

    def value(self) -> str:
        """Return the canonical name (empty when built from an empty name)."""
        return self.name

    def value_or_default(self) -> str:
        """Return the canonical name, or ``ISO8859-1`` when empty."""
        return self.name or DEFAULT_ENCODING

    def is_utf8(self) -> bool:
        """Return True if this is the UTF-8 encoding."""
        return self.name == UTF8_ENCODING


def get_codec_name(encoding: Encoding | str) -> str:
    """Get the Python codec name for an encoding.

    Args:
        encoding: Encoding or raw encoding name. Empty names resolve to the
            default encoding.

    Returns:
        Python codec name. Unknown encodings are returned lowercased and may
        not exist in the codec registry.
    """
    if not isinstance(encoding, Encoding):
        encoding = Encoding(encoding)
    canonical = encoding.value_or_default()

    if canonical in ENCODING_TO_CODEC:
        return ENCODING_TO_CODEC[canonical]

    if canonical.startswith("ISO8859-"):
        return f"iso8859-{canonical.split('-')[-1]}"

    if canonical.startswith("CP") and canonical[2:].isdigit():
        return f"cp{canonical[2:]}"

    return canonical.lower()
