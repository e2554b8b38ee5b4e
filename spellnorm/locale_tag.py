"""Locale tags in POSIX/ICU form: ``language[_Script][_REGION][.codeset][@modifier]``."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import re

from .const import POSIX_LOCALES
from .text_utils.codec_context import CodecContext, get_codec_context
from .text_utils.encoding import Encoding

_LOGGER = logging.getLogger(__name__)

_LOCALE_PATTERN = re.compile(
    r"(?P<language>[A-Za-z]{2,8})"
    r"(?:[_-](?P<script>[A-Za-z]{4}))?"
    r"(?:[_-](?P<region>[A-Za-z]{2}|\d{3}))?"
    r"(?:\.(?P<codeset>[^@]*))?"
    r"(?:@(?P<modifier>.*))?"
)


@dataclass(frozen=True)
class LocaleTag:
    """Parsed locale identifier.

    An all-empty tag is the root locale. Tags carry no state beyond their
    fields and are passed explicitly to every locale-sensitive call.
    """

    language: str = ""
    script: str = ""
    region: str = ""
    codeset: str = ""
    modifier: str = ""

    @classmethod
    def parse(cls, raw: LocaleTag | str | None) -> LocaleTag:
        """Parse a locale string such as ``tr_TR``, ``nl-NL`` or ``de_DE.UTF-8@euro``.

        ``C``, ``POSIX`` and empty strings give the root locale (keeping any
        codeset). Strings that are not locale identifiers also give the root
        locale, with a warning.
        """
        if isinstance(raw, LocaleTag):
            return raw
        if not raw:
            return cls()

        raw = raw.strip()
        base, _, modifier = raw.partition("@")
        base, _, codeset = base.partition(".")
        if base.upper() in POSIX_LOCALES or not base:
            return cls(codeset=codeset, modifier=modifier)

        match = _LOCALE_PATTERN.fullmatch(raw)
        if match is None:
            _LOGGER.warning("Unrecognized locale '%s', using the root locale", raw)
            return cls()

        return cls(
            language=match.group("language").lower(),
            script=(match.group("script") or "").title(),
            region=(match.group("region") or "").upper(),
            codeset=match.group("codeset") or "",
            modifier=match.group("modifier") or "",
        )

    def __str__(self) -> str:
        tag = self.icu_id
        if self.codeset:
            tag = f"{tag}.{self.codeset}"
        if self.modifier:
            tag = f"{tag}@{self.modifier}"
        return tag

    @property
    def is_root(self) -> bool:
        """True for the root (language-neutral) locale."""
        return not self.language

    @property
    def icu_id(self) -> str:
        """ICU locale id, e.g. ``tr_TR`` or ``sr_Latn_RS``; empty for root."""
        return "_".join(part for part in (self.language, self.script, self.region) if part)

    @property
    def encoding(self) -> Encoding:
        """Encoding named by the codeset part (empty if none)."""
        return Encoding(self.codeset)

    @property
    def is_utf8(self) -> bool:
        """True if the locale's codeset is known to be UTF-8."""
        return self.encoding.is_utf8()


def codec_context_for_locale(locale: LocaleTag | str | None) -> CodecContext:
    """Get the codec context named by a locale's codeset.

    Locales without a codeset use the default single-byte encoding.
    """
    return get_codec_context(LocaleTag.parse(locale).encoding)
