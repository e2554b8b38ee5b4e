"""Casing service: locale-aware letter tests and case mappings.

The case mapping tables are not owned here. IcuCasingService hands every
mapping to ICU (through PyICU) with the caller's locale, so tailorings such
as Turkish dotted/dotless i, Dutch IJ and Greek final sigma come straight
from the ICU locale data. Quirks in that data are passed through unchanged.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import unicodedata

import icu

from ..locale_tag import LocaleTag


class CasingService(ABC):
    """Abstract locale-parameterized casing capability."""

    @abstractmethod
    def is_letter(self, char: str, locale: LocaleTag) -> bool:
        """Return True if char is a letter of any case."""

    @abstractmethod
    def is_upper_letter(self, char: str, locale: LocaleTag) -> bool:
        """Return True if char is an uppercase letter."""

    @abstractmethod
    def is_lower_letter(self, char: str, locale: LocaleTag) -> bool:
        """Return True if char is a lowercase letter."""

    @abstractmethod
    def to_upper(self, text: str, locale: LocaleTag) -> str:
        """Map text to uppercase."""

    @abstractmethod
    def to_lower(self, text: str, locale: LocaleTag) -> str:
        """Map text to lowercase."""

    @abstractmethod
    def to_title(self, text: str, locale: LocaleTag) -> str:
        """Titlecase text as a single unit."""


class IcuCasingService(CasingService):
    """Casing service backed by ICU.

    Letter tests use the Unicode general category (L*, Lu, Ll), which is
    the same for every locale: Turkish İ is an uppercase letter everywhere.
    ICU objects are created per call; the service itself holds no state.
    """

    @staticmethod
    def _icu_locale(locale: LocaleTag) -> icu.Locale:
        return icu.Locale(locale.icu_id)

    def is_letter(self, char: str, locale: LocaleTag) -> bool:
        return unicodedata.category(char).startswith("L")

    def is_upper_letter(self, char: str, locale: LocaleTag) -> bool:
        return unicodedata.category(char) == "Lu"

    def is_lower_letter(self, char: str, locale: LocaleTag) -> bool:
        return unicodedata.category(char) == "Ll"

    def to_upper(self, text: str, locale: LocaleTag) -> str:
        if not text:
            return text
        return str(icu.UnicodeString(text).toUpper(self._icu_locale(locale)))

    def to_lower(self, text: str, locale: LocaleTag) -> str:
        if not text:
            return text
        return str(icu.UnicodeString(text).toLower(self._icu_locale(locale)))

    def to_title(self, text: str, locale: LocaleTag) -> str:
        if not text:
            return text
        # Whole-string titlecasing: only the first cased character (or Dutch
        # IJ) is titlecased, whatever punctuation follows.
        icu_locale = self._icu_locale(locale)
        return str(icu.CaseMap.toTitle(icu_locale, icu.U_TITLECASE_WHOLE_STRING, text))


DEFAULT_CASING_SERVICE: CasingService = IcuCasingService()
