"""Locale-sensitive case transforms.

Each call takes its own locale; nothing is remembered between calls.
"""

from __future__ import annotations

from ..locale_tag import LocaleTag
from .service import DEFAULT_CASING_SERVICE, CasingService


def to_upper(
    word: str,
    locale: LocaleTag | str | None = None,
    service: CasingService | None = None,
) -> str:
    """Uppercase a word for a locale (``istanbul`` -> ``İSTANBUL`` in tr_TR)."""
    return (service or DEFAULT_CASING_SERVICE).to_upper(word, LocaleTag.parse(locale))


def to_lower(
    word: str,
    locale: LocaleTag | str | None = None,
    service: CasingService | None = None,
) -> str:
    """Lowercase a word for a locale (``İSTANBUL`` -> ``istanbul`` in tr_TR)."""
    return (service or DEFAULT_CASING_SERVICE).to_lower(word, LocaleTag.parse(locale))


def to_title(
    word: str,
    locale: LocaleTag | str | None = None,
    service: CasingService | None = None,
) -> str:
    """Titlecase a word as one unit.

    The first cased character is titlecased and the rest lowercased; in
    Dutch a leading ``ij`` becomes ``IJ``.

    Args:
        word: Word to transform.
        locale: Locale tag, e.g. "tr_TR" (root locale if omitted).
        service: Casing service to delegate to.

    Returns:
        Titlecased word.
    """
    return (service or DEFAULT_CASING_SERVICE).to_title(word, LocaleTag.parse(locale))
