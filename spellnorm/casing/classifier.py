"""Word casing classification."""

from __future__ import annotations

from enum import Enum

from ..locale_tag import LocaleTag
from .service import DEFAULT_CASING_SERVICE, CasingService


class Casing(Enum):
    """Letter-case pattern of a word."""

    SMALL = "small"
    INIT_CAPITAL = "init_capital"
    ALL_CAPITAL = "all_capital"
    CAMEL = "camel"
    PASCAL = "pascal"


def classify_casing(
    word: str,
    locale: LocaleTag | str | None = None,
    service: CasingService | None = None,
) -> Casing:
    """Classify the letter-case pattern of a word.

    Only letters count; digits and punctuation are skipped. A single
    uppercase first letter is INIT_CAPITAL, even when it is the only letter.

    Args:
        word: Word to classify.
        locale: Locale for the letter tests (root locale if omitted).
        service: Casing service providing the letter tests.

    Returns:
        SMALL when no letter is uppercase, INIT_CAPITAL when only the first
        letter is, ALL_CAPITAL when no letter is lowercase, otherwise PASCAL
        or CAMEL depending on the first letter.
    """
    service = service or DEFAULT_CASING_SERVICE
    locale = LocaleTag.parse(locale)

    upper = 0
    lower = 0
    first_is_upper: bool | None = None
    for char in word:
        if service.is_upper_letter(char, locale):
            upper += 1
            if first_is_upper is None:
                first_is_upper = True
        elif service.is_lower_letter(char, locale):
            lower += 1
            if first_is_upper is None:
                first_is_upper = False

    if upper == 0:
        return Casing.SMALL
    if upper == 1 and first_is_upper:
        return Casing.INIT_CAPITAL
    if lower == 0:
        return Casing.ALL_CAPITAL
    if first_is_upper:
        return Casing.PASCAL
    return Casing.CAMEL


def has_uppercase_at_compound_word_boundary(
    word: str,
    index: int,
    locale: LocaleTag | str | None = None,
    service: CasingService | None = None,
) -> bool:
    """Check for a case change at the boundary before ``word[index]``.

    True when one side of the boundary is an uppercase letter and the other
    side is any letter, as in "fooBar" at index 3.
    """
    if index <= 0 or index >= len(word):
        return False
    service = service or DEFAULT_CASING_SERVICE
    locale = LocaleTag.parse(locale)

    before = word[index - 1]
    after = word[index]
    if service.is_upper_letter(after, locale):
        return service.is_letter(before, locale)
    if service.is_upper_letter(before, locale):
        return service.is_letter(after, locale)
    return False
