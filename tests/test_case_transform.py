"""Tests for locale-sensitive case transforms backed by ICU."""

import pytest

from spellnorm.casing import IcuCasingService, to_lower, to_title, to_upper
from spellnorm.locale_tag import LocaleTag


class TestToUpper:
    """Tests for to_upper."""

    @pytest.mark.parametrize(
        ("word", "expected"),
        [
            ("", ""),
            ("a", "A"),
            ("A", "A"),
            ("aa", "AA"),
            ("aA", "AA"),
            ("Aa", "AA"),
            ("table", "TABLE"),
            ("tABLE", "TABLE"),
        ],
    )
    def test_root(self, word: str, expected: str) -> None:
        assert to_upper(word) == expected

    def test_root_keeps_dotless_capital(self) -> None:
        assert to_upper("istanbul") == "ISTANBUL"
        assert to_upper("istanbul") != "İSTANBUL"

    def test_turkish(self) -> None:
        assert to_upper("istanbul", "tr_TR") == "İSTANBUL"
        assert to_upper("Istanbul", "tr_TR") != "İSTANBUL"
        assert to_upper("Diyarbakır", "tr_TR") == "DİYARBAKIR"

    def test_german(self) -> None:
        assert to_upper("GRÜßEN", "de_DE") == "GRÜSSEN"
        assert to_upper("GRÜẞEN", "de_DE") == "GRÜẞEN"

    @pytest.mark.parametrize(
        ("word", "expected"),
        [
            ("één", "ÉÉN"),
            ("Één", "ÉÉN"),
            ("ijsselmeer", "IJSSELMEER"),
            ("IJsselmeer", "IJSSELMEER"),
            ("ĳsselmeer", "ĲSSELMEER"),
            ("Ĳsselmeer", "ĲSSELMEER"),
        ],
    )
    def test_dutch(self, word: str, expected: str) -> None:
        assert to_upper(word, "nl_NL") == expected

    def test_greek_final_sigma(self) -> None:
        assert to_upper("ς", "el_GR") == "Σ"


class TestToLower:
    """Tests for to_lower."""

    @pytest.mark.parametrize(
        ("word", "expected"),
        [("", ""), ("A", "a"), ("aA", "aa"), ("AA", "aa"), ("Table", "table"), ("TABLE", "table")],
    )
    def test_english(self, word: str, expected: str) -> None:
        assert to_lower(word, "en_US") == expected

    def test_english_keeps_combining_dot(self) -> None:
        assert to_lower("İSTANBUL", "en_US") != "istanbul"
        assert to_lower("İstanbul", "en_US") == "i\u0307stanbul"

    def test_turkish(self) -> None:
        assert to_lower("İSTANBUL", "tr_TR") == "istanbul"
        assert to_lower("İstanbul", "tr_TR") == "istanbul"
        assert to_lower("Diyarbakır", "tr_TR") == "diyarbakır"

    def test_greek(self) -> None:
        assert to_lower("ελλάδα", "el_GR") == "ελλάδα"
        assert to_lower("Ελλάδα", "el_GR") == "ελλάδα"
        assert to_lower("ΕΛΛΆΔΑ", "el_GR") == "ελλάδα"

    def test_german(self) -> None:
        assert to_lower("grüßen", "de_DE") == "grüßen"
        assert to_lower("GRÜSSEN", "de_DE") == "grüssen"

    def test_dutch(self) -> None:
        assert to_lower("ÉÉN", "nl_NL") == "één"
        assert to_lower("IJSSELMEER", "nl_NL") == "ijsselmeer"
        assert to_lower("ĲSSELMEER", "nl_NL") == "ĳsselmeer"


class TestToTitle:
    """Tests for to_title."""

    @pytest.mark.parametrize(
        ("word", "expected"),
        [
            ("", ""),
            ("a", "A"),
            ("aa", "Aa"),
            ("aA", "Aa"),
            ("AA", "Aa"),
            ("table", "Table"),
            ("tABLE", "Table"),
            ("TABLE", "Table"),
        ],
    )
    def test_english(self, word: str, expected: str) -> None:
        assert to_title(word, "en_US") == expected

    def test_english_istanbul(self) -> None:
        assert to_title("istanbul", "en_US") == "Istanbul"
        assert to_title("iSTANBUL", "en_US") != "İstanbul"
        assert to_title("İSTANBUL", "en_US") == "İstanbul"
        assert to_title("ISTANBUL", "en_US") == "Istanbul"

    def test_root_istanbul(self) -> None:
        assert to_title("istanbul") == "Istanbul"

    def test_turkish(self) -> None:
        assert to_title("istanbul", "tr_TR") == "İstanbul"
        assert to_title("iSTANBUL", "tr_TR") == "İstanbul"
        assert to_title("İSTANBUL", "tr_TR") == "İstanbul"
        assert to_title("ISTANBUL", "tr_TR") == "Istanbul"
        assert to_title("diyarbakır", "tr_TR") == "Diyarbakır"

    @pytest.mark.parametrize("locale", ["tr_CY", "az_AZ", "az_IR"])
    def test_turkic_variants(self, locale: str) -> None:
        assert to_title("istanbul", locale) == "İstanbul"

    def test_crimean_tatar_follows_locale_data(self) -> None:
        assert to_title("istanbul", "crh_UA") == "Istanbul"

    def test_greek(self) -> None:
        assert to_title("ελλάδα", "el_GR") == "Ελλάδα"
        assert to_title("ΕΛΛΆΔΑ", "el_GR") == "Ελλάδα"
        assert to_title("σίγμα", "el_GR") == "Σίγμα"
        assert to_title("ςίγμα", "el_GR") == "Σίγμα"

    def test_german(self) -> None:
        assert to_title("grüßen", "de_DE") == "Grüßen"
        assert to_title("GRÜßEN", "de_DE") == "Grüßen"

    @pytest.mark.parametrize(
        ("word", "expected"),
        [
            ("één", "Één"),
            ("ÉÉN", "Één"),
            ("ijsselmeer", "IJsselmeer"),
            ("Ijsselmeer", "IJsselmeer"),
            ("iJsselmeer", "IJsselmeer"),
            ("IJSSELMEER", "IJsselmeer"),
            ("ĳsselmeer", "Ĳsselmeer"),
            ("ĲSSELMEER", "Ĳsselmeer"),
        ],
    )
    def test_dutch(self, word: str, expected: str) -> None:
        assert to_title(word, "nl_NL") == expected

    @pytest.mark.parametrize(
        ("word", "locale", "expected"),
        [
            ("hello WORLD", "en_US", "Hello world"),
            ("a?b", "en_US", "A?b"),
            ("x! yz", "en_US", "X! yz"),
            ("end. START", "en_US", "End. start"),
            ("ijs? sel! meer", "nl_NL", "IJs? sel! meer"),
            ("istanbul X! Y", "tr_TR", "İstanbul x! y"),
        ],
    )
    def test_whole_input_is_one_unit(self, word: str, locale: str, expected: str) -> None:
        assert to_title(word, locale) == expected


class TestLocalePerCall:
    """Locale settings never leak from one call to the next."""

    def test_alternating_locales(self) -> None:
        service = IcuCasingService()
        turkish = LocaleTag.parse("tr_TR")
        root = LocaleTag()
        assert service.to_upper("i", turkish) == "İ"
        assert service.to_upper("i", root) == "I"
        assert service.to_upper("i", turkish) == "İ"

    def test_letter_tests(self) -> None:
        service = IcuCasingService()
        root = LocaleTag()
        assert service.is_upper_letter("İ", root)
        assert service.is_lower_letter("ı", root)
        assert not service.is_upper_letter("3", root)
        assert not service.is_lower_letter("_", root)
