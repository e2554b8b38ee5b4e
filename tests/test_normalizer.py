"""Tests for the TextNormalizer facade."""

from spellnorm.casing import Casing
from spellnorm.config import NormalizerConfig
from spellnorm.normalizer import TextNormalizer
from spellnorm.text_utils import UTF8_CODEC_CONTEXT, Encoding, TranscodeOutcome


class TestFromConfig:
    """Tests for TextNormalizer.from_config."""

    def test_encoding_from_locale(self) -> None:
        normalizer = TextNormalizer.from_config(NormalizerConfig(locale="tr_TR.UTF-8"))
        assert normalizer.encoding == Encoding("UTF-8")
        assert normalizer.codec is UTF8_CODEC_CONTEXT
        assert normalizer.locale.icu_id == "tr_TR"

    def test_explicit_encoding_wins(self) -> None:
        config = NormalizerConfig(encoding="microsoft-cp1251", locale="ru_RU.UTF-8")
        normalizer = TextNormalizer.from_config(config)
        assert normalizer.codec.name == "CP1251"

    def test_default_encoding(self) -> None:
        normalizer = TextNormalizer.from_config(NormalizerConfig())
        assert normalizer.codec.name == "ISO8859-1"
        assert normalizer.locale.is_root


class TestTextNormalizer:
    """Tests for TextNormalizer operations."""

    def test_turkish_words(self) -> None:
        normalizer = TextNormalizer.from_config(NormalizerConfig(locale="tr_TR.UTF-8"))
        assert normalizer.title("istanbul") == "İstanbul"
        assert normalizer.upper("istanbul") == "İSTANBUL"
        assert normalizer.lower("İSTANBUL") == "istanbul"
        assert normalizer.classify("İstanbul") is Casing.INIT_CAPITAL

    def test_normalize_word(self) -> None:
        normalizer = TextNormalizer.from_config(NormalizerConfig(locale="nl_NL.UTF-8"))
        word = normalizer.normalize_word("IJsselmeer".encode())
        assert word.text == "IJsselmeer"
        assert word.casing is Casing.PASCAL
        assert word.outcome is TranscodeOutcome.EXACT

    def test_normalize_word_with_bad_bytes(self) -> None:
        normalizer = TextNormalizer.from_config(NormalizerConfig(encoding="UTF-8"))
        word = normalizer.normalize_word(b"Ab\xf0")
        assert word.text == "Ab"
        assert word.casing is Casing.INIT_CAPITAL
        assert word.outcome is TranscodeOutcome.FAILED

    def test_single_byte_round_trip(self) -> None:
        normalizer = TextNormalizer.from_config(NormalizerConfig(encoding="CP1251", locale="ru_RU"))
        encoded = normalizer.encode("Привет")
        assert encoded.outcome is TranscodeOutcome.EXACT
        assert normalizer.decode(encoded.value).value == "Привет"

    def test_lossy_encode_uses_configured_replacement(self) -> None:
        config = NormalizerConfig(encoding="CP1251", replacement="_")
        normalizer = TextNormalizer.from_config(config)
        result = normalizer.encode("aß")
        assert result.value == b"a_"
        assert result.outcome is TranscodeOutcome.LOSSY
