"""Text normalizer: one encoding, codec, locale and casing service wired together."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging

from .casing import (
    DEFAULT_CASING_SERVICE,
    Casing,
    CasingService,
    classify_casing,
    to_lower,
    to_title,
    to_upper,
)
from .config import NormalizerConfig
from .const import DEFAULT_REPLACEMENT
from .locale_tag import LocaleTag
from .text_utils import (
    CodecContext,
    Encoding,
    TranscodeOutcome,
    TranscodeResult,
    decode_bytes,
    encode_text,
    get_codec_context,
)

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalizedWord:
    """A decoded word with its casing class."""

    text: str
    casing: Casing
    outcome: TranscodeOutcome


@dataclass(frozen=True)
class TextNormalizer:
    """Decode, encode and case words under fixed settings.

    Instances are immutable and may be shared between threads.
    """

    encoding: Encoding
    codec: CodecContext
    locale: LocaleTag = field(default_factory=LocaleTag)
    casing: CasingService = DEFAULT_CASING_SERVICE
    replacement: str = DEFAULT_REPLACEMENT

    @classmethod
    def from_config(
        cls, config: NormalizerConfig, casing: CasingService | None = None
    ) -> TextNormalizer:
        """Create a normalizer from configuration.

        The encoding comes from the config, else from the locale's codeset,
        else defaults to ISO8859-1.
        """
        locale = LocaleTag.parse(config.locale)
        encoding = Encoding(config.encoding) if config.encoding else locale.encoding
        codec = get_codec_context(encoding)
        _LOGGER.debug("Normalizer for locale '%s' using %s", locale, codec.name)
        return cls(
            encoding=encoding,
            codec=codec,
            locale=locale,
            casing=casing or DEFAULT_CASING_SERVICE,
            replacement=config.replacement,
        )

    def decode(self, data: bytes | bytearray) -> TranscodeResult[str]:
        """Decode bytes with the configured codec."""
        return decode_bytes(data, self.codec)

    def encode(self, text: str) -> TranscodeResult[bytes]:
        """Encode text with the configured codec, substituting unmappable characters."""
        return encode_text(text, self.codec, self.replacement)

    def classify(self, word: str) -> Casing:
        """Classify the casing of a word."""
        return classify_casing(word, self.locale, self.casing)

    def upper(self, word: str) -> str:
        """Uppercase a word for the configured locale."""
        return to_upper(word, self.locale, self.casing)

    def lower(self, word: str) -> str:
        """Lowercase a word for the configured locale."""
        return to_lower(word, self.locale, self.casing)

    def title(self, word: str) -> str:
        """Titlecase a word for the configured locale."""
        return to_title(word, self.locale, self.casing)

    def normalize_word(self, data: bytes | bytearray) -> NormalizedWord:
        """Decode a raw word and classify its casing.

        Undecodable input is not an error: the word is classified on the text
        decoded before the bad bytes and the outcome is FAILED.
        """
        result = self.decode(data)
        return NormalizedWord(
            text=result.value,
            casing=self.classify(result.value),
            outcome=result.outcome,
        )
