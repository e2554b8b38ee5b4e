"""Configuration dataclass and validation schema for text normalizers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import voluptuous as vol

from .const import (
    CONF_ENCODING,
    CONF_LOCALE,
    CONF_REPLACEMENT,
    DEFAULT_LOCALE,
    DEFAULT_REPLACEMENT,
)
from .errors import InvalidConfigError

CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_ENCODING, default=""): vol.Any(None, str),
        vol.Optional(CONF_LOCALE, default=DEFAULT_LOCALE): vol.Any(None, str),
        vol.Optional(CONF_REPLACEMENT, default=DEFAULT_REPLACEMENT): vol.All(
            str, vol.Match(r"[\x20-\x7e]\Z", msg="replacement must be one printable ASCII character")
        ),
    }
)


@dataclass(frozen=True)
class NormalizerConfig:
    """Settings shared by every word a normalizer processes.

    Attributes:
        encoding: Encoding name or alias of incoming bytes; empty selects the
            locale's codeset, then ISO8859-1.
        locale: Locale tag for casing, e.g. "tr_TR" or "nl_NL.UTF-8".
        replacement: Byte written for characters the encoding cannot represent.
    """

    encoding: str = ""
    locale: str = DEFAULT_LOCALE
    replacement: str = DEFAULT_REPLACEMENT

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> NormalizerConfig:
        """Validate a configuration mapping and build a config from it.

        Raises:
            InvalidConfigError: If the mapping does not match CONFIG_SCHEMA.
        """
        try:
            validated = CONFIG_SCHEMA(dict(data))
        except vol.Invalid as err:
            raise InvalidConfigError(str(err)) from err
        return cls(
            encoding=validated[CONF_ENCODING] or "",
            locale=validated[CONF_LOCALE] or DEFAULT_LOCALE,
            replacement=validated[CONF_REPLACEMENT],
        )

    def as_dict(self) -> dict[str, str]:
        """Return the config as a mapping accepted by from_dict()."""
        return {
            CONF_ENCODING: self.encoding,
            CONF_LOCALE: self.locale,
            CONF_REPLACEMENT: self.replacement,
        }
