# Configuration keys
CONF_ENCODING = "encoding"
CONF_LOCALE = "locale"
CONF_REPLACEMENT = "replacement"

# Canonical encoding names
UTF8_ENCODING = "UTF-8"
DEFAULT_ENCODING = "ISO8859-1"

# Default values
DEFAULT_LOCALE = ""
DEFAULT_REPLACEMENT = "?"

# Locale codesets that carry no region or language (treated as the root locale)
POSIX_LOCALES: frozenset[str] = frozenset({"C", "POSIX"})

# Encodings commonly named in spell-checking dictionaries (SET directive)
DICTIONARY_ENCODINGS: list[str] = [
    "UTF-8",
    "ISO8859-1",
    "ISO8859-2",
    "ISO8859-3",
    "ISO8859-4",
    "ISO8859-5",
    "ISO8859-6",
    "ISO8859-7",
    "ISO8859-8",
    "ISO8859-9",
    "ISO8859-10",
    "ISO8859-13",
    "ISO8859-14",
    "ISO8859-15",
    "KOI8-R",
    "KOI8-U",
    "CP1251",
    "TIS620-2533",
]
