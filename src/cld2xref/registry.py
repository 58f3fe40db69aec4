"""Process-wide locale and charset catalogs.

Both catalogs are built on first use and never change afterwards, so any
number of threads may read them without further locking.
"""

from __future__ import annotations

import threading

from cld2xref.charsets import CharsetMap, CharsetResolver
from cld2xref.encoding import Encoding
from cld2xref.language import Language
from cld2xref.locales import LocaleMap, LocaleResolver

_LOCALE_MAP: LocaleMap | None = None
_LOCALE_MAP_LOCK = threading.Lock()
_CHARSET_MAP: CharsetMap | None = None
_CHARSET_MAP_LOCK = threading.Lock()


def get_locale_map() -> LocaleMap:
    """Return the language/locale catalog, building it on first call."""
    global _LOCALE_MAP  # noqa: PLW0603
    if _LOCALE_MAP is not None:
        return _LOCALE_MAP
    with _LOCALE_MAP_LOCK:
        if _LOCALE_MAP is None:
            _LOCALE_MAP = LocaleResolver().build()
        return _LOCALE_MAP


def get_charset_map() -> CharsetMap:
    """Return the encoding/charset catalog, building it on first call."""
    global _CHARSET_MAP  # noqa: PLW0603
    if _CHARSET_MAP is not None:
        return _CHARSET_MAP
    with _CHARSET_MAP_LOCK:
        if _CHARSET_MAP is None:
            _CHARSET_MAP = CharsetResolver().build()
        return _CHARSET_MAP


def language_from_locale(tag: str) -> Language:
    """Return the CLD2 language of a locale tag, or ``UNKNOWN_LANGUAGE``."""
    return get_locale_map().language_for(tag)


def encoding_from_charset(name: str) -> Encoding:
    """Return the CLD2 encoding of a codec name or alias, or ``UNKNOWN_ENCODING``."""
    return get_charset_map().encoding_for(name)


def iso639_3(language: Language) -> str | None:
    """Return the ISO 639-3 code of *language*, including back-filled ones."""
    return get_locale_map().iso639_3_for(language)
