# tests/test_registry.py
from __future__ import annotations

from cld2xref.encoding import Encoding
from cld2xref.language import Language
from cld2xref.registry import (
    encoding_from_charset,
    get_charset_map,
    get_locale_map,
    iso639_3,
    language_from_locale,
)


def test_catalogs_are_cached():
    assert get_locale_map() is get_locale_map()
    assert get_charset_map() is get_charset_map()


def test_language_from_locale():
    assert language_from_locale("pt-BR") is Language.PORTUGUESE
    assert language_from_locale("fr_FR") is Language.FRENCH
    assert language_from_locale("ja-JP") is Language.JAPANESE
    assert language_from_locale("not a locale") is Language.UNKNOWN_LANGUAGE


def test_encoding_from_charset():
    assert encoding_from_charset("EUC-JP") is Encoding.JAPANESE_EUC_JP
    assert encoding_from_charset("utf8") is Encoding.UTF8
    assert encoding_from_charset("x-unknown") is Encoding.UNKNOWN_ENCODING


def test_iso639_3():
    assert iso639_3(Language.FRENCH) == "fra"
    assert iso639_3(Language.NDEBELE) == "nbl"
    assert iso639_3(Language.UNKNOWN_LANGUAGE) is None
