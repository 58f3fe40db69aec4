"""Typed access to the CLD2 language detector and its catalogs."""

from __future__ import annotations

from cld2xref._utils import encode_native
from cld2xref.detector import NO_HINTS, DetectionHints, detect, version
from cld2xref.encoding import NUM_ENCODINGS, Encoding
from cld2xref.enums import Flags
from cld2xref.language import (
    Language,
    language_code,
    language_from_code,
    language_from_name,
    language_name,
)
from cld2xref.registry import (
    encoding_from_charset,
    get_charset_map,
    get_locale_map,
    iso639_3,
    language_from_locale,
)
from cld2xref.result import Candidate, DetectionResult

__version__ = "1.0.0"
__all__ = [
    "NO_HINTS",
    "NUM_ENCODINGS",
    "Candidate",
    "DetectionHints",
    "DetectionResult",
    "Encoding",
    "Flags",
    "Language",
    "detect",
    "encode_native",
    "encoding_from_charset",
    "get_charset_map",
    "get_locale_map",
    "iso639_3",
    "language_code",
    "language_from_code",
    "language_from_locale",
    "language_from_name",
    "language_name",
    "version",
]
