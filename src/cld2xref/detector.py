"""Language detection through the CLD2 native library."""

from __future__ import annotations

import dataclasses
import importlib.metadata
import logging

import pycld2

from cld2xref._utils import encode_native, strip_terminator
from cld2xref.encoding import Encoding
from cld2xref.enums import FLAG_KEYWORDS, Flags
from cld2xref.language import Language, language_from_code, language_from_name
from cld2xref.registry import encoding_from_charset
from cld2xref.result import Candidate, DetectionResult

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class DetectionHints:
    """Context from outside the text, e.g. from the HTTP response or URL.

    :param content_language: Value of a Content-Language header or
        ``<html lang>`` attribute: comma-separated language names or codes
        (``"en, ja"``, ``"en-US,zh_CN"``, ``"Japanese,English"``).
    :param top_level_domain: Top-level domain of the source, e.g. ``"jp"``.
    :param encoding: Declared character set of the original document, as any
        Python codec name or alias (``"EUC-JP"``, ``"big5"``).
    :param language: A language the text is expected to be in.
    """

    content_language: str | None = None
    top_level_domain: str | None = None
    encoding: str | None = None
    language: Language = Language.UNKNOWN_LANGUAGE


NO_HINTS = DetectionHints()


def version() -> str:
    """Return the version of the installed CLD2 binding."""
    return importlib.metadata.version("pycld2")


def _hint_keywords(hints: DetectionHints) -> dict[str, str]:
    """Translate *hints* into keyword arguments for :func:`pycld2.detect`."""
    keywords: dict[str, str] = {}
    if hints.content_language:
        keywords["hintLanguageHTTPHeaders"] = hints.content_language
    if hints.top_level_domain:
        keywords["hintTopLevelDomain"] = hints.top_level_domain
    if hints.language != Language.UNKNOWN_LANGUAGE:
        keywords["hintLanguage"] = hints.language.code
    if hints.encoding:
        encoding = encoding_from_charset(hints.encoding)
        if encoding == Encoding.UNKNOWN_ENCODING:
            logger.debug("No CLD2 encoding for charset hint %s", hints.encoding)
        elif encoding.name not in pycld2.ENCODINGS:
            logger.debug("CLD2 binding does not accept encoding hint %s", encoding.name)
        else:
            keywords["hintEncoding"] = encoding.name
    return keywords


def _flag_keywords(flags: Flags) -> dict[str, bool]:
    return {keyword: flag in flags for flag, keyword in FLAG_KEYWORDS.items()}


def _to_language(name: str, code: str) -> Language:
    language = language_from_code(code)
    if language == Language.UNKNOWN_LANGUAGE:
        language = language_from_name(name)
    return language


def detect(
    data: str | bytes | bytearray,
    is_plain_text: bool = True,
    hints: DetectionHints | None = None,
    flags: Flags = Flags.NONE,
) -> DetectionResult:
    """Detect the languages of a text.

    :param data: The text, either as :class:`str` or as NUL-terminated UTF-8
        bytes (see :func:`cld2xref.encode_native`).
    :param is_plain_text: ``False`` if *data* is an HTML document; markup is
        then skipped.
    :param hints: Optional context from outside the text.
    :param flags: Modifies the behaviour of the detector.
    :returns: The up to three detected languages, unpruned.
    :raises ValueError: If *data* is not valid UTF-8.
    """
    if isinstance(data, str):
        data = encode_native(data)
    text = strip_terminator(data)
    keywords: dict[str, str | bool] = {}
    keywords.update(_hint_keywords(hints or NO_HINTS))
    keywords.update(_flag_keywords(Flags(flags)))

    try:
        reliable, text_bytes, details = pycld2.detect(
            text, isPlainText=is_plain_text, **keywords
        )
    except pycld2.error as e:
        msg = f"cannot detect language: {e}"
        raise ValueError(msg) from e

    candidates = tuple(
        Candidate(
            language=_to_language(name, code),
            percent=int(percent),
            normalized_score=float(score),
        )
        for name, code, percent, score in details
    )
    best = candidates[0].language if candidates else Language.UNKNOWN_LANGUAGE
    return DetectionResult(
        candidates=candidates,
        text_bytes=int(text_bytes),
        reliable=bool(reliable),
        language=best,
    )
