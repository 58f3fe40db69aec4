"""Mapping between CLD2 encodings and the interpreter's codecs.

CLD2 and Python name their encodings independently.  The mapping is built
with an ordered list of match strategies, first hit wins:

1. a small seed table of charsets whose names do not line up at all,
2. the encoding's enumeration name, as is,
3. the enumeration name normalized (no separators, lower-case),
4. the normalized name with CLD2's language prefix removed
   (``JAPANESE_EUC_JP`` -> ``eucjp``),
5. a direct :func:`codecs.lookup` of the enumeration name.

Encodings that no strategy matches simply have no charset.
"""

from __future__ import annotations

import codecs
import dataclasses
import encodings
import logging
import pkgutil
import re
from collections.abc import Callable, Iterable, Mapping
from encodings.aliases import aliases as _CODEC_ALIASES
from types import MappingProxyType

from cld2xref.encoding import Encoding

# Python charsets that the heuristics would miss or get wrong.
SEED_CHARSETS: dict[str, Encoding] = {
    "ascii": Encoding.ASCII_7BIT,
    "gb2312": Encoding.CHINESE_GB,
    "cp950": Encoding.CHINESE_BIG5_CP950,
    "cp932": Encoding.JAPANESE_CP932,
}

_LANGUAGE_PREFIX = re.compile(
    r"^(?:chinese|czech|japanese|korean|msft|russian|tam(?:il)?)_", re.IGNORECASE
)


def normalize_charset_name(name: str) -> str:
    """Normalize a charset or encoding name for alias matching."""
    return name.lower().replace("-", "").replace("_", "").replace(" ", "")


def available_charsets() -> dict[str, frozenset[str]]:
    """Return the interpreter's text codecs and their aliases.

    Keys are canonical codec names as reported by :func:`codecs.lookup`
    (``"euc_jp"``, ``"iso8859-1"``); values hold every other name the codec
    is registered under.
    """
    modules = {info.name for info in pkgutil.iter_modules(encodings.__path__)}
    modules.update(_CODEC_ALIASES.values())
    names: dict[str, set[str]] = {}
    for module in modules:
        try:
            canonical = codecs.lookup(module).name
        except LookupError:
            continue
        names.setdefault(canonical, set()).add(module)
    for alias, module in _CODEC_ALIASES.items():
        try:
            canonical = codecs.lookup(module).name
        except LookupError:
            continue
        names.setdefault(canonical, set()).add(alias)
    return {
        canonical: frozenset(a for a in found if a != canonical)
        for canonical, found in names.items()
    }


def match_exact(encoding: Encoding, index: Mapping[str, str]) -> str | None:
    """Match the enumeration name verbatim."""
    return index.get(encoding.name)


def match_normalized(encoding: Encoding, index: Mapping[str, str]) -> str | None:
    """Match the normalized enumeration name."""
    return index.get(normalize_charset_name(encoding.name))


def match_without_prefix(encoding: Encoding, index: Mapping[str, str]) -> str | None:
    """Match the normalized name after removing a language prefix."""
    stripped, count = _LANGUAGE_PREFIX.subn("", encoding.name, count=1)
    if not count:
        return None
    return index.get(normalize_charset_name(stripped))


def match_codec_lookup(encoding: Encoding, index: Mapping[str, str]) -> str | None:
    """Ask the codec registry for the enumeration name directly."""
    try:
        name = codecs.lookup(encoding.name).name
    except LookupError:
        return None
    return index.get(name)


MatchStrategy = Callable[[Encoding, Mapping[str, str]], str | None]

#: Heuristic strategies in order of precedence.
STRATEGIES: tuple[MatchStrategy, ...] = (
    match_exact,
    match_normalized,
    match_without_prefix,
    match_codec_lookup,
)


@dataclasses.dataclass(frozen=True, slots=True)
class CharsetMap:
    """Two-way mapping between CLD2 encodings and codec names."""

    charsets: Mapping[Encoding, str]
    encodings: Mapping[str, Encoding]

    def encoding_for(self, charset: str) -> Encoding:
        """Return the CLD2 encoding for any name or alias of a codec."""
        try:
            name = codecs.lookup(charset).name
        except LookupError:
            return Encoding.UNKNOWN_ENCODING
        return self.encodings.get(name, Encoding.UNKNOWN_ENCODING)

    def charset_for(self, encoding: Encoding) -> str | None:
        """Return the codec name for *encoding*, if one was matched."""
        return self.charsets.get(encoding)


class CharsetResolver:
    """Builds a :class:`CharsetMap` from the host codec catalog."""

    def __init__(
        self,
        charsets: Mapping[str, Iterable[str]] | None = None,
        strategies: Iterable[MatchStrategy] = STRATEGIES,
    ) -> None:
        """Initialize the resolver.

        :param charsets: Host charsets, canonical name -> aliases.  Defaults
            to :func:`available_charsets`.
        :param strategies: Heuristic match strategies, in precedence order.
        """
        if charsets is None:
            charsets = available_charsets()
        self._charsets = {name: frozenset(found) for name, found in charsets.items()}
        self._strategies = tuple(strategies)
        self.logger = logging.getLogger(__name__)

    def index(self, exclude: Iterable[str] = ()) -> dict[str, str]:
        """Index every charset under its names and normalized aliases."""
        skip = set(exclude)
        names: dict[str, str] = {}
        for charset in sorted(self._charsets):
            if charset in skip:
                continue
            for name in (charset, *sorted(self._charsets[charset])):
                names.setdefault(name, charset)
                alias = normalize_charset_name(name)
                known = names.setdefault(alias, charset)
                if known != charset:
                    self.logger.debug(
                        "Clash charset alias: %s (%s, %s)", alias, known, charset
                    )
        return names

    def build(self) -> CharsetMap:
        """Match every CLD2 encoding to at most one host charset."""
        to_encoding: dict[str, Encoding] = {}
        to_charset: dict[Encoding, str] = {}
        for charset, encoding in SEED_CHARSETS.items():
            if charset in self._charsets:
                to_encoding[charset] = encoding
                to_charset[encoding] = charset

        index = self.index(exclude=to_encoding)
        for encoding in Encoding:
            if encoding is Encoding.UNKNOWN_ENCODING or encoding in to_charset:
                continue
            charset = self.match(encoding, index)
            if charset is None:
                self.logger.debug("No charset found for %s", encoding.name)
                continue
            if charset in to_encoding:
                self.logger.debug(
                    "Charset %s already mapped to %s, skipping %s",
                    charset,
                    to_encoding[charset].name,
                    encoding.name,
                )
                continue
            to_encoding[charset] = encoding
            to_charset[encoding] = charset

        self.logger.debug("Mapped %d CLD2 encodings to charsets", len(to_charset))
        return CharsetMap(
            charsets=MappingProxyType(to_charset),
            encodings=MappingProxyType(to_encoding),
        )

    def match(self, encoding: Encoding, index: Mapping[str, str]) -> str | None:
        """Return the first charset a strategy finds for *encoding*."""
        for strategy in self._strategies:
            charset = strategy(encoding, index)
            if charset is not None:
                return charset
        return None
