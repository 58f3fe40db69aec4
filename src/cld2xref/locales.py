"""Mapping between CLD2 languages and host locales.

Every locale the host knows about is offered to CLD2's name lookup, first by
its English language name and then by its language subtag.  Locales CLD2
does not recognize are dropped.  While walking the locales, ISO 639-3 codes
are collected for languages that do not have one built in; a built-in code
is never replaced.
"""

from __future__ import annotations

import dataclasses
import locale
import logging
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType

import langcodes

from cld2xref.language import Language, language_from_name

# Identifiers standing for "no particular locale".
_ROOT_LOCALES = frozenset({"C", "POSIX", "und"})


def available_locales() -> list[str]:
    """Return the host's locale identifiers as sorted BCP 47 style tags.

    Taken from the platform locale alias table, with codeset and modifier
    removed (``"de_DE.ISO8859-1"`` -> ``"de-DE"``).
    """
    tags = set()
    for value in locale.locale_alias.values():
        ident = value.split(".", 1)[0].split("@", 1)[0]
        if not ident or ident in _ROOT_LOCALES:
            continue
        tags.add(ident.replace("_", "-"))
    return sorted(tags)


@dataclasses.dataclass(frozen=True, slots=True)
class LocaleMap:
    """Two-way mapping between CLD2 languages and locale tags.

    Also holds the ISO 639-3 code of each language: the built-in one, or
    the one back-filled from a locale.
    """

    locales: Mapping[Language, frozenset[str]]
    languages: Mapping[str, Language]
    iso639_3: Mapping[Language, str]

    def language_for(self, tag: str) -> Language:
        """Return the language of the locale *tag* (``"en-US"``, ``"en_US"``)."""
        try:
            tag = langcodes.standardize_tag(tag)
        except ValueError:
            return Language.UNKNOWN_LANGUAGE
        return self.languages.get(tag, Language.UNKNOWN_LANGUAGE)

    def locales_for(self, language: Language) -> frozenset[str]:
        return self.locales.get(language, frozenset())

    def iso639_3_for(self, language: Language) -> str | None:
        return self.iso639_3.get(language)


class LocaleResolver:
    """Builds a :class:`LocaleMap` by probing host locales against CLD2."""

    def __init__(
        self,
        name_lookup: Callable[[str], Language] = language_from_name,
        locales: Iterable[str] | None = None,
    ) -> None:
        """Initialize the resolver.

        :param name_lookup: Maps a language name or code to a CLD2 language,
            ``UNKNOWN_LANGUAGE`` if there is none.
        :param locales: Locale identifiers to probe.  Defaults to
            :func:`available_locales`.
        """
        self._name_lookup = name_lookup
        self._locales = list(available_locales() if locales is None else locales)
        self.logger = logging.getLogger(__name__)

    def build(self) -> LocaleMap:
        """Probe every locale and collect the resulting mappings."""
        forward: dict[Language, set[str]] = {}
        reverse: dict[str, Language] = {}
        iso639_3 = {lang: lang.iso639_3 for lang in Language if lang.iso639_3}
        seen: set[str] = set()

        for ident in self._locales:
            if ident in _ROOT_LOCALES:
                continue
            try:
                parsed = langcodes.Language.get(ident)
            except ValueError as e:
                self.logger.debug("Cannot parse locale <%s>: %s", ident, e)
                continue
            if parsed.language is None or parsed.language in _ROOT_LOCALES:
                continue
            tag = parsed.to_tag()
            if tag in seen:
                continue
            seen.add(tag)

            language = self.resolve(parsed)
            if language == Language.UNKNOWN_LANGUAGE:
                self.logger.debug(
                    "No language found for locale <%s> (%s)",
                    tag,
                    parsed.language_name(),
                )
                continue
            forward.setdefault(language, set()).add(tag)
            reverse[tag] = language
            if parsed.language != language.code:
                self.logger.debug(
                    "Language codes of CLD2 (%s) and locale (%s = %s) differ",
                    language.code,
                    parsed.language,
                    parsed.language_name(),
                )
            self._backfill(iso639_3, language, parsed)

        self.logger.debug("Mapped %d CLD2 languages to locales", len(forward))
        self.logger.debug("Mapped %d locales to a CLD2 language", len(reverse))
        return LocaleMap(
            locales=MappingProxyType(
                {lang: frozenset(tags) for lang, tags in forward.items()}
            ),
            languages=MappingProxyType(reverse),
            iso639_3=MappingProxyType(iso639_3),
        )

    def resolve(self, parsed: langcodes.Language) -> Language:
        """Find the CLD2 language for a parsed locale.

        Tries the upper-cased English language name first, then the
        language subtag.
        """
        language = self._name_lookup(parsed.language_name("en").upper())
        if language == Language.UNKNOWN_LANGUAGE and parsed.language:
            language = self._name_lookup(parsed.language)
        return language

    def _backfill(
        self,
        iso639_3: dict[Language, str],
        language: Language,
        parsed: langcodes.Language,
    ) -> None:
        try:
            code = parsed.to_alpha3()
        except LookupError:
            self.logger.debug(
                "No ISO-639-3 language code for locale %s (%s)",
                parsed.to_tag(),
                language.code,
            )
            return
        assigned = iso639_3.setdefault(language, code)
        if assigned != code:
            self.logger.debug(
                "ISO-639-3 already assigned (%s => %s), skipping locale %s (%s)",
                language.code,
                assigned,
                parsed.to_tag(),
                code,
            )
