"""Thread-safety tests for the lazily built catalogs."""

from __future__ import annotations

import threading

import cld2xref.registry as _registry
from cld2xref.encoding import Encoding
from cld2xref.language import Language


def _run_concurrent_lookups(n_workers: int) -> tuple[list[str], list[object]]:
    """Start *n_workers* threads that look up a locale and a charset at once.

    Returns the error strings (empty = success) and the catalogs each
    thread saw.
    """
    errors: list[str] = []
    seen: list[object] = []
    barrier = threading.Barrier(n_workers)

    def worker() -> None:
        barrier.wait()
        language = _registry.language_from_locale("de-DE")
        if language is not Language.GERMAN:
            errors.append(f"Expected GERMAN, got {language!r}")
        encoding = _registry.encoding_from_charset("koi8-r")
        if encoding is not Encoding.RUSSIAN_KOI8_R:
            errors.append(f"Expected RUSSIAN_KOI8_R, got {encoding!r}")
        seen.append(_registry.get_locale_map())
        seen.append(_registry.get_charset_map())

    threads = [threading.Thread(target=worker) for _ in range(n_workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    return errors, seen


def test_cold_cache_concurrent_init():
    """Threads racing on first use all get the same catalogs."""
    saved = (_registry._LOCALE_MAP, _registry._CHARSET_MAP)
    try:
        _registry._LOCALE_MAP = None
        _registry._CHARSET_MAP = None

        errors, seen = _run_concurrent_lookups(n_workers=8)
        assert not errors, "Cold-cache race violations:\n" + "\n".join(errors[:10])
        assert len({id(catalog) for catalog in seen}) == 2
    finally:
        _registry._LOCALE_MAP, _registry._CHARSET_MAP = saved
