# tests/conftest.py
"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from cld2xref.language import Language
from cld2xref.result import Candidate, DetectionResult


@pytest.fixture
def make_result() -> Callable[..., DetectionResult]:
    """Build a DetectionResult from ``(language, percent, score)`` triples."""

    def _make(
        *slots: tuple[Language, int, float],
        text_bytes: int = 100,
        reliable: bool = True,
    ) -> DetectionResult:
        candidates = tuple(
            Candidate(language=lang, percent=percent, normalized_score=score)
            for lang, percent, score in slots
        )
        best = candidates[0].language if candidates else Language.UNKNOWN_LANGUAGE
        return DetectionResult(
            candidates=candidates,
            text_bytes=text_bytes,
            reliable=reliable,
            language=best,
        )

    return _make
