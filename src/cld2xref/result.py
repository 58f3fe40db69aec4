"""Detection results: pruning, ranking and rendering of candidate languages."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Iterable
from dataclasses import field

from cld2xref._utils import (
    DEFAULT_MIN_SCORE,
    DEFAULT_MIN_TEXT_PERCENT,
    DEFAULT_MIN_TOTAL_TEXT_BYTES,
    _validate_pruning,
)
from cld2xref.language import Language
from cld2xref.registry import iso639_3

#: Number of candidate slots CLD2 fills per call.
MAX_CANDIDATES: int = 3

#: How many previously accepted ISO 639-3 codes a new code is compared with
#: when deduplicating.  Sized for the three candidate slots; a larger
#: candidate list would need a full history instead.
DEDUP_WINDOW: int = 2


@dataclasses.dataclass(frozen=True, slots=True)
class Candidate:
    """One of the up to three languages CLD2 reports for a text."""

    language: Language
    percent: int
    normalized_score: float


@dataclasses.dataclass(slots=True)
class Pruning:
    """Thresholds a candidate must reach to be reported."""

    min_total_text_bytes: int = DEFAULT_MIN_TOTAL_TEXT_BYTES
    min_text_percent: int = DEFAULT_MIN_TEXT_PERCENT
    min_score: float = DEFAULT_MIN_SCORE


def deduplicate_recent(codes: Iterable[str], window: int = DEDUP_WINDOW) -> list[str]:
    """Drop each code that equals one of the last *window* accepted codes."""
    accepted: list[str] = []
    for code in codes:
        if code in accepted[-window:]:
            continue
        accepted.append(code)
    return accepted


@dataclasses.dataclass(frozen=True, slots=True)
class DetectionResult:
    """The outcome of a single detection call.

    Holds the raw candidates in CLD2's order (by text coverage, which is not
    necessarily the order of scores) together with the pruning thresholds
    applied by every accessor that lists languages.  Only the thresholds can
    change after construction, see :meth:`configure_pruning`.  Equality and
    hashing look at the detector output only, not at the thresholds.
    """

    candidates: tuple[Candidate, ...] = ()
    text_bytes: int = 0
    reliable: bool = False
    language: Language = Language.UNKNOWN_LANGUAGE
    pruning: Pruning = field(default_factory=Pruning, compare=False)

    def configure_pruning(
        self,
        min_total_text_bytes: int = DEFAULT_MIN_TOTAL_TEXT_BYTES,
        min_text_percent: int = DEFAULT_MIN_TEXT_PERCENT,
        min_score: float = DEFAULT_MIN_SCORE,
    ) -> None:
        """Set the thresholds used when listing and rendering languages.

        :param min_total_text_bytes: Report nothing if CLD2 saw fewer text
            bytes than this.
        :param min_text_percent: Skip candidates covering less of the text.
        :param min_score: Skip candidates with a lower normalized score.
        :raises ValueError: If a threshold is negative or not a number.
        """
        _validate_pruning(min_total_text_bytes, min_text_percent, min_score)
        self.pruning.min_total_text_bytes = min_total_text_bytes
        self.pruning.min_text_percent = min_text_percent
        self.pruning.min_score = min_score

    def prune(self) -> list[int]:
        """Return the indices of the candidates that pass the thresholds.

        Candidates below the percent or score threshold are skipped.  An
        unknown language after the first slot ends the scan, so at most one
        ``UNKNOWN_LANGUAGE`` entry survives and only in front.
        """
        if self.text_bytes < self.pruning.min_total_text_bytes:
            # not enough text for a reliable result
            return []
        kept: list[int] = []
        for i, candidate in enumerate(self.candidates[:MAX_CANDIDATES]):
            if candidate.percent < self.pruning.min_text_percent:
                continue
            if candidate.normalized_score < self.pruning.min_score:
                continue
            if i > 0 and candidate.language == Language.UNKNOWN_LANGUAGE:
                break
            kept.append(i)
        return kept

    def _pruned(self) -> list[Candidate]:
        return [self.candidates[i] for i in self.prune()]

    def is_reliable(self) -> bool:
        return self.reliable

    @property
    def language_name(self) -> str:
        """CLD2's display name of the best language."""
        return self.language.display_name

    @property
    def language_code(self) -> str:
        """CLD2's code of the best language."""
        return self.language.code

    @property
    def language_code_iso639_3(self) -> str | None:
        """ISO 639-3 code of the best language."""
        return iso639_3(self.language)

    def languages(self) -> list[Language]:
        return [c.language for c in self._pruned()]

    def language_codes(self) -> list[str]:
        """CLD2 codes of the pruned candidates, in order."""
        return [c.language.code for c in self._pruned()]

    def language_codes_iso639_3(self, deduplicate: bool = False) -> list[str]:
        """ISO 639-3 codes of the pruned candidates, in order.

        Candidates without an ISO 639-3 code are left out.  Several CLD2
        languages share a code (``zh`` and ``zh-Hant`` are both ``zho``); with
        *deduplicate* a code repeating one of the two codes accepted just
        before it is dropped.
        """
        codes = []
        for candidate in self._pruned():
            code = iso639_3(candidate.language)
            if code is not None:
                codes.append(code)
        if deduplicate:
            return deduplicate_recent(codes)
        return codes

    def joined_language_codes_iso639_3(
        self, separator: str = ",", deduplicate: bool = False
    ) -> str:
        """Join :meth:`language_codes_iso639_3` with *separator*."""
        return separator.join(self.language_codes_iso639_3(deduplicate))

    def __str__(self) -> str:
        lines = [f"Result reliable = {self.reliable}, text bytes = {self.text_bytes}"]
        for candidate in self._pruned():
            lang = candidate.language
            lines.append(
                f"  {lang.code}\t{iso639_3(lang)}\t{candidate.percent:3d}%"
                f"\t{candidate.normalized_score:.3f}\t{lang.display_name}"
            )
        return "\n".join(lines)

    def to_dict(self) -> dict[str, object]:
        """Convert this result to a plain dict.

        :returns: A dict with ``'reliable'`` and ``'text-bytes'`` keys, plus
            ``'languages'`` listing the pruned candidates if there are any.
        """
        report: dict[str, object] = {
            "reliable": self.reliable,
            "text-bytes": self.text_bytes,
        }
        pruned = self._pruned()
        if pruned:
            report["languages"] = [
                {
                    "code": c.language.code,
                    "code-iso-639-3": iso639_3(c.language),
                    "text-covered": c.percent / 100.0,
                    "score": c.normalized_score,
                    "name": c.language.display_name,
                }
                for c in pruned
            ]
        return report

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)
