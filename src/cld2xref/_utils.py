"""Internal shared utilities for cld2xref."""

from __future__ import annotations

#: Default pruning thresholds: keep every candidate the detector returns.
DEFAULT_MIN_TOTAL_TEXT_BYTES: int = 0
DEFAULT_MIN_TEXT_PERCENT: int = 0
DEFAULT_MIN_SCORE: float = 0.0

#: Default maximum number of bytes the command-line tool reads per input.
DEFAULT_MAX_BYTES: int = 200_000


def encode_native(text: str) -> bytes:
    """Encode *text* as NUL-terminated UTF-8, the form CLD2 expects."""
    return text.encode("utf-8") + b"\0"


def strip_terminator(data: bytes | bytearray) -> bytes:
    """Drop a single trailing NUL added by :func:`encode_native`."""
    data = bytes(data)
    if data.endswith(b"\0"):
        return data[:-1]
    return data


def _validate_threshold(name: str, value: float, *, integral: bool) -> None:
    """Raise ValueError if a pruning threshold is not a non-negative number."""
    allowed: tuple[type, ...] = (int,) if integral else (int, float)
    if isinstance(value, bool) or not isinstance(value, allowed) or value < 0:
        kind = "integer" if integral else "number"
        msg = f"{name} must be a non-negative {kind}"
        raise ValueError(msg)


def _validate_pruning(
    min_total_text_bytes: int, min_text_percent: int, min_score: float
) -> None:
    """Check caller-supplied pruning thresholds."""
    _validate_threshold("min_total_text_bytes", min_total_text_bytes, integral=True)
    _validate_threshold("min_text_percent", min_text_percent, integral=True)
    _validate_threshold("min_score", min_score, integral=False)
