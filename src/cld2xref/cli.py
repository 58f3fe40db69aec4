"""Command-line interface for cld2xref."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import cld2xref
from cld2xref._utils import DEFAULT_MAX_BYTES
from cld2xref.detector import DetectionHints, detect
from cld2xref.enums import Flags
from cld2xref.result import DetectionResult


def _report(name: str, result: DetectionResult, args: argparse.Namespace) -> str:
    if args.minimal:
        return result.language_code
    if args.json:
        return result.to_json()
    return f"{name}: {result}"


def _detect(data: bytes, args: argparse.Namespace) -> DetectionResult:
    flags = Flags.BEST_EFFORT if args.best_effort else Flags.NONE
    hints = DetectionHints(
        content_language=args.content_language,
        top_level_domain=args.tld,
        encoding=args.encoding_hint,
    )
    result = detect(data, is_plain_text=not args.html, hints=hints, flags=flags)
    result.configure_pruning(args.min_bytes, args.min_percent, args.min_score)
    return result


def main(argv: list[str] | None = None) -> None:
    """Run the ``cld2detect`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Detect the language of UTF-8 encoded files."
    )
    parser.add_argument("files", nargs="*", help="Files to detect the language of")
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the best language code"
    )
    parser.add_argument(
        "--json", action="store_true", help="Output a JSON report per input"
    )
    parser.add_argument(
        "--html", action="store_true", help="Treat input as HTML instead of plain text"
    )
    parser.add_argument(
        "--best-effort",
        action="store_true",
        help="Give an approximate answer even for short text",
    )
    parser.add_argument("--content-language", help="Content-Language hint")
    parser.add_argument("--tld", help="Top-level domain hint")
    parser.add_argument("--encoding-hint", help="Original character set hint")
    parser.add_argument(
        "--min-bytes", type=int, default=0, help="Minimum total text bytes"
    )
    parser.add_argument(
        "--min-percent", type=int, default=0, help="Minimum text percent per language"
    )
    parser.add_argument(
        "--min-score", type=float, default=0.0, help="Minimum score per language"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"cld2xref {cld2xref.__version__} (pycld2 {cld2xref.version()})",
    )

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.files:
        failed = False
        for filepath in args.files:
            try:
                with Path(filepath).open("rb") as f:
                    data = f.read(DEFAULT_MAX_BYTES)
            except OSError as e:
                print(f"cld2detect: {filepath}: {e}", file=sys.stderr)
                failed = True
                continue
            try:
                result = _detect(data, args)
            except ValueError as e:
                print(f"cld2detect: {filepath}: {e}", file=sys.stderr)
                failed = True
                continue
            print(_report(filepath, result, args))
        if failed:
            sys.exit(1)
    else:
        data = sys.stdin.buffer.read(DEFAULT_MAX_BYTES)
        try:
            result = _detect(data, args)
        except ValueError as e:
            print(f"cld2detect: stdin: {e}", file=sys.stderr)
            sys.exit(1)
        print(_report("stdin", result, args))


if __name__ == "__main__":
    main()
