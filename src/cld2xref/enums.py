"""Enumerations for cld2xref."""

import enum


class Flags(enum.IntFlag):
    """Bit flags passed to the detector to modify a single detection call.

    Values match CLD2's ``kCLDFlag*`` constants.  Everything except
    :attr:`SCORE_AS_QUADS` and :attr:`BEST_EFFORT` only switches on debug
    output written to stderr by the native library.
    """

    NONE = 0
    SCORE_AS_QUADS = 0x0100
    HTML = 0x0200
    CR = 0x0400
    VERBOSE = 0x0800
    QUIET = 0x1000
    ECHO = 0x2000
    BEST_EFFORT = 0x4000


# Keyword argument of pycld2.detect() switched on by each flag.
FLAG_KEYWORDS: dict[Flags, str] = {
    Flags.SCORE_AS_QUADS: "debugScoreAsQuads",
    Flags.HTML: "debugHTML",
    Flags.CR: "debugCR",
    Flags.VERBOSE: "debugVerbose",
    Flags.QUIET: "debugQuiet",
    Flags.ECHO: "debugEcho",
    Flags.BEST_EFFORT: "bestEffort",
}
