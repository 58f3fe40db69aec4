# tests/test_enums.py
import enum

from cld2xref.encoding import NUM_ENCODINGS, Encoding
from cld2xref.enums import FLAG_KEYWORDS, Flags


def test_flags_is_int_flag():
    assert issubclass(Flags, enum.IntFlag)


def test_flag_values_match_cld2():
    assert Flags.SCORE_AS_QUADS == 0x0100
    assert Flags.HTML == 0x0200
    assert Flags.CR == 0x0400
    assert Flags.VERBOSE == 0x0800
    assert Flags.QUIET == 0x1000
    assert Flags.ECHO == 0x2000
    assert Flags.BEST_EFFORT == 0x4000


def test_flags_combine():
    combined = Flags.BEST_EFFORT | Flags.SCORE_AS_QUADS
    assert Flags.BEST_EFFORT in combined
    assert Flags.HTML not in combined
    assert Flags(0x4100) == combined


def test_every_flag_has_a_keyword():
    for member in Flags:
        if member is not Flags.NONE:
            assert member in FLAG_KEYWORDS


def test_encoding_ids_are_contiguous():
    assert [e.value for e in Encoding] == list(range(NUM_ENCODINGS))


def test_encoding_get():
    assert Encoding.get(10) is Encoding.JAPANESE_EUC_JP
    assert Encoding.get(NUM_ENCODINGS) is Encoding.UNKNOWN_ENCODING
    assert Encoding.UNKNOWN_ENCODING == 23
