# tests/test_result.py
from __future__ import annotations

import json

import pytest

from cld2xref.language import Language
from cld2xref.result import DetectionResult, deduplicate_recent

FR = Language.FRENCH
EN = Language.ENGLISH
DE = Language.GERMAN
UN = Language.UNKNOWN_LANGUAGE


def test_empty_result_prunes_to_nothing():
    result = DetectionResult()
    assert result.prune() == []
    assert result.language_codes() == []
    assert result.language == UN


def test_prune_keeps_detector_order(make_result):
    result = make_result((FR, 60, 900.0), (EN, 30, 1200.0), (DE, 10, 800.0))
    assert result.prune() == [0, 1, 2]
    assert result.languages() == [FR, EN, DE]
    assert result.language_codes() == ["fr", "en", "de"]


def test_prune_below_min_total_text_bytes_is_empty(make_result):
    result = make_result((FR, 99, 1500.0), text_bytes=20)
    result.configure_pruning(min_total_text_bytes=21)
    assert result.prune() == []
    result.configure_pruning(min_total_text_bytes=20)
    assert result.prune() == [0]


def test_prune_skips_low_percent_and_low_score(make_result):
    result = make_result((FR, 60, 900.0), (EN, 5, 1200.0), (DE, 35, 100.0))
    result.configure_pruning(min_text_percent=10, min_score=200.0)
    assert result.prune() == [0]
    result.configure_pruning(min_text_percent=10)
    assert result.prune() == [0, 2]


def test_unknown_after_first_slot_stops_scan(make_result):
    """A later candidate passing all thresholds is still not reported."""
    result = make_result((FR, 70, 900.0), (UN, 0, 0.0), (EN, 30, 1000.0))
    assert result.prune() == [0]


def test_unknown_skipped_by_threshold_does_not_stop_scan(make_result):
    """Thresholds are checked before the unknown-language cutoff."""
    result = make_result((FR, 70, 900.0), (UN, 0, 0.0), (EN, 30, 1000.0))
    result.configure_pruning(min_text_percent=1)
    assert result.prune() == [0, 2]


def test_unknown_in_first_slot_survives(make_result):
    result = make_result((UN, 0, 0.0), (UN, 0, 0.0), (UN, 0, 0.0), reliable=False)
    assert result.prune() == [0]
    assert result.language_codes() == ["un"]


def test_iso639_3_codes_skip_languages_without_code(make_result):
    result = make_result((FR, 60, 900.0), (Language.X_Latin, 40, 100.0))
    assert result.language_codes_iso639_3() == ["fra"]


def test_iso639_3_deduplicates_shared_codes(make_result):
    result = make_result(
        (Language.CHINESE, 50, 900.0),
        (Language.CHINESE_T, 40, 800.0),
        (EN, 10, 700.0),
    )
    assert result.language_codes_iso639_3() == ["zho", "zho", "eng"]
    assert result.language_codes_iso639_3(deduplicate=True) == ["zho", "eng"]


def test_joined_iso639_3_codes(make_result):
    result = make_result(
        (Language.CHINESE, 50, 900.0),
        (Language.X_Han, 30, 500.0),
        (Language.CHINESE_T, 20, 800.0),
    )
    assert result.joined_language_codes_iso639_3() == "zho,zho"
    assert result.joined_language_codes_iso639_3(" ", deduplicate=True) == "zho"
    assert DetectionResult().joined_language_codes_iso639_3("|") == ""


def test_dedup_window_is_two():
    assert deduplicate_recent(["fra", "eng", "deu", "fra"]) == [
        "fra",
        "eng",
        "deu",
        "fra",
    ]
    assert deduplicate_recent(["fra", "eng", "deu", "eng"]) == ["fra", "eng", "deu"]
    assert deduplicate_recent(["fra", "fra", "eng", "fra"]) == ["fra", "eng"]


def test_best_language_accessors(make_result):
    result = make_result((Language.JAPANESE, 90, 1800.0), (EN, 10, 400.0))
    assert result.language_code == "ja"
    assert result.language_name == "Japanese"
    assert result.language_code_iso639_3 == "jpn"
    assert result.is_reliable() is True


def test_str_lists_pruned_candidates(make_result):
    result = make_result((FR, 97, 1234.5), (EN, 3, 321.0), text_bytes=40)
    result.configure_pruning(min_text_percent=5)
    assert str(result) == (
        "Result reliable = True, text bytes = 40\n  fr\tfra\t 97%\t1234.500\tFRENCH"
    )


def test_to_dict(make_result):
    result = make_result((FR, 80, 1000.0), (EN, 20, 500.25), text_bytes=55)
    assert result.to_dict() == {
        "reliable": True,
        "text-bytes": 55,
        "languages": [
            {
                "code": "fr",
                "code-iso-639-3": "fra",
                "text-covered": 0.8,
                "score": 1000.0,
                "name": "FRENCH",
            },
            {
                "code": "en",
                "code-iso-639-3": "eng",
                "text-covered": 0.2,
                "score": 500.25,
                "name": "ENGLISH",
            },
        ],
    }


def test_to_dict_omits_languages_when_all_pruned(make_result):
    result = make_result((FR, 80, 1000.0), text_bytes=5, reliable=False)
    result.configure_pruning(min_total_text_bytes=10)
    assert result.to_dict() == {"reliable": False, "text-bytes": 5}


def test_to_json_round_trips_through_json(make_result):
    result = make_result((Language.JAPANESE, 100, 2000.0))
    assert json.loads(result.to_json())["languages"][0]["name"] == "Japanese"


def test_candidates_are_immutable(make_result):
    result = make_result((FR, 80, 1000.0))
    with pytest.raises(AttributeError):
        result.text_bytes = 3  # type: ignore[misc]
    with pytest.raises(AttributeError):
        result.candidates[0].percent = 3  # type: ignore[misc]


@pytest.mark.parametrize(
    ("kwargs", "name"),
    [
        ({"min_total_text_bytes": -1}, "min_total_text_bytes"),
        ({"min_text_percent": 2.5}, "min_text_percent"),
        ({"min_score": -0.5}, "min_score"),
        ({"min_total_text_bytes": True}, "min_total_text_bytes"),
    ],
)
def test_configure_pruning_rejects_bad_thresholds(make_result, kwargs, name):
    result = make_result((FR, 80, 1000.0))
    with pytest.raises(ValueError, match=name):
        result.configure_pruning(**kwargs)
    assert result.prune() == [0]


def test_results_hash_and_compare_by_detector_output(make_result):
    first = make_result((FR, 80, 1000.0))
    second = make_result((FR, 80, 1000.0))
    second.configure_pruning(min_text_percent=90)
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second, DetectionResult()}) == 2
