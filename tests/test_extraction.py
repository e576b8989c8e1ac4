from __future__ import annotations

import pytest

from jpvocab.extraction import compose_furigana, isolate_pitch, isolate_reading, isolate_word, normalize


@pytest.mark.parametrize("isolator", [isolate_word, isolate_reading, isolate_pitch])
@pytest.mark.parametrize("raw", [None, ""])
def test_absent_source_yields_empty_string(isolator, raw) -> None:
    assert isolator(raw) == ""


def test_normalize_strips_triangles() -> None:
    assert normalize("△言葉▲") == "言葉"
    assert normalize(None) == ""


def test_normalize_is_idempotent() -> None:
    once = normalize("▲△ことば△")
    assert normalize(once) == once == "ことば"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("△言葉［ことば］３", "ことば"),
        ("言葉こと", "言葉こと"),
        ("食べ物たべもの２", "食べ物"),
        ("ことば１", "ことば"),
        ("テレビ２", "テレビ"),
        ("赤ワイン１", "赤ワイン"),
        ("日本テレビ", "日本テレビ"),
        ("abc 123", "abc 123"),
    ],
)
def test_isolate_word(raw: str, expected: str) -> None:
    assert isolate_word(raw) == expected


def test_bracket_beats_kanji_outside_brackets() -> None:
    assert isolate_word("漢字［ことば］言葉") == "ことば"


def test_bracket_takes_first_pair() -> None:
    assert isolate_word("［いち］と［に］") == "いち"


def test_triangle_markers_do_not_change_word() -> None:
    assert isolate_word("△言葉△") == isolate_word("言葉") == "言葉"


def test_word_fallback_is_normalized_source() -> None:
    assert isolate_word("▲abc") == "abc"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("ことば１２", "ことば"),
        ("ことば12", "ことば"),
        ("ことば", "ことば"),
        ("ことば 3", "ことば"),
        ("こと言葉", "こと"),
        ("言葉 ことば３", "ことば"),
        ("テレビ２", "テレビ"),
        ("カタカナ", "カタカナ"),
        ("赤ワイン１", "ワイン"),
        ("テレビ局", "テレビ"),
    ],
)
def test_isolate_reading_stops_at_boundary(raw: str, expected: str) -> None:
    assert isolate_reading(raw) == expected


def test_reading_fallback_is_raw_source() -> None:
    # No normalization on this path, the markers survive.
    assert isolate_reading("△言葉") == "△言葉"
    # Kana followed by a bracket has no valid boundary.
    assert isolate_reading("言葉［ことば］３") == "言葉［ことば］３"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("ことば１２", "１２"),
        ("言葉3と4", "3"),
        ("△言葉［ことば］０", "０"),
        ("言葉", ""),
        ("ことば٣", ""),
    ],
)
def test_isolate_pitch(raw: str, expected: str) -> None:
    assert isolate_pitch(raw) == expected


def test_furigana_collapses_when_word_is_reading() -> None:
    assert compose_furigana("ことば", "ことば") == "ことば"


def test_furigana_brackets_reading() -> None:
    assert compose_furigana("言葉", "ことば") == "言葉[ことば]"
