"""Integration tests running the full pipeline over pypinyin's dictionary."""

from __future__ import annotations

from pinyin_pipeline import convert, convert_all_readings
from pinyin_pipeline.lookup.repository import default_repository
from pinyin_pipeline.syllable import decompose


def test_documented_examples() -> None:
    assert convert("中国") == "zhōng guó"
    assert convert("中国", tone_type="num") == "zhong1 guo2"
    assert convert("中国", pattern="initial") == "zh g"
    assert convert("中国123", non_zh="removed") == "zhōngguó"
    assert convert("中国123", non_zh="consecutive") == "zhōngguó123"
    assert convert("中国123") == "zhōng guó 123"


def test_multiple_matches_dictionary_candidates() -> None:
    for char in ["中", "行", "了", "好"]:
        candidates = convert_all_readings(char)[0]
        result = convert(char, multiple=True, type="array")
        assert len(result) == len(candidates)
        assert result[0] == convert(char)


def test_multiple_has_no_effect_on_longer_strings() -> None:
    text = "银行行长"

    assert convert(text, multiple=True) == convert(text)


def test_default_repository_is_shared_and_decomposes_cleanly() -> None:
    repo = default_repository()

    assert repo is default_repository()
    for char in "我们的汉语拼音非常有意思":
        for candidate in repo.candidates_for(char):
            parts = decompose(candidate.pinyin, tone=candidate.tone)
            assert parts.initial + parts.final == candidate.pinyin
            assert parts.final_head + parts.final_body + parts.final_tail == parts.final
            assert 1 <= parts.tone <= 5
