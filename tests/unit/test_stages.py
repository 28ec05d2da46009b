"""Unit tests for the individual conversion stages."""

from __future__ import annotations

from pinyin_pipeline.lookup.repository import ReadingRepository
from pinyin_pipeline.models import SyllableRecord
from pinyin_pipeline.options import normalize_options
from pinyin_pipeline.pipeline import build_records
from pinyin_pipeline.stages.stage1_non_zh import handle_non_zh
from pinyin_pipeline.stages.stage2_multiple import resolve_multiple
from pinyin_pipeline.stages.stage3_pattern import extract_pattern
from pinyin_pipeline.stages.stage4_tone import render_tone
from pinyin_pipeline.stages.stage5_v import substitute_v


def _summary(records: list[SyllableRecord]) -> list[tuple[str, str, bool]]:
    return [(record.origin, record.result, record.deleted) for record in records]


def test_non_zh_runs_collapse_into_first_record(repo: ReadingRepository) -> None:
    """Runs are merged in place; later records are soft-deleted, not removed."""

    records = build_records("ab中12", "normal", repo)

    handle_non_zh(records, normalize_options(non_zh="consecutive"))

    assert _summary(records) == [
        ("ab", "ab", False),
        ("b", "b", True),
        ("中", "zhōng", False),
        ("12", "12", False),
        ("2", "2", True),
    ]


def test_non_zh_removed_marks_every_non_chinese_record(repo: ReadingRepository) -> None:
    records = build_records("中a国", "normal", repo)

    handle_non_zh(records, normalize_options(non_zh="removed"))

    assert [record.deleted for record in records] == [False, True, False]
    assert len(records) == 3


def test_multiple_expands_single_character_in_lookup_order(repo: ReadingRepository) -> None:
    options = normalize_options(multiple=True)

    expanded = resolve_multiple("行", build_records("行", "normal", repo), options)
    untouched = resolve_multiple("中国", build_records("中国", "normal", repo), options)

    assert [record.result for record in expanded] == ["xíng", "háng", "hàng", "héng"]
    assert [record.tone for record in expanded] == [2, 2, 4, 2]
    assert [record.result for record in untouched] == ["zhōng", "guó"]


def test_pattern_stage_leaves_non_chinese_records_alone(repo: ReadingRepository) -> None:
    records = build_records("熊x", "normal", repo)

    extract_pattern(records, normalize_options(pattern="finalHead"))

    assert [record.result for record in records] == ["i", "x"]


def test_tone_stage_uses_record_tone_and_skips_empty_results(repo: ReadingRepository) -> None:
    records = build_records("中吗", "normal", repo)
    options = normalize_options(pattern="finalHead", tone_type="num")

    render_tone(extract_pattern(records, options), options)

    assert [record.result for record in records] == ["", ""]

    records = build_records("中吗", "normal", repo)
    render_tone(records, normalize_options(tone_type="num"))

    assert [record.result for record in records] == ["zhong1", "ma5"]


def test_v_stage_only_runs_without_tones(repo: ReadingRepository) -> None:
    records = build_records("女", "normal", repo)
    substitute_v(records, normalize_options(v=True))
    assert records[0].result == "nǚ"

    options = normalize_options(v=True, tone_type="none")
    records = substitute_v(render_tone(build_records("女", "normal", repo), options), options)
    assert records[0].result == "nv"
