"""Unit tests for result assembly."""

from __future__ import annotations

from pinyin_pipeline.assembly import to_all_data, to_list, to_string
from pinyin_pipeline.models import AllData, SyllableRecord
from pinyin_pipeline.options import normalize_options


def _zh(origin: str, pinyin: str, tone: int) -> SyllableRecord:
    return SyllableRecord(origin=origin, origin_pinyin=pinyin, result=pinyin, is_zh=True, tone=tone)


def _other(text: str, deleted: bool = False) -> SyllableRecord:
    return SyllableRecord(origin=text, origin_pinyin="", result=text, is_zh=False, deleted=deleted)


def test_spaced_string_trims_runs_and_drops_blank_ones() -> None:
    records = [
        _zh("我", "wǒ", 3),
        _other(" Python "),
        _zh("中", "zhōng", 1),
        _other(" "),
        _zh("国", "guó", 2),
    ]

    assert to_string(records, normalize_options()) == "wǒ Python zhōng guó"


def test_consecutive_and_removed_strings_have_no_separator() -> None:
    records = [_zh("中", "zhōng", 1), _zh("国", "guó", 2), _other("123"), _other("3", deleted=True)]

    assert to_string(records, normalize_options(non_zh="consecutive")) == "zhōngguó123"
    assert to_list(records) == ["zhōng", "guó", "123"]


def test_expanded_readings_are_space_joined_under_any_policy() -> None:
    records = [_zh("中", "zhōng", 1), _zh("中", "zhòng", 4)]

    options = normalize_options(non_zh="removed")

    assert to_string(records, options, expanded=True) == "zhōng zhòng"


def test_all_data_projection_for_chinese_record() -> None:
    record = _zh("熊", "xióng", 2)

    assert to_all_data(record, normalize_options(type="all")) == AllData(
        origin="熊",
        pinyin="xióng",
        initial="x",
        final="ióng",
        final_head="i",
        final_body="ó",
        final_tail="ng",
        num=2,
        first="x",
        is_zh=True,
    )


def test_all_data_parts_follow_tone_and_v_policy() -> None:
    record = _zh("女", "nǚ", 3)
    record.result = "nv"

    data = to_all_data(record, normalize_options(type="all", tone_type="none", v=True))

    assert (data.pinyin, data.final, data.final_body, data.num) == ("nv", "v", "v", 3)


def test_all_data_projection_for_non_chinese_record() -> None:
    data = to_all_data(_other("abc"), normalize_options(type="all"))

    assert data.origin == "abc"
    assert data.pinyin == ""
    assert data.num == 0
    assert not data.is_zh
