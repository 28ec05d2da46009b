"""Unit tests for option normalization."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from pinyin_pipeline.options import DEFAULT_OPTIONS, Options, normalize_options


def test_defaults() -> None:
    assert normalize_options() == Options(
        tone_type="symbol",
        pattern="pinyin",
        multiple=False,
        mode="normal",
        non_zh="spaced",
        remove_non_zh=False,
        v=False,
        type="string",
    )


def test_forced_overrides_are_applied_once() -> None:
    """Conflicting combinations are rewritten rather than rejected."""

    assert normalize_options(type="all", pattern="final").pattern == "pinyin"
    assert normalize_options(pattern="num", tone_type="symbol").tone_type == "none"
    assert normalize_options(remove_non_zh=True, non_zh="spaced").non_zh == "removed"


def test_type_all_wins_over_pattern_num() -> None:
    """Once ``all`` forces ``pinyin``, the ``num`` coupling no longer applies."""

    options = normalize_options(type="all", pattern="num", tone_type="num")

    assert options.pattern == "pinyin"
    assert options.tone_type == "num"


def test_mapping_accepts_camel_case_keys_and_values() -> None:
    options = normalize_options(
        {"toneType": "num", "nonZh": "consecutive", "pattern": "final_head"}
    )

    assert options.tone_type == "num"
    assert options.non_zh == "consecutive"
    assert options.pattern == "finalHead"


def test_keyword_overrides_apply_on_top_of_options() -> None:
    base = Options(tone_type="num", type="array")

    options = normalize_options(base, type="string")

    assert options.tone_type == "num"
    assert options.type == "string"
    assert base.type == "array"


def test_rejects_unknown_keys_and_values() -> None:
    with pytest.raises(ValueError, match="Unknown option"):
        normalize_options({"colour": "red"})

    with pytest.raises(ValueError, match="tone_type='bold'"):
        normalize_options(tone_type="bold")


def test_options_are_immutable() -> None:
    with pytest.raises(FrozenInstanceError):
        DEFAULT_OPTIONS.tone_type = "num"  # type: ignore[misc]
