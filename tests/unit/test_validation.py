"""Unit tests for input and record validation."""

from __future__ import annotations

import pytest

from pinyin_pipeline.models import SyllableCandidate, SyllableRecord
from pinyin_pipeline.validation import is_text_input, validate_records


def test_is_text_input() -> None:
    assert is_text_input("中")
    assert is_text_input("")
    assert not is_text_input(None)
    assert not is_text_input(["中"])


def test_validate_records_accepts_lookup_output() -> None:
    candidate = SyllableCandidate("zhōng", 1, True)
    validate_records(
        [
            SyllableRecord("中", "zhōng", "zhōng", True, 1, (candidate,)),
            SyllableRecord("a", "", "a", False),
        ]
    )


def test_validate_records_reports_every_problem() -> None:
    records = [
        SyllableRecord("中", "", "", True, 1),
        SyllableRecord("ab", "", "ab", False),
    ]

    with pytest.raises(ValueError, match="Lookup validation failed with 3 errors"):
        validate_records(records)
