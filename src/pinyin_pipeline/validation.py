"""Validation helpers for conversion input and record sequences."""

from __future__ import annotations

from typing import Any, Sequence

from pinyin_pipeline.models import SyllableRecord


def is_text_input(value: Any) -> bool:
    """Return whether ``value`` can be converted at all.

    Non-text input is not an error: callers hand it back unchanged.
    """

    return isinstance(value, str)


def validate_records(records: Sequence[SyllableRecord]) -> None:
    """Validate freshly looked-up records before the stages run.

    Args:
        records: Records built from the reading lookup.

    Raises:
        ValueError: If any Chinese record lacks candidates or a reading, or a
            record does not hold exactly one origin character.
    """

    errors: list[str] = []
    for idx, record in enumerate(records, start=1):
        if len(record.origin) != 1:
            errors.append(f"Record {idx}: origin '{record.origin}' is not a single character")
        if not record.is_zh:
            continue
        if not record.candidates:
            errors.append(f"Record {idx}: Chinese character '{record.origin}' has no candidates")
        if not record.origin_pinyin:
            errors.append(f"Record {idx}: empty origin_pinyin for '{record.origin}'")
        if record.tone not in range(1, 6):
            errors.append(f"Record {idx}: invalid tone {record.tone} for '{record.origin}'")

    if errors:
        preview = "\n".join(f"- {item}" for item in errors[:25])
        rest = len(errors) - min(25, len(errors))
        more = f"\n- ... and {rest} more" if rest > 0 else ""
        raise ValueError(f"Lookup validation failed with {len(errors)} errors:\n{preview}{more}")
