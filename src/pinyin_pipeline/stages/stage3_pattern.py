"""Stage 3: Reduce each Chinese record to the requested syllable part."""

from __future__ import annotations

from typing import Callable

from pinyin_pipeline.models import SyllableParts, SyllableRecord
from pinyin_pipeline.options import Options
from pinyin_pipeline.syllable import decompose, first_letter

PART_GETTERS: dict[str, Callable[[SyllableParts], str]] = {
    "initial": lambda parts: parts.initial,
    "final": lambda parts: parts.final,
    "finalHead": lambda parts: parts.final_head,
    "finalBody": lambda parts: parts.final_body,
    "finalTail": lambda parts: parts.final_tail,
    "num": lambda parts: str(parts.tone),
}


def extract_pattern(records: list[SyllableRecord], options: Options) -> list[SyllableRecord]:
    """Rewrite ``result`` of every live Chinese record per ``options.pattern``.

    Decomposition always starts from ``origin_pinyin``; ``first`` takes the
    first letter of the still tone-marked pinyin.

    Args:
        records: Records after stage 2; mutated in place.
        options: Normalized options.

    Returns:
        The same list, for chaining.
    """

    if options.pattern == "pinyin":
        return records

    for record in records:
        if record.deleted or not record.is_zh:
            continue
        if options.pattern == "first":
            record.result = first_letter(record.origin_pinyin)
            continue
        parts = decompose(record.origin_pinyin, tone=record.tone)
        record.result = PART_GETTERS[options.pattern](parts)
    return records
