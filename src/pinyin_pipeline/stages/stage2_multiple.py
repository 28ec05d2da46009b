"""Stage 2: Expand a single Hanzi into all of its readings."""

from __future__ import annotations

from pinyin_pipeline.models import SyllableRecord
from pinyin_pipeline.options import Options


def expands_multiple(text: str, records: list[SyllableRecord], options: Options) -> bool:
    """Return whether ``multiple`` applies to this call.

    Only an input of exactly one Chinese character is expanded; for any other
    input the option is ignored.
    """

    return options.multiple and len(text) == 1 and len(records) == 1 and records[0].is_zh


def resolve_multiple(
    text: str,
    records: list[SyllableRecord],
    options: Options,
) -> list[SyllableRecord]:
    """Replace the single record with one record per candidate reading.

    Args:
        text: Original input text.
        records: Records after stage 1.
        options: Normalized options.

    Returns:
        Expanded records in lookup order, or ``records`` unchanged when the
        option does not apply.
    """

    if not expands_multiple(text, records, options):
        return records

    source = records[0]
    return [
        SyllableRecord(
            origin=source.origin,
            origin_pinyin=candidate.pinyin,
            result=candidate.pinyin,
            is_zh=True,
            tone=candidate.tone,
            candidates=source.candidates,
        )
        for candidate in source.candidates
    ]
