"""Render final pipeline records into the requested output shape."""

from __future__ import annotations

from typing import Sequence

from pinyin_pipeline.models import AllData, SyllableRecord
from pinyin_pipeline.options import Options
from pinyin_pipeline.stages.stage5_v import applies_v
from pinyin_pipeline.syllable import decompose, first_letter, strip_tone


def live_records(records: Sequence[SyllableRecord]) -> list[SyllableRecord]:
    """Drop records marked deleted, preserving order."""

    return [record for record in records if not record.deleted]


def to_string(records: Sequence[SyllableRecord], options: Options, expanded: bool = False) -> str:
    """Join record results into one string.

    Under ``spaced`` every record is separated by one space, and a non-Chinese
    run loses its surrounding whitespace (a whitespace-only run disappears).
    ``consecutive`` and ``removed`` concatenate results with no separator.
    Readings of an expanded single character are always space-separated.

    Args:
        records: Final records, deleted ones included.
        options: Normalized options.
        expanded: Whether stage 2 expanded the input into several readings.

    Returns:
        Joined output string.
    """

    live = live_records(records)
    if expanded:
        return " ".join(record.result for record in live)
    if options.non_zh != "spaced":
        return "".join(record.result for record in live)

    parts: list[str] = []
    for record in live:
        if record.is_zh:
            parts.append(record.result)
            continue
        text = record.result.strip()
        if text:
            parts.append(text)
    return " ".join(parts)


def to_list(records: Sequence[SyllableRecord]) -> list[str]:
    """Return one result string per surviving record."""

    return [record.result for record in live_records(records)]


def _render_part(part: str, options: Options) -> str:
    if options.tone_type != "symbol":
        part = strip_tone(part)
    if applies_v(options):
        part = part.replace("ü", "v")
    return part


def to_all_data(record: SyllableRecord, options: Options) -> AllData:
    """Project one record into its full-detail view.

    Phonetic parts are decomposed from ``origin_pinyin`` and rendered with the
    same tone and ``v`` policy as ``result``. Non-Chinese records carry only
    their origin text.

    Args:
        record: Final record.
        options: Normalized options.

    Returns:
        Immutable ``AllData`` projection.
    """

    if not record.is_zh:
        return AllData(
            origin=record.origin,
            pinyin="",
            initial="",
            final="",
            final_head="",
            final_body="",
            final_tail="",
            num=0,
            first="",
            is_zh=False,
        )

    parts = decompose(record.origin_pinyin, tone=record.tone)
    return AllData(
        origin=record.origin,
        pinyin=record.result,
        initial=_render_part(parts.initial, options),
        final=_render_part(parts.final, options),
        final_head=_render_part(parts.final_head, options),
        final_body=_render_part(parts.final_body, options),
        final_tail=_render_part(parts.final_tail, options),
        num=parts.tone,
        first=first_letter(record.result),
        is_zh=True,
    )


def to_details(records: Sequence[SyllableRecord], options: Options) -> list[AllData]:
    """Return one ``AllData`` per surviving record."""

    return [to_all_data(record, options) for record in live_records(records)]
