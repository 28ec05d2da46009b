"""Stage 4: Render tones as marks, trailing digits, or not at all."""

from __future__ import annotations

from pinyin_pipeline.models import SyllableRecord
from pinyin_pipeline.options import Options
from pinyin_pipeline.syllable import strip_tone


def render_tone(records: list[SyllableRecord], options: Options) -> list[SyllableRecord]:
    """Apply ``options.tone_type`` to every live Chinese record.

    ``num`` appends the tone carried by the lookup record, never a digit
    re-derived from the (possibly partial) result. Empty results stay empty.

    Args:
        records: Records after stage 3; mutated in place.
        options: Normalized options.

    Returns:
        The same list, for chaining.
    """

    if options.tone_type == "symbol":
        return records

    for record in records:
        if record.deleted or not record.is_zh:
            continue
        plain = strip_tone(record.result)
        if options.tone_type == "num" and plain:
            record.result = f"{plain}{record.tone}"
        else:
            record.result = plain
    return records
