"""Stage 5: Spell ``ü`` as ``v`` in toneless output."""

from __future__ import annotations

from pinyin_pipeline.models import SyllableRecord
from pinyin_pipeline.options import Options


def applies_v(options: Options) -> bool:
    """``v`` only takes effect together with ``tone_type="none"``."""

    return options.v and options.tone_type == "none"


def substitute_v(records: list[SyllableRecord], options: Options) -> list[SyllableRecord]:
    """Replace ``ü`` with ``v`` in live Chinese records when enabled."""

    if not applies_v(options):
        return records

    for record in records:
        if record.deleted or not record.is_zh:
            continue
        record.result = record.result.replace("ü", "v")
    return records
