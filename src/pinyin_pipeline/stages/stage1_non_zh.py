"""Stage 1: Apply the non-Chinese policy to runs of unrecognized characters."""

from __future__ import annotations

import logging

from pinyin_pipeline.models import SyllableRecord
from pinyin_pipeline.options import Options

logger = logging.getLogger(__name__)


def handle_non_zh(records: list[SyllableRecord], options: Options) -> list[SyllableRecord]:
    """Mark or collapse non-Chinese records according to ``options.non_zh``.

    ``removed`` marks every non-Chinese record deleted. ``consecutive`` and
    ``spaced`` collapse each maximal run into its first record, whose ``origin``
    and ``result`` become the concatenated run; the rest of the run is marked
    deleted. How the run is separated from its neighbours is decided at
    assembly time. Chinese records are never touched.

    Args:
        records: Records in input order; mutated in place.
        options: Normalized options.

    Returns:
        The same list, for chaining.
    """

    if options.non_zh == "removed":
        for record in records:
            if not record.is_zh:
                record.deleted = True
        return records

    run_head: SyllableRecord | None = None
    for record in records:
        if record.is_zh or record.deleted:
            run_head = None
            continue
        if run_head is None:
            run_head = record
            continue
        run_head.origin += record.origin
        run_head.result += record.result
        record.deleted = True

    logger.debug(
        "Non-Chinese policy %s kept %d of %d records",
        options.non_zh,
        sum(1 for record in records if not record.deleted),
        len(records),
    )
    return records
