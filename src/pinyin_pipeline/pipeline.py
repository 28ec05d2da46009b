"""Top-level orchestration for the staged pinyin conversion pipeline."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Mapping, TypeVar

from pinyin_pipeline.assembly import to_details, to_list, to_string
from pinyin_pipeline.lookup.repository import ReadingRepository, default_repository
from pinyin_pipeline.models import AllData, SyllableCandidate, SyllableRecord
from pinyin_pipeline.options import VALID_MODES, Options, normalize_options
from pinyin_pipeline.stages.stage1_non_zh import handle_non_zh
from pinyin_pipeline.stages.stage2_multiple import expands_multiple, resolve_multiple
from pinyin_pipeline.stages.stage3_pattern import extract_pattern
from pinyin_pipeline.stages.stage4_tone import render_tone
from pinyin_pipeline.stages.stage5_v import substitute_v
from pinyin_pipeline.validation import is_text_input, validate_records

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class PipelineResult:
    """Result bundle returned by :func:`run_pipeline`.

    Attributes:
        records: Final records, deleted ones included.
        options: Effective options after normalization.
        expanded: Whether a single character was expanded into all readings.
    """

    records: tuple[SyllableRecord, ...]
    options: Options
    expanded: bool


def build_records(
    text: str,
    mode: str,
    repository: ReadingRepository,
) -> list[SyllableRecord]:
    """Create one fresh record per input character from the reading lookup.

    Args:
        text: Input text.
        mode: Lookup mode, ``normal`` or ``surname``.
        repository: Reading lookup.

    Returns:
        Records with ``result`` equal to the default reading, or to the
        character itself when it has no reading.
    """

    records: list[SyllableRecord] = []
    for char, candidates in zip(text, repository.lookup_text(text, mode)):
        if candidates:
            default = candidates[0]
            records.append(
                SyllableRecord(
                    origin=char,
                    origin_pinyin=default.pinyin,
                    result=default.pinyin,
                    is_zh=True,
                    tone=default.tone,
                    candidates=candidates,
                )
            )
        else:
            records.append(SyllableRecord(origin=char, origin_pinyin="", result=char, is_zh=False))
    return records


def run_pipeline(
    text: str,
    options: Options,
    repository: ReadingRepository | None = None,
) -> PipelineResult:
    """Execute all conversion stages for one input string.

    Args:
        text: Non-empty input text.
        options: Options already passed through ``normalize_options``.
        repository: Reading lookup; the pypinyin-backed default when omitted.

    Returns:
        ``PipelineResult`` holding the final records.
    """

    if repository is None:
        repository = default_repository()

    records = build_records(text, options.mode, repository)
    validate_records(records)

    records = handle_non_zh(records, options)
    expanded = expands_multiple(text, records, options)
    records = resolve_multiple(text, records, options)
    records = extract_pattern(records, options)
    records = render_tone(records, options)
    records = substitute_v(records, options)

    logger.debug("Converted %d characters into %d records", len(text), len(records))
    return PipelineResult(records=tuple(records), options=options, expanded=expanded)


def _empty_result(options: Options) -> str | list[Any]:
    return [] if options.type in ("array", "all") else ""


def convert(
    text: T,
    options: Options | Mapping[str, Any] | None = None,
    repository: ReadingRepository | None = None,
    **overrides: Any,
) -> str | list[str] | list[AllData] | T:
    """Convert Chinese text into pinyin.

    Args:
        text: Text to convert. Anything that is not a ``str`` is returned
            unchanged.
        options: ``Options`` instance or mapping (snake_case or camelCase keys).
        repository: Reading lookup; the pypinyin-backed default when omitted.
        **overrides: Individual option values, e.g. ``tone_type="num"``.

    Returns:
        A space-joined string for ``type="string"``, a list of strings for
        ``type="array"``, or a list of ``AllData`` for ``type="all"``.

    Raises:
        ValueError: If an option key or value is not recognized.
    """

    if not is_text_input(text):
        return text

    effective = normalize_options(options, **overrides)
    if text == "":
        return _empty_result(effective)

    result = run_pipeline(text, effective, repository)
    if effective.type == "array":
        return to_list(result.records)
    if effective.type == "all":
        return to_details(result.records, effective)
    return to_string(result.records, effective, expanded=result.expanded)


def convert_to_string(
    text: str,
    options: Options | Mapping[str, Any] | None = None,
    repository: ReadingRepository | None = None,
    **overrides: Any,
) -> str:
    """Convert ``text`` and always return the joined string form."""

    return convert(text, options, repository, **{**overrides, "type": "string"})


def convert_to_list(
    text: str,
    options: Options | Mapping[str, Any] | None = None,
    repository: ReadingRepository | None = None,
    **overrides: Any,
) -> list[str]:
    """Convert ``text`` and always return one string per surviving record."""

    return convert(text, options, repository, **{**overrides, "type": "array"})


def convert_to_details(
    text: str,
    options: Options | Mapping[str, Any] | None = None,
    repository: ReadingRepository | None = None,
    **overrides: Any,
) -> list[AllData]:
    """Convert ``text`` and always return full-detail ``AllData`` records."""

    return convert(text, options, repository, **{**overrides, "type": "all"})


def convert_all_readings(
    text: T,
    mode: str = "normal",
    repository: ReadingRepository | None = None,
) -> list[list[SyllableCandidate]] | T:
    """Return every dictionary reading for each character of ``text``.

    No options or stages are applied. Characters without readings yield an
    empty list.

    Args:
        text: Text to look up. Anything that is not a ``str`` is returned
            unchanged.
        mode: ``normal`` or ``surname``.
        repository: Reading lookup; the pypinyin-backed default when omitted.

    Returns:
        One list of candidates per character, ``[]`` for empty text.
    """

    if not is_text_input(text):
        return text
    if text == "":
        return []

    if mode not in VALID_MODES:
        raise ValueError(
            f"Invalid lookup mode '{mode}' (expected one of {', '.join(VALID_MODES)})."
        )
    if repository is None:
        repository = default_repository()
    return [list(candidates) for candidates in repository.lookup_text(text, mode)]
