"""Conversion options and the single normalization step applied before the pipeline.

Option coupling lives only in :func:`normalize_options`:

* ``type="all"`` forces ``pattern="pinyin"``;
* ``pattern="num"`` forces ``tone_type="none"``;
* legacy ``remove_non_zh=True`` forces ``non_zh="removed"``.

Conflicting combinations are rewritten, never rejected. Values outside a
vocabulary and unknown keys raise ``ValueError``.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
import logging
from typing import Any, Literal, Mapping

logger = logging.getLogger(__name__)

ToneType = Literal["symbol", "num", "none"]
Pattern = Literal[
    "pinyin", "initial", "final", "num", "first", "finalHead", "finalBody", "finalTail"
]
Mode = Literal["normal", "surname"]
NonZh = Literal["spaced", "consecutive", "removed"]
OutputType = Literal["string", "array", "all"]

VALID_TONE_TYPES = ("symbol", "num", "none")
VALID_PATTERNS = (
    "pinyin",
    "initial",
    "final",
    "num",
    "first",
    "finalHead",
    "finalBody",
    "finalTail",
)
VALID_MODES = ("normal", "surname")
VALID_NON_ZH = ("spaced", "consecutive", "removed")
VALID_OUTPUT_TYPES = ("string", "array", "all")

KEY_ALIASES = {
    "toneType": "tone_type",
    "nonZh": "non_zh",
    "removeNonZh": "remove_non_zh",
}
PATTERN_ALIASES = {
    "final_head": "finalHead",
    "final_body": "finalBody",
    "final_tail": "finalTail",
}


@dataclass(frozen=True)
class Options:
    """Immutable per-call conversion options.

    Attributes:
        tone_type: ``symbol`` keeps tone marks, ``num`` appends a tone digit,
            ``none`` strips tones.
        pattern: Which part of each syllable to return.
        multiple: Return every reading when the input is a single Hanzi.
        mode: ``surname`` prefers surname readings for characters in the
            surname tables.
        non_zh: Treatment of non-Chinese runs: ``spaced``, ``consecutive`` or
            ``removed``.
        remove_non_zh: Legacy switch equivalent to ``non_zh="removed"``.
        v: Render ``ü`` as ``v``; only effective with ``tone_type="none"``.
        type: Output shape: ``string``, ``array`` or ``all``.
    """

    tone_type: ToneType = "symbol"
    pattern: Pattern = "pinyin"
    multiple: bool = False
    mode: Mode = "normal"
    non_zh: NonZh = "spaced"
    remove_non_zh: bool = False
    v: bool = False
    type: OutputType = "string"


DEFAULT_OPTIONS = Options()
OPTION_FIELDS = frozenset(item.name for item in fields(Options))


def _canonical_overrides(values: Mapping[str, Any]) -> dict[str, Any]:
    """Map camelCase keys and pattern spellings onto ``Options`` field names.

    Args:
        values: Raw option mapping.

    Returns:
        Dictionary keyed by ``Options`` field names.

    Raises:
        ValueError: If a key does not name any option.
    """

    out: dict[str, Any] = {}
    unknown: list[str] = []
    for key, value in values.items():
        name = KEY_ALIASES.get(key, key)
        if name not in OPTION_FIELDS:
            unknown.append(key)
            continue
        if name == "pattern" and isinstance(value, str):
            value = PATTERN_ALIASES.get(value, value)
        out[name] = value

    if unknown:
        raise ValueError(f"Unknown option(s): {', '.join(sorted(unknown))}.")
    return out


def _check_choice(name: str, value: Any, allowed: tuple[str, ...], errors: list[str]) -> None:
    if value not in allowed:
        errors.append(f"{name}={value!r} (expected one of {', '.join(allowed)})")


def validate_options(options: Options) -> None:
    """Check every vocabulary-bound option value.

    Args:
        options: Options to check.

    Raises:
        ValueError: If any option holds a value outside its vocabulary.
    """

    errors: list[str] = []
    _check_choice("tone_type", options.tone_type, VALID_TONE_TYPES, errors)
    _check_choice("pattern", options.pattern, VALID_PATTERNS, errors)
    _check_choice("mode", options.mode, VALID_MODES, errors)
    _check_choice("non_zh", options.non_zh, VALID_NON_ZH, errors)
    _check_choice("type", options.type, VALID_OUTPUT_TYPES, errors)

    if errors:
        raise ValueError("Invalid conversion options: " + "; ".join(errors))


def normalize_options(
    options: Options | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> Options:
    """Build the effective options for one conversion call.

    Args:
        options: Base options as an ``Options`` instance, a mapping using
            snake_case or camelCase keys, or ``None`` for defaults.
        **overrides: Individual option values applied on top of ``options``.

    Returns:
        Validated ``Options`` with all forced overrides applied.

    Raises:
        ValueError: If a key is unknown or a value is outside its vocabulary.
    """

    if options is None:
        base = DEFAULT_OPTIONS
    elif isinstance(options, Options):
        base = options
    else:
        base = replace(DEFAULT_OPTIONS, **_canonical_overrides(options))

    if overrides:
        base = replace(base, **_canonical_overrides(overrides))

    validate_options(base)

    forced: dict[str, Any] = {}
    if base.type == "all" and base.pattern != "pinyin":
        forced["pattern"] = "pinyin"
    if forced.get("pattern", base.pattern) == "num" and base.tone_type != "none":
        forced["tone_type"] = "none"
    if base.remove_non_zh and base.non_zh != "removed":
        forced["non_zh"] = "removed"

    if forced:
        logger.debug("Forced option overrides: %s", forced)
        base = replace(base, **forced)
    return base
