"""Data models shared across conversion pipeline stages.

Candidates and output projections are immutable; ``SyllableRecord`` is the one
mutable working type, threaded through the stages and rewritten in place so
that each record keeps its position relative to the input text.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SyllableCandidate:
    """One dictionary reading for a single Hanzi.

    ``tone`` is the digit carried by the lookup (5 for neutral tone) and is the
    source of truth for numbered rendering; ``pinyin`` keeps the tone marks.
    """

    pinyin: str
    tone: int
    is_default: bool = False


@dataclass(frozen=True)
class SyllableParts:
    """Decomposition of one syllable into initial, final and final sub-parts."""

    initial: str
    final: str
    final_head: str
    final_body: str
    final_tail: str
    tone: int


@dataclass
class SyllableRecord:
    """Working record for one input character (or one collapsed non-Chinese run).

    ``deleted`` excludes the record from assembly without removing it, so later
    stages can still rely on positional alignment with the input string.
    """

    origin: str
    origin_pinyin: str
    result: str
    is_zh: bool
    tone: int = 5
    candidates: tuple[SyllableCandidate, ...] = field(default_factory=tuple)
    deleted: bool = False


@dataclass(frozen=True)
class AllData:
    """Full-detail projection of a record, produced for ``type="all"``."""

    origin: str
    pinyin: str
    initial: str
    final: str
    final_head: str
    final_body: str
    final_tail: str
    num: int
    first: str
    is_zh: bool
