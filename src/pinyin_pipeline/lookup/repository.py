"""Repository exposing per-character reading lookups."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property, lru_cache
import logging
from typing import Mapping

from pypinyin import constants as pypinyin_constants

from pinyin_pipeline.lookup.parser import parse_readings, parse_surname_reading
from pinyin_pipeline.lookup.surnames import COMPOUND_SURNAMES, SINGLE_SURNAMES
from pinyin_pipeline.models import SyllableCandidate

logger = logging.getLogger(__name__)


def _promote(
    candidates: tuple[SyllableCandidate, ...],
    preferred: SyllableCandidate,
) -> tuple[SyllableCandidate, ...]:
    """Move ``preferred`` to the front, demoting every other candidate.

    Args:
        candidates: Dictionary-ordered candidates for one character.
        preferred: Surname reading that should win.

    Returns:
        Candidates with ``preferred`` first and duplicates of it removed.
    """

    rest = tuple(
        SyllableCandidate(pinyin=item.pinyin, tone=item.tone, is_default=False)
        for item in candidates
        if item.pinyin != preferred.pinyin
    )
    return (preferred, *rest)


@dataclass(frozen=True)
class ReadingRepository:
    """Read-only repository of character readings and surname overrides.

    ``table`` maps a character (or its code point) to a comma-separated list of
    tone-marked readings, most common first, in the format of pypinyin's
    ``PINYIN_DICT``. Indices are built once on first use and never mutated, so
    an instance can be shared between threads.
    """

    table: Mapping[int | str, str]
    surnames: Mapping[str, str] = field(default_factory=lambda: SINGLE_SURNAMES)
    compound_surnames: Mapping[str, str] = field(default_factory=lambda: COMPOUND_SURNAMES)

    @cached_property
    def readings_by_char(self) -> dict[str, tuple[SyllableCandidate, ...]]:
        """Build and cache the character -> candidates index.

        Returns:
            Dictionary mapping single characters to ordered candidates.
        """

        mapping: dict[str, tuple[SyllableCandidate, ...]] = {}
        for key, payload in self.table.items():
            char = chr(key) if isinstance(key, int) else key
            candidates = parse_readings(str(payload))
            if candidates:
                mapping[char] = candidates
        logger.debug("Indexed readings for %d characters", len(mapping))
        return mapping

    @cached_property
    def surname_readings(self) -> dict[str, SyllableCandidate]:
        """Build and cache single-character surname readings."""

        mapping: dict[str, SyllableCandidate] = {}
        for surname, payload in self.surnames.items():
            parsed = parse_surname_reading(payload)
            if len(parsed) != len(surname) or len(surname) != 1:
                raise ValueError(f"Surname '{surname}' does not align with reading '{payload}'.")
            mapping[surname] = parsed[0]
        return mapping

    @cached_property
    def compound_surname_readings(self) -> dict[str, tuple[SyllableCandidate, ...]]:
        """Build and cache multi-character surname readings, one per character."""

        mapping: dict[str, tuple[SyllableCandidate, ...]] = {}
        for surname, payload in self.compound_surnames.items():
            parsed = parse_surname_reading(payload)
            if len(parsed) != len(surname):
                raise ValueError(f"Surname '{surname}' does not align with reading '{payload}'.")
            mapping[surname] = parsed
        return mapping

    @cached_property
    def longest_compound_surname(self) -> int:
        return max((len(name) for name in self.compound_surname_readings), default=0)

    def is_zh(self, char: str) -> bool:
        """Return whether ``char`` has at least one dictionary reading."""

        return char in self.readings_by_char

    def candidates_for(self, char: str, mode: str = "normal") -> tuple[SyllableCandidate, ...]:
        """Return ordered candidates for one character.

        Args:
            char: Single character.
            mode: ``normal`` for dictionary order, ``surname`` to promote the
                single-character surname reading when one exists.

        Returns:
            Tuple of candidates; empty tuple when the character is unknown.
        """

        candidates = self.readings_by_char.get(char, ())
        if mode == "surname" and candidates and char in self.surname_readings:
            return _promote(candidates, self.surname_readings[char])
        return candidates

    def lookup_text(self, text: str, mode: str = "normal") -> list[tuple[SyllableCandidate, ...]]:
        """Look up every character of ``text``.

        In surname mode, compound surnames are matched longest-first while
        scanning left to right; remaining characters fall back to
        :meth:`candidates_for`.

        Args:
            text: Input string.
            mode: ``normal`` or ``surname``.

        Returns:
            One candidate tuple per character of ``text``.
        """

        if mode != "surname" or not self.compound_surname_readings:
            return [self.candidates_for(char, mode) for char in text]

        out: list[tuple[SyllableCandidate, ...]] = []
        idx = 0
        while idx < len(text):
            matched = False
            for size in range(min(self.longest_compound_surname, len(text) - idx), 1, -1):
                chunk = text[idx : idx + size]
                readings = self.compound_surname_readings.get(chunk)
                if readings is None:
                    continue
                logger.debug("Compound surname '%s' matched at %d", chunk, idx)
                for char, reading in zip(chunk, readings):
                    out.append(_promote(self.readings_by_char.get(char, ()), reading))
                idx += size
                matched = True
                break
            if not matched:
                out.append(self.candidates_for(text[idx], mode))
                idx += 1
        return out


@lru_cache(maxsize=None)
def default_repository() -> ReadingRepository:
    """Return the shared repository backed by pypinyin's character dictionary."""

    return ReadingRepository(table=pypinyin_constants.PINYIN_DICT)
