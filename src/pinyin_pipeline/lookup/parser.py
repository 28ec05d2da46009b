"""Parsing utilities for per-character reading payloads."""

from __future__ import annotations

import re
import unicodedata

from pinyin_pipeline.models import SyllableCandidate
from pinyin_pipeline.syllable import tone_of

# One reading is letters plus tone marks only; anything else is dropped.
READING_RE = re.compile(r"^[a-z\u00c0-\u024f\u1e00-\u1eff\u0300-\u036f]+$")


def normalize_reading(token: str) -> str | None:
    """Normalize one tone-marked reading to lowercase NFC.

    Args:
        token: Raw reading such as ``zhōng`` or ``ê̄``.

    Returns:
        Normalized reading, or ``None`` when the token is empty or malformed.
    """

    token = unicodedata.normalize("NFC", token.strip()).lower()
    if not token:
        return None
    token = token.replace("u:", "ü").replace("v", "ü")
    if not READING_RE.fullmatch(token):
        return None
    return token


def parse_readings(payload: str) -> tuple[SyllableCandidate, ...]:
    """Parse a comma-separated reading list into ordered candidates.

    The first surviving reading is the default. Duplicates are dropped while
    preserving first-seen order.

    Args:
        payload: Dictionary payload such as ``"zhōng,zhòng"``.

    Returns:
        Tuple of candidates, empty when nothing valid was found.
    """

    seen: set[str] = set()
    readings: list[str] = []
    for token in payload.split(","):
        reading = normalize_reading(token)
        if reading is None or reading in seen:
            continue
        seen.add(reading)
        readings.append(reading)

    return tuple(
        SyllableCandidate(pinyin=reading, tone=tone_of(reading), is_default=idx == 0)
        for idx, reading in enumerate(readings)
    )


def parse_surname_reading(payload: str) -> tuple[SyllableCandidate, ...]:
    """Parse a space-separated surname reading into one candidate per character.

    Args:
        payload: Reading such as ``"yù chí"`` for a two-character surname.

    Returns:
        Candidates aligned with the surname characters, each marked default.

    Raises:
        ValueError: If any syllable in the payload is malformed.
    """

    candidates: list[SyllableCandidate] = []
    for token in payload.split():
        reading = normalize_reading(token)
        if reading is None:
            raise ValueError(f"Malformed surname reading '{payload}'.")
        candidates.append(SyllableCandidate(pinyin=reading, tone=tone_of(reading), is_default=True))
    return tuple(candidates)
