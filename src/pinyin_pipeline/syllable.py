"""Syllable decomposition and tone helpers for tone-marked pinyin."""

from __future__ import annotations

import unicodedata

from pinyin_pipeline.models import SyllableParts

TONE_MARKS = {
    "ā": ("a", 1),
    "á": ("a", 2),
    "ǎ": ("a", 3),
    "à": ("a", 4),
    "ē": ("e", 1),
    "é": ("e", 2),
    "ě": ("e", 3),
    "è": ("e", 4),
    "ī": ("i", 1),
    "í": ("i", 2),
    "ǐ": ("i", 3),
    "ì": ("i", 4),
    "ō": ("o", 1),
    "ó": ("o", 2),
    "ǒ": ("o", 3),
    "ò": ("o", 4),
    "ū": ("u", 1),
    "ú": ("u", 2),
    "ǔ": ("u", 3),
    "ù": ("u", 4),
    "ǖ": ("ü", 1),
    "ǘ": ("ü", 2),
    "ǚ": ("ü", 3),
    "ǜ": ("ü", 4),
    "ń": ("n", 2),
    "ň": ("n", 3),
    "ǹ": ("n", 4),
    "ḿ": ("m", 2),
    "ế": ("ê", 2),
    "ề": ("ê", 4),
}

# Tone marks that have no precomposed form (m̄, ê̄, ê̌, m̀) arrive as combining marks.
COMBINING_TONES = {
    "\u0304": 1,
    "\u0301": 2,
    "\u030c": 3,
    "\u0300": 4,
}

NEUTRAL_TONE = 5

INITIALS = (
    "zh",
    "ch",
    "sh",
    "b",
    "p",
    "m",
    "f",
    "d",
    "t",
    "n",
    "l",
    "g",
    "k",
    "h",
    "j",
    "q",
    "x",
    "r",
    "z",
    "c",
    "s",
    "y",
    "w",
)

# Syllabic nasals carry no initial of their own.
SYLLABIC_NASALS = frozenset({"m", "n", "ng"})

# Toneless final -> (head length, body length); the tail is whatever remains.
FINAL_PARTS = {
    "a": (0, 1),
    "o": (0, 1),
    "e": (0, 1),
    "ê": (0, 1),
    "i": (0, 1),
    "u": (0, 1),
    "ü": (0, 1),
    "er": (0, 1),
    "ai": (0, 1),
    "ei": (0, 1),
    "ao": (0, 1),
    "ou": (0, 1),
    "an": (0, 1),
    "en": (0, 1),
    "ang": (0, 1),
    "eng": (0, 1),
    "ong": (0, 1),
    "in": (0, 1),
    "ing": (0, 1),
    "un": (0, 1),
    "ün": (0, 1),
    "ia": (1, 1),
    "ie": (1, 1),
    "iao": (1, 1),
    "iu": (1, 1),
    "ian": (1, 1),
    "iang": (1, 1),
    "iong": (1, 1),
    "ua": (1, 1),
    "uo": (1, 1),
    "uai": (1, 1),
    "ui": (1, 1),
    "uan": (1, 1),
    "uang": (1, 1),
    "ue": (1, 1),
    "ueng": (1, 1),
    "üe": (1, 1),
    "üan": (1, 1),
}


def _strip_with_tone(pinyin: str) -> tuple[str, int | None]:
    """Remove tone marks and report the tone they carried.

    Args:
        pinyin: Tone-marked pinyin in any Unicode normalization form.

    Returns:
        ``(toneless, tone)`` where ``tone`` is ``None`` when no mark was found.
    """

    chars: list[str] = []
    tone: int | None = None
    for ch in unicodedata.normalize("NFC", pinyin):
        if ch in TONE_MARKS:
            base, tone = TONE_MARKS[ch]
            chars.append(base)
        elif ch in COMBINING_TONES:
            tone = COMBINING_TONES[ch]
        else:
            chars.append(ch)
    return "".join(chars), tone


def strip_tone(pinyin: str) -> str:
    """Return ``pinyin`` without tone marks, keeping ``ü`` and ``ê``."""

    return _strip_with_tone(pinyin)[0]


def tone_of(pinyin: str) -> int:
    """Derive the tone digit from diacritics, ``5`` for an unmarked syllable."""

    tone = _strip_with_tone(pinyin)[1]
    return NEUTRAL_TONE if tone is None else tone


def to_numbered(pinyin: str, tone: int | None = None) -> str:
    """Render a syllable as toneless letters followed by its tone digit.

    Args:
        pinyin: Tone-marked syllable.
        tone: Explicit tone digit from the lookup; derived from diacritics when
            omitted.

    Returns:
        Numbered syllable such as ``zhong1`` or ``ma5``.
    """

    toneless, marked = _strip_with_tone(pinyin)
    if tone is None:
        tone = NEUTRAL_TONE if marked is None else marked
    return f"{toneless}{tone}"


def _prefix_end(pinyin: str, count: int) -> int:
    """Index just past the first ``count`` base letters of ``pinyin``.

    Combining tone marks stay attached to the letter they follow.
    """

    idx = 0
    seen = 0
    while idx < len(pinyin) and seen < count:
        idx += 1
        seen += 1
        while idx < len(pinyin) and pinyin[idx] in COMBINING_TONES:
            idx += 1
    return idx


def first_letter(pinyin: str) -> str:
    """Return the first letter of ``pinyin`` together with any tone mark on it."""

    pinyin = unicodedata.normalize("NFC", pinyin)
    return pinyin[: _prefix_end(pinyin, 1)]


def split_initial(pinyin: str) -> tuple[str, str]:
    """Split a syllable into initial and final.

    ``y`` and ``w`` count as initials. Syllables starting with a vowel and the
    bare syllabic nasals ``m``, ``n``, ``ng`` have an empty initial. The split
    is a cut of the input, so ``initial + final == pinyin`` for NFC input.

    Args:
        pinyin: Tone-marked or toneless syllable.

    Returns:
        ``(initial, final)``.
    """

    pinyin = unicodedata.normalize("NFC", pinyin)
    toneless = strip_tone(pinyin)
    if toneless in SYLLABIC_NASALS:
        return "", pinyin
    for initial in INITIALS:
        if toneless.startswith(initial):
            cut = _prefix_end(pinyin, len(initial))
            return pinyin[:cut], pinyin[cut:]
    return "", pinyin


def split_final(final: str) -> tuple[str, str, str]:
    """Split a final into head (glide), body (nucleus) and tail (coda).

    Known Mandarin finals are resolved through ``FINAL_PARTS``. Anything else
    (syllabic nasals, interjection spellings) falls back to a one-letter body
    followed by the remaining letters as tail.

    Args:
        final: Tone-marked or toneless final.

    Returns:
        ``(head, body, tail)`` with ``head + body + tail == final``.
    """

    final = unicodedata.normalize("NFC", final)
    if not final:
        return "", "", ""

    head_len, body_len = FINAL_PARTS.get(strip_tone(final), (0, 1))
    head_end = _prefix_end(final, head_len)
    body_end = _prefix_end(final, head_len + body_len)
    return final[:head_end], final[head_end:body_end], final[body_end:]


def decompose(pinyin: str, tone: int | None = None) -> SyllableParts:
    """Decompose a syllable into all of its phonetic parts.

    Args:
        pinyin: Tone-marked syllable.
        tone: Tone digit carried by the lookup record; derived from the
            diacritics only when omitted.

    Returns:
        ``SyllableParts`` for the syllable.
    """

    initial, final = split_initial(pinyin)
    head, body, tail = split_final(final)
    return SyllableParts(
        initial=initial,
        final=final,
        final_head=head,
        final_body=body,
        final_tail=tail,
        tone=tone_of(pinyin) if tone is None else tone,
    )
