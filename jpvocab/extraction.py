"""Lexical extraction engine for scraped dictionary headwords.

Each vocabulary entry arrives as one noisy source string, e.g.
``"△言葉［ことば］３"``. The isolators below pull out the headword, its kana
reading and its pitch-accent digits. Every function is total: no input,
``None`` included, raises.

Fallback values differ per isolator and are kept that way on purpose:
- word:    the normalized source
- reading: the raw (unnormalized) source
- pitch:   empty string
"""

from __future__ import annotations

from typing import Callable

import regex

KANA = r"\p{Hiragana}\p{Katakana}"

# Most headwords are enclosed in full-width square brackets.
EXACT_WORD_RE = regex.compile(r"［(.*?)］")

# A word beginning with kanji, with optional okurigana and trailing kanji.
WORD_WITH_KANJI_RE = regex.compile(rf"\p{{Han}}+[{KANA}]*\p{{Han}}*")

KANA_RE = regex.compile(rf"[{KANA}]+")

# The lookahead keeps a trailing pitch digit run or kanji out of the reading.
READING_RE = regex.compile(rf"[{KANA}]+(?=$|[\p{{Han}}０-９0-9]|\s)")

PITCH_RE = regex.compile(r"[0-9０-９]+")

TRIANGLES_RE = regex.compile(r"[△▲]")


def normalize(raw_source: str | None) -> str:
    """Strip the decorative triangle markers some entries carry."""
    return TRIANGLES_RE.sub("", raw_source or "")


def _exact_word(source: str) -> str | None:
    m = EXACT_WORD_RE.search(source)
    return m.group(1) if m else None


def _kanji_word(source: str) -> str | None:
    m = WORD_WITH_KANJI_RE.search(source)
    return m.group(0) if m else None


def _kana_word(source: str) -> str | None:
    m = KANA_RE.search(source)
    return m.group(0) if m else None


WORD_STRATEGIES: tuple[Callable[[str], str | None], ...] = (
    _exact_word,
    _kanji_word,
    _kana_word,
)


def isolate_word(raw_source: str | None) -> str:
    """Return the headword from a raw dictionary source string.

    Tries, in order: bracketed word, kanji-anchored word, kana-only word.
    Falls back to the normalized source when nothing matches.
    """

    source = normalize(raw_source)
    for strategy in WORD_STRATEGIES:
        word = strategy(source)
        if word is not None:
            return word
    return source


def isolate_reading(raw_source: str | None) -> str:
    """Return the kana reading, or the raw source when no reading is found."""
    if not raw_source:
        return ""

    m = READING_RE.search(raw_source)
    if m:
        return m.group(0)
    return raw_source


def isolate_pitch(raw_source: str | None) -> str:
    """Return the first run of pitch-accent digits, or an empty string."""
    if not raw_source:
        return ""

    m = PITCH_RE.search(raw_source)
    return m.group(0) if m else ""


def compose_furigana(word: str, reading: str) -> str:
    """Build an Anki style furigana string, e.g. ``言葉[ことば]``."""
    if word == reading:
        return reading
    return f"{word}[{reading}]"
