"""
The fixed English number vocabulary and the single-word classifier.

Five tables, one per lexical class. The class of a word drives BOTH the
grammar check and the arithmetic, so a word may only live in one table.

    "seven"    → BASIC         7
    "fourteen" → SOLO          14
    "sixty"    → HELPER        60
    "thousand" → SCALE_ONCE    1,000
    "hundred"  → SCALE_REPEAT  100
"""

from __future__ import annotations

from difflib import get_close_matches
from types import MappingProxyType
from typing import Mapping, NamedTuple

from .exceptions import UnknownWordError
from .models import Token, WordClass

# ─── Word Lookup Tables ──────────────────────────────────────────────

_BASIC: dict[str, int] = {
    "zero": 0,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}

# Teens stand alone in their group; only a scale word may follow them.
_SOLO: dict[str, int] = {
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
    "thirteen": 13,
    "fourteen": 14,
    "fifteen": 15,
    "sixteen": 16,
    "seventeen": 17,
    "eighteen": 18,
    "nineteen": 19,
}

_HELPER: dict[str, int] = {
    "twenty": 20,
    "thirty": 30,
    "forty": 40,
    "fifty": 50,
    "sixty": 60,
    "seventy": 70,
    "eighty": 80,
    "ninety": 90,
}

# Each may appear at most once per phrase
_SCALE_ONCE: dict[str, int] = {
    "negative": -1,
    "thousand": 1_000,
    "million": 1_000_000,
}

# May repeat, never adjacently
_SCALE_REPEAT: dict[str, int] = {
    "hundred": 100,
}

ZERO = "zero"
NEGATIVE = "negative"


class LexicalEntry(NamedTuple):
    word_class: WordClass
    value: int


def _build_lexicon() -> Mapping[str, LexicalEntry]:
    tables = [
        (WordClass.BASIC, _BASIC),
        (WordClass.SOLO, _SOLO),
        (WordClass.HELPER, _HELPER),
        (WordClass.SCALE_ONCE, _SCALE_ONCE),
        (WordClass.SCALE_REPEAT, _SCALE_REPEAT),
    ]
    entries: dict[str, LexicalEntry] = {}
    for word_class, table in tables:
        for word, value in table.items():
            entries[word] = LexicalEntry(word_class, value)
    return MappingProxyType(entries)


LEXICON: Mapping[str, LexicalEntry] = _build_lexicon()

# Minimum similarity for a "did you mean" suggestion (0.0-1.0)
SUGGESTION_CUTOFF = 0.75


# ─── Public API ──────────────────────────────────────────────────────


def lookup(word: str) -> LexicalEntry | None:
    """Return the lexicon entry for a word, or None if it is not a number word."""
    return LEXICON.get(word.strip().lower())


def classify(word: str, position: int = 0) -> Token:
    """Classify a single word.

    Args:
        word: A single word, any case.
        position: Index of the word in its phrase, used for error reporting.

    Raises:
        UnknownWordError: If no table contains the word.
    """
    normalized = word.strip().lower()
    entry = LEXICON.get(normalized)
    if entry is None:
        raise UnknownWordError(word, position, suggest(normalized))
    return Token(
        word=normalized,
        word_class=entry.word_class,
        value=entry.value,
        position=position,
    )


def classify_all(words: list[str]) -> list[Token]:
    """Classify every word of a phrase, failing on the first unknown one."""
    return [classify(word, position) for position, word in enumerate(words)]


def suggest(word: str) -> str | None:
    """Closest lexicon word to a misspelling, e.g. 'fourty' → 'forty'."""
    matches = get_close_matches(word, list(LEXICON), n=1, cutoff=SUGGESTION_CUTOFF)
    return matches[0] if matches else None
