"""
Grammar validation engine: the strict layer.

A single left-to-right pass over the classified tokens. Each token is checked
against the class of the token before it and against the scale words already
used. The first violation wins; we do not try to collect every problem.

Rules:
  - the phrase is not empty and opens with a digit, teen, tens word or 'negative'
  - 'zero' stands alone
  - no two neighbouring words share a class ("ten ten", "one two")
  - a digit never follows a teen
  - 'hundred' only follows a digit
  - 'negative', 'thousand' and 'million' appear at most once each
  - 'negative' only at the start
  - 'million' before 'thousand', never after
  - teens and tens words open the phrase or follow a scale word

check_sequence() raises the typed exception; validate() returns findings.
"""

from __future__ import annotations

from typing import Sequence

from .exceptions import (
    DuplicateAdjacentClassError,
    DuplicateScaleOnceError,
    EmptyInputError,
    InvalidAdjacencyError,
    InvalidFirstWordError,
    MisplacedNegativeError,
    ScaleOrderViolation,
    TranslationError,
    ZeroMustBeSoleError,
)
from .lexicon import LEXICON, NEGATIVE, ZERO
from .models import Token, ValidationFinding, WordClass

_NUMBER_CLASSES: frozenset[WordClass] = frozenset({
    WordClass.BASIC, WordClass.SOLO, WordClass.HELPER,
})

# Classes allowed to open a phrase ('negative' is admitted separately)
OPENING_CLASSES = _NUMBER_CLASSES

# Teens and tens words must follow one of these unless they come first
_GROUP_STARTERS: frozenset[WordClass] = frozenset({
    WordClass.SCALE_ONCE, WordClass.SCALE_REPEAT,
})


# ─── Public API ──────────────────────────────────────────────────────


def validate(tokens: Sequence[Token]) -> list[ValidationFinding]:
    """Check a token sequence and report the first violation.

    Returns:
        An empty list if the phrase is well formed, otherwise a single finding.
    """
    try:
        check_sequence(tokens)
    except TranslationError as e:
        return [e.to_finding()]
    return []


def check_sequence(tokens: Sequence[Token]) -> None:
    """Run the grammar automaton over the tokens.

    Raises:
        TranslationError: The subclass matching the first rule broken.
    """
    check_opening(tokens)

    current: WordClass | None = None
    previous_word: str | None = None
    history: list[WordClass] = []
    used_scale_once: list[str] = []

    for index, token in enumerate(tokens):
        # Repeated number words are reported before their placement rules;
        # scale words get their own diagnosis first
        if token.word_class in _NUMBER_CLASSES and history and history[-1] == token.word_class:
            raise DuplicateAdjacentClassError(token.word, index, token.word_class.value)

        current = _next_state(token, index, current, previous_word, used_scale_once, len(tokens))

        if history and history[-1] == current:
            raise DuplicateAdjacentClassError(token.word, index, current.value)
        history.append(current)
        previous_word = token.word


def check_opening(tokens: Sequence[Token]) -> None:
    """Reject an empty phrase or one that starts with a word that cannot open a number."""
    if not tokens:
        raise EmptyInputError()

    first = tokens[0]
    if first.word_class not in OPENING_CLASSES and first.word != NEGATIVE:
        raise InvalidFirstWordError(first.word)


# ─── State Transitions ───────────────────────────────────────────────


def _next_state(
    token: Token,
    index: int,
    current: WordClass | None,
    previous_word: str | None,
    used_scale_once: list[str],
    length: int,
) -> WordClass:
    """Decide whether the token may follow the current state and return the new state."""
    word_class = token.word_class

    if word_class == WordClass.BASIC:
        if current == WordClass.SOLO:
            raise InvalidAdjacencyError(token.word, index, previous_word)
        if token.word == ZERO and length > 1:
            raise ZeroMustBeSoleError(index)
        return WordClass.BASIC

    if word_class == WordClass.SCALE_REPEAT:
        if current != WordClass.BASIC:
            raise InvalidAdjacencyError(token.word, index, previous_word)
        return WordClass.SCALE_REPEAT

    if word_class == WordClass.SCALE_ONCE:
        _check_scale_once(token, index, used_scale_once)
        used_scale_once.append(token.word)
        return WordClass.SCALE_ONCE

    # SOLO and HELPER
    if index != 0 and current not in _GROUP_STARTERS:
        raise InvalidAdjacencyError(token.word, index, previous_word)
    return word_class


def _check_scale_once(token: Token, index: int, used_scale_once: list[str]) -> None:
    """Uniqueness, placement and magnitude order for negative/thousand/million."""
    if token.word in used_scale_once:
        raise DuplicateScaleOnceError(token.word, index)

    if token.word == NEGATIVE:
        if index != 0:
            raise MisplacedNegativeError(index)
        return

    # 'negative' is a sign, not a magnitude
    magnitudes = [word for word in used_scale_once if word != NEGATIVE]
    if magnitudes:
        last = magnitudes[-1]
        if LEXICON[last].value < token.value:
            raise ScaleOrderViolation(token.word, index, last)
