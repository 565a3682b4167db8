"""
Custom exception hierarchy for number translation.

Each exception type maps to exactly one grammar rule, so a caller can tell
"unknown word" from "scales out of order" without parsing messages. The
pipeline converts these into ValidationFinding values at its boundary.
"""

from __future__ import annotations

from typing import Any

from .models import ErrorCode, ValidationFinding


class TranslationError(Exception):
    """Base exception for all translation failures."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        word: str | None = None,
        position: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.code = code
        self.word = word
        self.position = position
        self.details = details or {}
        super().__init__(message)

    @property
    def message(self) -> str:
        return str(self)

    def to_finding(self) -> ValidationFinding:
        """Convert to the value returned across the public boundary."""
        return ValidationFinding(
            code=self.code,
            message=self.message,
            word=self.word,
            position=self.position,
            details=self.details,
        )


class UnknownWordError(TranslationError):
    """The word is not in the lexicon."""

    def __init__(self, word: str, position: int, suggestion: str | None = None):
        message = f"Unknown word '{word}' at position {position}."
        if suggestion:
            message += f" Did you mean '{suggestion}'?"
        super().__init__(
            ErrorCode.UNKNOWN_WORD,
            message,
            word=word,
            position=position,
            details={"suggestion": suggestion},
        )


class InvalidCharacterError(TranslationError):
    """The phrase contains characters other than letters, spaces and hyphens."""

    def __init__(self, characters: list[str], position: int):
        super().__init__(
            ErrorCode.INVALID_CHARACTERS,
            (
                f"Only letters, spaces and hyphens are allowed; found "
                f"{', '.join(repr(c) for c in characters)} "
                f"(first at character {position})."
            ),
            position=position,
            details={"characters": characters},
        )


class EmptyInputError(TranslationError):
    """There are no words to translate."""

    def __init__(self):
        super().__init__(ErrorCode.EMPTY_INPUT, "The phrase contains no words.")


class InvalidFirstWordError(TranslationError):
    """The phrase starts with a word that cannot open a number."""

    def __init__(self, word: str):
        super().__init__(
            ErrorCode.INVALID_FIRST_WORD,
            f"'{word}' cannot start a number; start with a digit, teen, tens word or 'negative'.",
            word=word,
            position=0,
        )


class ZeroMustBeSoleError(TranslationError):
    """'zero' was combined with other words."""

    def __init__(self, position: int):
        super().__init__(
            ErrorCode.ZERO_MUST_BE_SOLE,
            "'zero' may only be used by itself.",
            word="zero",
            position=position,
        )


class InvalidAdjacencyError(TranslationError):
    """A word may not follow the word before it."""

    def __init__(self, word: str, position: int, previous: str | None):
        super().__init__(
            ErrorCode.INVALID_ADJACENCY,
            f"'{word}' cannot follow '{previous}' (position {position}).",
            word=word,
            position=position,
            details={"previous": previous},
        )


class DuplicateAdjacentClassError(TranslationError):
    """Two neighbouring words belong to the same lexical class."""

    def __init__(self, word: str, position: int, word_class: str):
        super().__init__(
            ErrorCode.DUPLICATE_ADJACENT_CLASS,
            f"'{word}' at position {position} repeats the {word_class} word type of the word before it.",
            word=word,
            position=position,
            details={"word_class": word_class},
        )


class DuplicateScaleOnceError(TranslationError):
    """A scale word that may only appear once was repeated."""

    def __init__(self, word: str, position: int):
        super().__init__(
            ErrorCode.DUPLICATE_SCALE_ONCE,
            f"'{word}' can only be used once (repeated at position {position}).",
            word=word,
            position=position,
        )


class MisplacedNegativeError(TranslationError):
    """'negative' appeared somewhere other than the start."""

    def __init__(self, position: int):
        super().__init__(
            ErrorCode.MISPLACED_NEGATIVE,
            f"'negative' can only be placed at the beginning (found at position {position}).",
            word="negative",
            position=position,
        )


class ScaleOrderViolation(TranslationError):
    """A larger scale word follows a smaller one."""

    def __init__(self, word: str, position: int, previous: str):
        super().__init__(
            ErrorCode.SCALE_ORDER_VIOLATION,
            f"'{word}' cannot come after '{previous}'; scale words must decrease (million before thousand).",
            word=word,
            position=position,
            details={"previous_scale": previous},
        )
