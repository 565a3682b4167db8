"""
Pydantic models for translation data.

Tokens, findings and results are all typed models. Anything that leaves the
core crosses the boundary as one of these, never as a bare dict or a raised
exception.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ─── Lexical Classes ────────────────────────────────────────────────


class WordClass(str, Enum):
    """Grammatical category of a number word."""

    BASIC = "BASIC"  # zero … nine
    SOLO = "SOLO"  # ten … nineteen
    HELPER = "HELPER"  # twenty … ninety
    SCALE_ONCE = "SCALE_ONCE"  # negative, thousand, million
    SCALE_REPEAT = "SCALE_REPEAT"  # hundred


# ─── Error Codes ────────────────────────────────────────────────────


class ErrorCode(str, Enum):
    """Machine-readable reason a phrase was rejected."""

    UNKNOWN_WORD = "UNKNOWN_WORD"
    INVALID_CHARACTERS = "INVALID_CHARACTERS"
    EMPTY_INPUT = "EMPTY_INPUT"
    INVALID_FIRST_WORD = "INVALID_FIRST_WORD"
    ZERO_MUST_BE_SOLE = "ZERO_MUST_BE_SOLE"
    INVALID_ADJACENCY = "INVALID_ADJACENCY"
    DUPLICATE_ADJACENT_CLASS = "DUPLICATE_ADJACENT_CLASS"
    DUPLICATE_SCALE_ONCE = "DUPLICATE_SCALE_ONCE"
    MISPLACED_NEGATIVE = "MISPLACED_NEGATIVE"
    SCALE_ORDER_VIOLATION = "SCALE_ORDER_VIOLATION"


# ─── Token ──────────────────────────────────────────────────────────


class Token(BaseModel):
    """A classified word at a given position in the phrase."""

    model_config = ConfigDict(frozen=True)

    word: str
    word_class: WordClass
    value: int
    position: int = 0


# ─── Validation Finding ─────────────────────────────────────────────


class ValidationFinding(BaseModel):
    """The first grammar violation found in a phrase."""

    code: ErrorCode
    message: str  # Human-readable explanation
    word: Optional[str] = None  # Offending word, when there is one
    position: Optional[int] = None  # Zero-based index of the offending word
    details: dict = Field(default_factory=dict)


# ─── Translation Result ─────────────────────────────────────────────


class TranslationResult(BaseModel):
    """The final output of the translation pipeline."""

    phrase: str
    is_valid: bool
    value: Optional[int] = None
    words: list[str] = Field(default_factory=list)
    tokens: list[Token] = Field(default_factory=list)
    error: Optional[ValidationFinding] = None
