"""
Main translation pipeline: orchestrates the full workflow.

Flow:
  ┌────────────┐
  │ Raw phrase │
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │  Sanitize  │   ← Lower-case, trim, character policy
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │  Tokenize  │   ← Split on whitespace / hyphens
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │  Classify  │   ← Lexicon lookup, unknown words rejected
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │  Validate  │   ← Grammar automaton, first violation wins
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │  Evaluate  │   ← Accumulator + deferred groups
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │   Result   │   ← Typed value or typed error, never an exception
  └────────────┘

Design principles:
  - translate() is a pure function: no state survives between calls.
  - Errors are raised inside the core and converted to values here.
  - The evaluator only ever sees phrases the validator accepted.
"""

from __future__ import annotations

import logging

from .config import Settings
from .evaluator import evaluate
from .exceptions import TranslationError
from .lexicon import classify_all
from .models import Token, TranslationResult
from .sanitizer import sanitize, tokenize
from .validator import check_sequence

logger = logging.getLogger(__name__)


def translate(phrase: str, settings: Settings | None = None) -> TranslationResult:
    """Translate a spelled-out English integer.

    Args:
        phrase: e.g. "two million three hundred thousand forty five"
        settings: Character policy and friends. Defaults to Settings().

    Returns:
        TranslationResult with `value` set on success, `error` set on failure.
    """
    settings = settings or Settings()
    words: list[str] = []
    tokens: list[Token] = []

    try:
        cleaned = sanitize(phrase, strict=settings.strict_characters)
        words = tokenize(cleaned)
        tokens = classify_all(words)
        check_sequence(tokens)
        value = evaluate(tokens)
    except TranslationError as e:
        logger.info("Rejected %r: [%s] %s", phrase, e.code.value, e)
        return TranslationResult(
            phrase=phrase,
            is_valid=False,
            words=words,
            tokens=tokens,
            error=e.to_finding(),
        )

    logger.debug("Translated %r -> %d", phrase, value)
    return TranslationResult(
        phrase=phrase,
        is_valid=True,
        value=value,
        words=words,
        tokens=tokens,
    )


def words_to_number(phrase: str, settings: Settings | None = None) -> int:
    """Translate a phrase, raising on failure instead of returning an error value.

    Raises:
        TranslationError: The subclass matching the first rule broken.
    """
    settings = settings or Settings()
    tokens = classify_all(tokenize(sanitize(phrase, strict=settings.strict_characters)))
    check_sequence(tokens)
    return evaluate(tokens)
