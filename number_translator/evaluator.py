"""
Arithmetic over a validated token sequence.

We maintain two pieces of state:
  - `accumulator`: the value being built in the current magnitude group
  - `deferred`:    finished groups, already multiplied by their scale word

For each token:
  - digit / teen / tens word → add to `accumulator`
  - "hundred"                → multiply `accumulator` by 100
  - scale-once word          → multiply `accumulator`, push it to `deferred`, reset

At the end the deferred groups are added back in, so "two million three
hundred thousand five" is (2 × 1,000,000) + (300 × 1,000) + 5 without any
operator-precedence parser.
"""

from __future__ import annotations

from typing import Sequence

from .lexicon import NEGATIVE
from .models import Token, WordClass
from .validator import check_opening

_ADDITIVE: frozenset[WordClass] = frozenset({
    WordClass.BASIC, WordClass.SOLO, WordClass.HELPER,
})


def evaluate(tokens: Sequence[Token]) -> int:
    """Compute the integer value of a phrase that already passed validation.

    Only the opening of the phrase is re-checked; the rest of the grammar is
    assumed to hold.

    Raises:
        EmptyInputError: If there are no tokens.
        InvalidFirstWordError: If the first token cannot open a number.
    """
    check_opening(tokens)

    accumulator = 0
    deferred: list[int] = []

    for token in tokens:
        if token.word_class in _ADDITIVE:
            accumulator += token.value
        elif token.word_class == WordClass.SCALE_REPEAT:
            accumulator *= token.value
        else:
            # 'negative' lands here too, but always on an empty accumulator
            accumulator *= token.value
            deferred.append(accumulator)
            accumulator = 0

    accumulator += sum(deferred)

    # The sign is applied once, after all groups are summed
    if tokens[0].word == NEGATIVE:
        accumulator *= -1

    return accumulator
