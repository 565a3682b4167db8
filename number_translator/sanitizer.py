"""
Input clean-up and word splitting.

No grammar happens here. This module only decides which characters are
acceptable and turns a string into a list of lower-case words.

Character policy:
  - strict (default): anything other than ASCII letters, whitespace and
    hyphens is rejected with InvalidCharacterError
  - lenient: such characters are dropped and act as word breaks
"""

from __future__ import annotations

import re

from .exceptions import InvalidCharacterError

_DISALLOWED = re.compile(r"[^a-z\s\-]")
_SEPARATORS = re.compile(r"[\s\-]+")


def sanitize(text: str, strict: bool = True) -> str:
    """Lower-case and trim a phrase, enforcing the character policy.

    Raises:
        InvalidCharacterError: In strict mode, if a disallowed character is present.
    """
    normalized = text.lower().strip()

    offending = list(_DISALLOWED.finditer(normalized))
    if not offending:
        return normalized

    if strict:
        # Keep order of first appearance, drop repeats
        unique = list(dict.fromkeys(match.group() for match in offending))
        raise InvalidCharacterError(unique, offending[0].start())

    return _DISALLOWED.sub(" ", normalized).strip()


def tokenize(text: str) -> list[str]:
    """Split on whitespace and hyphens: 'forty-five thousand' → ['forty', 'five', 'thousand']."""
    return [word for word in _SEPARATORS.split(text) if word]
