#!/usr/bin/env python3
"""
Number Translator: Entry Point
==============================

Translates spelled-out English integers and prints a report.

Usage:
    python main.py                                   # Built-in sample phrases
    python main.py "forty five" "negative ten"       # Your own phrases
    NUMBER_TRANSLATOR_STRICT_CHARACTERS=false python main.py "forty-five!"
"""

from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv

from number_translator.config import Settings
from number_translator.models import TranslationResult
from number_translator.pipeline import translate

load_dotenv()


# ─── Sample Phrases: Some Broken on Purpose ────────────────────────

SAMPLE_PHRASES = [
    "zero",
    "forty five",
    "one hundred twenty three",
    "negative ten",
    "two million three hundred thousand forty five",
    "zero two",
    "ten ten",
    "one thousand two million",
    "one million two million",
    "fourty two",
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def _print_result(result: TranslationResult) -> None:
    """Print one translated phrase."""
    print(f"  {_BOLD}{result.phrase!r}{_RESET}")
    if result.is_valid:
        assert result.value is not None
        print(f"    {_GREEN}= {result.value:,}{_RESET}")
        classes = " ".join(t.word_class.value for t in result.tokens)
        print(f"    {_DIM}{classes}{_RESET}")
        return

    assert result.error is not None
    print(f"    {_RED}[{result.error.code.value}]{_RESET}")
    print(f"    {result.error.message}")
    for k, v in result.error.details.items():
        print(f"      {_DIM}{k}: {v}{_RESET}")


def print_report(results: list[TranslationResult]) -> int:
    """Pretty-print all results with ANSI color codes.

    Returns:
        0 if every phrase translated, 1 if any was rejected.
    """
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  NUMBER TRANSLATION REPORT{_RESET}")
    print(f"{'=' * _WIDTH}")

    for result in results:
        _print_result(result)
        print(f"{'─' * _WIDTH}")

    rejected = [r for r in results if not r.is_valid]
    if rejected:
        print(f"  {_RED}{_BOLD}{len(rejected)} of {len(results)} phrase(s) rejected{_RESET}")
    else:
        print(f"  {_GREEN}{_BOLD}ALL {len(results)} PHRASE(S) TRANSLATED{_RESET}")
    print(f"{'=' * _WIDTH}\n")

    return 1 if rejected else 0


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Translate the given phrases (or the samples) and print the report."""
    settings = Settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    phrases = argv if argv else SAMPLE_PHRASES
    results = [translate(phrase, settings) for phrase in phrases]
    return print_report(results)


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
