"""Pytest configuration: ensures the project root is importable."""

import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep a developer's NUMBER_TRANSLATOR_* variables out of the tests."""
    for key in list(os.environ):
        if key.startswith("NUMBER_TRANSLATOR_"):
            monkeypatch.delenv(key)
    yield
