from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure "src" is on sys.path for imports in tests
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from pokeracademy.dynamic.cards import Card, parse_cards  # noqa: E402


@pytest.fixture
def cards():
    """Parse whitespace separated card text, e.g. ``cards("As Ks Qs")``."""

    def _parse(text: str) -> list[Card]:
        return parse_cards(text.split())

    return _parse
