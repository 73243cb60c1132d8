"""Test configuration for local imports without installing the package."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure():
    """Ensure the src/ directory is importable for tests."""
    root = Path(__file__).resolve().parents[1] / "src"
    sys.path.insert(0, str(root))


class ScriptedRandom:
    """Randomizer stand-in replaying fixed draws, to pin cut points and bit flips."""

    def __init__(self, probabilities=(), integers=()):
        self.probabilities = list(probabilities)
        self.integers = list(integers)

    def probability(self) -> float:
        return self.probabilities.pop(0)

    def integer(self, low: int, high: int) -> int:
        value = self.integers.pop(0)
        assert low <= value <= high, (value, low, high)
        return value

    def distinct_pair(self, low: int, high: int):
        return self.integer(low, high), self.integer(low, high)

    def shuffle(self, items) -> None:
        pass


@pytest.fixture
def scripted():
    return ScriptedRandom
