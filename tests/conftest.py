"""Shared fixtures for the Typeshift tests."""

import pytest

from typeshift.puzzle import Puzzle
from typeshift.wordlist import Dictionary

SAMPLE_PUZZLE = """\
wsab
hbta
oesu
dpive
lceys
"""
"""The 2023-11-16 puzzle: five columns, the widest allowing five letters."""

SAMPLE_SOLUTION = frozenset({"above", "basic", "study", "wheel", "whups"})
"""The only five-word cover of SAMPLE_PUZZLE using SAMPLE_WORDS."""

SAMPLE_WORDS = [
    # The cover
    "above",
    "basic",
    "study",
    "wheel",
    "whups",
    # Spellable, but never needed
    "sheds",
    "shoes",
    "studs",
    # Not spellable from the sample columns
    "apple",
    "whale",
    "tower",
    "zebra",
    # Wrong length
    "cat",
    "cot",
    "dog",
    "abouts",
]


@pytest.fixture
def dictionary() -> Dictionary:
    return Dictionary(SAMPLE_WORDS)


@pytest.fixture
def sample_puzzle(dictionary: Dictionary) -> Puzzle:
    return Puzzle.from_text(SAMPLE_PUZZLE, dictionary)


@pytest.fixture
def two_way_puzzle() -> Puzzle:
    """A 2x2 puzzle with exactly two minimal covers: {ac, bd} and {ad, bc}."""
    return Puzzle.from_text("ab\ncd\n", Dictionary(["ac", "ad", "bc", "bd"]))


@pytest.fixture
def sample_solution() -> frozenset[str]:
    return SAMPLE_SOLUTION


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_PUZZLE


@pytest.fixture
def sample_words() -> list[str]:
    return list(SAMPLE_WORDS)
