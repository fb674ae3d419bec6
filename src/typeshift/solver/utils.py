"""Utility functions for the Typeshift solver."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from time import time

from typeshift.puzzle import Puzzle

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S.%f %Z%z"


@dataclass
class SearchStats:
    """Statistics collected during one search."""

    steps: int = 0
    """Number of partial solutions popped from the frontier."""

    start_time: float = field(default_factory=time)
    """Timestamp when the search started."""

    max_frontier: int = 0
    """Largest frontier size seen during the search."""

    visited: int = 0
    """Number of distinct word sets expanded."""

    complete: int = 0
    """Number of distinct complete covers recorded."""

    end_time: float | None = None
    """Timestamp when the search finished, or None while it is running."""

    @property
    def elapsed(self) -> float:
        """Seconds spent searching so far (or in total, once finished)."""
        end_time = time() if self.end_time is None else self.end_time
        return end_time - self.start_time


def validate_solution(puzzle: Puzzle, words: Iterable[str]) -> bool:
    """Validate that `words` solve the puzzle.

    Every word must have one letter per column, each allowed in its column, and every allowed
    letter of every column must appear at that position in at least one word.
    """
    used = [set() for _ in puzzle.columns]
    for word in words:
        if len(word) != puzzle.width:
            return False
        for col, ch in enumerate(word):
            if ch not in puzzle.columns[col]:
                return False
            used[col].add(ch)

    return all(set(column) == used[col] for col, column in enumerate(puzzle.columns))
