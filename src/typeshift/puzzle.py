"""The Typeshift puzzle model: allowed letters per column and the candidate words."""

from collections.abc import Sequence
from os import PathLike
from pathlib import Path

import numpy as np

from typeshift.errors import InvalidPuzzleInput
from typeshift.letters import N_LETTERS, LetterCounts, LetterSet, index_letter, letter_index
from typeshift.wordlist import Dictionary


def parse_columns(text: str) -> list[LetterSet]:
    """Parse raw puzzle input into one LetterSet per column.

    The input holds one line per column, leftmost column first; each line lists the letters
    allowed in that column.  Blank lines and surrounding whitespace are ignored, and repeated
    letters within a line collapse into the set.

    Raises:
        InvalidPuzzleInput: If there are no columns, or a line contains anything other than
            lowercase ASCII letters.
    """
    columns: list[LetterSet] = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        bad_chars = sorted({ch for ch in line if not ("a" <= ch <= "z")})
        if bad_chars:
            raise InvalidPuzzleInput(
                f"Line {line_no} contains invalid characters: {''.join(bad_chars)!r}"
            )
        columns.append(LetterSet(line))

    if not columns:
        raise InvalidPuzzleInput("Puzzle input has no columns.")
    return columns


class Puzzle:
    """An unsolved Typeshift puzzle.

    Immutable once constructed, and shared by every partial solution of a search.
    """

    def __init__(self, columns: Sequence[LetterSet], dictionary: Dictionary) -> None:
        """Build the puzzle from its columns, reducing the dictionary to spellable words.

        Args:
            columns: Allowed letters per column, leftmost first.
            dictionary: Reference dictionary; only words as long as the puzzle is wide are
                consulted.

        Raises:
            InvalidPuzzleInput: If there are no columns, or a column allows no letters.
        """
        if not columns:
            raise InvalidPuzzleInput("Puzzle input has no columns.")
        for i, column in enumerate(columns):
            if not len(column):
                raise InvalidPuzzleInput(f"Column {i} allows no letters.")

        self.columns: tuple[LetterSet, ...] = tuple(columns)
        """Allowed letters per column."""

        words: list[str] = []
        word_counts: list[np.ndarray] = []
        for word, counts in dictionary.entries(len(self.columns)):
            if all(column.contains(ch) for column, ch in zip(self.columns, word)):
                words.append(word)
                word_counts.append(counts)

        self.words: tuple[str, ...] = tuple(words)
        """Candidate words: every dictionary word spellable from the columns, sorted."""

        self.word_indices: tuple[tuple[int, ...], ...] = tuple(
            tuple(letter_index(ch) for ch in word) for word in self.words
        )
        """Alphabet index of each letter of each candidate word, aligned with `words`."""

        total = np.sum(word_counts, axis=0) if word_counts else np.zeros(N_LETTERS, np.uint64)
        self.rarity: LetterCounts = LetterCounts(total)
        """Total occurrences of each letter over all candidate words."""

        self.word_rarity: tuple[int, ...] = tuple(
            min(self.rarity.get_raw(i) for i in indices) for indices in self.word_indices
        )
        """Rarity of the rarest letter of each candidate word, aligned with `words`."""

    @classmethod
    def from_text(cls, text: str, dictionary: Dictionary) -> "Puzzle":
        """Build a puzzle from raw input text (see `parse_columns`)."""
        return cls(parse_columns(text), dictionary)

    @property
    def width(self) -> int:
        """Number of columns, which is also the length of every candidate word."""
        return len(self.columns)

    def size(self) -> int:
        """The number of candidate words (and size of the search space)."""
        return len(self.words)

    def min_solution_size(self) -> int:
        """Lower bound on the number of words in any solution.

        Each word uses one letter per column, so the widest column needs at least as many
        words as it has letters.
        """
        return max(len(column) for column in self.columns)

    def uncovered_letters(self) -> list[tuple[int, str]]:
        """Return the `(column, letter)` pairs which no candidate word can supply.

        If the result is non-empty, the puzzle has no solution.
        """
        supplied = [LetterSet() for _ in self.columns]
        for word in self.words:
            for col, ch in enumerate(word):
                supplied[col].add(ch)
        return [
            (col, index_letter(i))
            for col, column in enumerate(self.columns)
            for i in column.indices()
            if not supplied[col].has_index(i)
        ]

    def __repr__(self) -> str:
        columns = " ".join(str(column) for column in self.columns)
        return f"Puzzle(columns={columns!r}, size={self.size()})"


def load_puzzle(puzzle_path: str | PathLike, dictionary: Dictionary) -> Puzzle:
    """Load a puzzle file (one line of allowed letters per column).

    Raises:
        FileNotFoundError: If the file does not exist.
        InvalidPuzzleInput: If the file contents are not a valid puzzle.
    """
    path = Path(puzzle_path)
    with open(path, "r", encoding="utf-8") as f:
        return Puzzle.from_text(f.read(), dictionary)
