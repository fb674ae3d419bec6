"""Module for dictionary management in Typeshift."""

from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path

import numpy as np
from sortedcontainers import SortedList

from typeshift.letters import N_LETTERS, letter_index
from typeshift.logging_utils import get_logger
from typeshift.solver.config import config as solver_config

logger = get_logger("wordlist")

WordEntry = tuple[str, np.ndarray | None]
"""A dictionary word, paired with its 26-element letter-count vector if one is known."""


def is_valid_word(word: str) -> bool:
    """Return whether `word` is a non-empty string of lowercase ASCII letters."""
    return bool(word) and word.isascii() and word.isalpha() and word.islower()


def count_letters(word: str) -> np.ndarray:
    """Count the letters of a word.

    Returns:
        An array of 26 unsigned integers; element `i` is the number of times the letter
        `chr(ord('a') + i)` occurs in `word`.
    """
    return np.bincount([letter_index(ch) for ch in word], minlength=N_LETTERS).astype(np.uint32)


class Dictionary:
    """A read-only word table, partitioned by word length.

    Words within each length bucket are kept in sorted order, so that everything built from
    the dictionary (candidate lists, tie-breaks) is deterministic.
    """

    def __init__(self, entries: Iterable[str | WordEntry] = ()) -> None:
        """Build the table from words, or `(word, letter_counts)` pairs.

        Args:
            entries: Lowercase words, optionally paired with a precomputed letter-count
                vector (26 elements, see `count_letters`).  Duplicate words are merged.

        Raises:
            ValueError: If a word is not lowercase ASCII, or a vector has the wrong shape.
        """
        self._buckets: dict[int, SortedList[str]] = {}
        self._counts: dict[str, np.ndarray] = {}

        for entry in entries:
            word, counts = (entry, None) if isinstance(entry, str) else entry
            if not is_valid_word(word):
                raise ValueError(f"Invalid dictionary word: {word!r}")
            if word in self._counts:
                continue
            if counts is None:
                counts = count_letters(word)
            else:
                counts = np.asarray(counts, dtype=np.uint32)
                if counts.shape != (N_LETTERS,):
                    raise ValueError(
                        f"Letter counts for {word!r} must have shape ({N_LETTERS},), "
                        f"got {counts.shape}."
                    )
            self._counts[word] = counts
            self._buckets.setdefault(len(word), SortedList()).add(word)

    @classmethod
    def from_buckets(cls, buckets: Mapping[int, Iterable[str | WordEntry]]) -> "Dictionary":
        """Build the table from a mapping of word length to words (or word entries).

        Raises:
            ValueError: If a word's length does not match its bucket.
        """
        entries: list[str | WordEntry] = []
        for length, bucket in buckets.items():
            for entry in bucket:
                word = entry if isinstance(entry, str) else entry[0]
                if len(word) != length:
                    raise ValueError(f"Word {word!r} filed under length {length}.")
                entries.append(entry)
        return cls(entries)

    def words(self, length: int) -> tuple[str, ...]:
        """All words of the given length, in sorted order."""
        return tuple(self._buckets.get(length, ()))

    def entries(self, length: int) -> Iterator[WordEntry]:
        """All `(word, letter_counts)` pairs of the given length, in sorted word order."""
        return ((word, self._counts[word]) for word in self.words(length))

    def letter_counts(self, word: str) -> np.ndarray:
        """The letter-count vector of a dictionary word."""
        return self._counts[word]

    @property
    def lengths(self) -> list[int]:
        """Word lengths present in the dictionary, ascending."""
        return sorted(self._buckets)

    def __contains__(self, word: object) -> bool:
        return word in self._counts

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        sizes = ", ".join(f"{n}: {len(self._buckets[n])}" for n in self.lengths)
        return f"Dictionary({{{sizes}}})"


def load_dictionary(
    path: str | Path | None = None,
    *,
    min_len: int | None = None,
    max_len: int | None = None,
) -> Dictionary:
    """Load the dictionary from a word list file.

    Each line holds one word, optionally wrapped in double quotes.  Words are lowercased;
    words with characters other than ASCII letters are skipped.

    Args:
        path: Path to the word list.  Defaults to the configured `word_list_path`.
        min_len: Minimum word length to include.  Defaults to the configured value.
        max_len: Maximum word length to include.  Defaults to the configured value.

    Returns:
        A Dictionary of the words read.
    """
    word_list_path = Path(solver_config.word_list_path if path is None else path)
    if not word_list_path.is_file():
        raise FileNotFoundError(f"Word list file not found: {word_list_path}")
    min_len = solver_config.min_word_length if min_len is None else min_len
    max_len = solver_config.max_word_length if max_len is None else max_len

    words: set[str] = set()
    skipped = 0
    with word_list_path.open("r", encoding="utf-8") as f:
        for line in f:
            word = line.strip().strip('"').lower()
            if not word:
                continue
            if not is_valid_word(word):
                skipped += 1
                continue
            if len(word) < min_len or len(word) > max_len:
                continue
            words.add(word)

    dictionary = Dictionary(words)
    logger.info(
        "Loaded %d words of length %d-%d from %s (%d non-alphabetic entries skipped)",
        len(dictionary),
        min_len,
        max_len,
        word_list_path,
        skipped,
    )
    return dictionary
