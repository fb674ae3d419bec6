"""Fixed-size collections over the lowercase letters a-z."""

from array import array
from collections.abc import Iterable, Iterator

from bitarray import bitarray
from bitarray.util import zeros

N_LETTERS = 26
"""Number of letters in the alphabet."""


def letter_index(ch: str) -> int:
    """Return the 0-based alphabet index of a lowercase letter.

    Raises:
        ValueError: If `ch` is not a lowercase ASCII letter.
    """
    index = ord(ch) - ord("a")
    if not (0 <= index < N_LETTERS):
        raise ValueError(f"Invalid letter: {ch!r}")
    return index


def index_letter(index: int) -> str:
    """Return the lowercase letter at the given alphabet index."""
    return chr(ord("a") + index)


class LetterSet:
    """A set of lowercase letters, stored as a 26-bit bitarray.

    Bit `i` is set if the letter `chr(ord('a') + i)` is a member.
    """

    __slots__ = ("_bits",)

    def __init__(self, letters: Iterable[str] = ()) -> None:
        self._bits: bitarray = zeros(N_LETTERS)
        for ch in letters:
            self.add(ch)

    def add(self, ch: str) -> None:
        """Add a letter to the set."""
        self._bits[letter_index(ch)] = True

    def contains(self, ch: str) -> bool:
        """Return whether the letter is a member of the set."""
        return bool(self._bits[letter_index(ch)])

    def has_index(self, index: int) -> bool:
        """Return whether the letter at alphabet index `index` is a member."""
        return bool(self._bits[index])

    def indices(self) -> list[int]:
        """Alphabet indices of the members, in alphabetical order."""
        return list(self._bits.search(1))

    def filter_counts(self, counts: "LetterCounts") -> Iterator[int]:
        """Yield the counts in `counts` for the members of this set only.

        Letters which are not members are skipped, so the caller sees exactly one count
        per allowed letter, in alphabetical order.
        """
        return (counts.get_raw(i) for i in self._bits.search(1))

    def __contains__(self, ch: object) -> bool:
        return isinstance(ch, str) and len(ch) == 1 and "a" <= ch <= "z" and self.contains(ch)

    def __iter__(self) -> Iterator[str]:
        return (index_letter(i) for i in self._bits.search(1))

    def __len__(self) -> int:
        return self._bits.count()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LetterSet):
            return NotImplemented
        return self._bits == other._bits

    def __str__(self) -> str:
        return "".join(self)

    def __repr__(self) -> str:
        return f"LetterSet({str(self)!r})"


class LetterCounts:
    """A map of lowercase letters to natural numbers, stored as 26 unsigned counters."""

    __slots__ = ("_counts",)

    def __init__(self, counts: Iterable[int] | None = None) -> None:
        if counts is None:
            self._counts: array[int] = array("L", [0] * N_LETTERS)
            return
        # `int()` also accepts numpy integer scalars; "L" rejects negative values.
        self._counts = array("L", (int(n) for n in counts))
        if len(self._counts) != N_LETTERS:
            raise ValueError(f"Expected {N_LETTERS} counts, got {len(self._counts)}.")

    def copy(self) -> "LetterCounts":
        """Generate a copy of the counters."""
        new = LetterCounts.__new__(LetterCounts)
        new._counts = self._counts.__copy__()
        return new

    def increment(self, ch: str, n: int = 1) -> None:
        """Add `n` (default 1) to the count of a letter."""
        self._counts[letter_index(ch)] += n

    def increment_raw(self, index: int, n: int = 1) -> None:
        """Add `n` to the count at alphabet index `index`."""
        self._counts[index] += n

    def count(self, ch: str) -> int:
        """Return the count of a letter."""
        return self._counts[letter_index(ch)]

    def get_raw(self, index: int) -> int:
        """Return the count at alphabet index `index`."""
        return self._counts[index]

    def total(self) -> int:
        """Sum of all counts."""
        return sum(self._counts)

    def as_dict(self) -> dict[str, int]:
        """Return the non-zero counts as a `{letter: count}` dict."""
        return {index_letter(i): n for i, n in enumerate(self._counts) if n}

    def __getitem__(self, ch: str) -> int:
        return self.count(ch)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LetterCounts):
            return NotImplemented
        return self._counts == other._counts

    def __repr__(self) -> str:
        return f"LetterCounts({self.as_dict()!r})"
