"""Partial solutions: the nodes of the best-first search."""

from functools import total_ordering
from itertools import takewhile
from operator import itemgetter

from sortedcontainers import SortedSet

from typeshift.letters import LetterCounts
from typeshift.puzzle import Puzzle

WordRank = tuple[int, int]
"""Rank of a candidate word, best first: (-new letters, rarity of the rarest letter)."""


class PartialSolution:
    """A set of chosen words, and how often each letter of each column has been used.

    Children are made by copying a parent and adding one word, so a partial solution is
    only ever modified by the branch that created it.
    """

    __slots__ = ("puzzle", "words", "usages")

    def __init__(
        self,
        puzzle: Puzzle,
        words: SortedSet | None = None,
        usages: list[LetterCounts] | None = None,
    ) -> None:
        self.puzzle: Puzzle = puzzle
        """The puzzle being solved (shared, read-only)."""

        self.words: SortedSet = SortedSet() if words is None else words
        """Words chosen so far, in alphabetical order."""

        self.usages: list[LetterCounts] = (
            [LetterCounts() for _ in puzzle.columns] if usages is None else usages
        )
        """Per column, the number of chosen words using each letter there."""

    @classmethod
    def empty(cls, puzzle: Puzzle) -> "PartialSolution":
        """A partial solution with no words chosen."""
        return cls(puzzle)

    def copy(self) -> "PartialSolution":
        """Generate a copy which can be extended independently of this one."""
        return PartialSolution(
            self.puzzle,
            self.words.copy(),
            [counts.copy() for counts in self.usages],
        )

    def key(self) -> tuple[str, ...]:
        """The chosen words in alphabetical order.

        Identifies the node regardless of the order the words were added in.
        """
        return tuple(self.words)

    def add_word(self, word: str) -> None:
        """Choose a candidate word.

        The word must be one of `puzzle.words` and not already chosen; this is not checked.
        """
        for counts, ch in zip(self.usages, word):
            counts.increment(ch)
        self.words.add(word)

    def solved(self) -> bool:
        """Whether every allowed letter of every column has been used at least once."""
        for column, counts in zip(self.puzzle.columns, self.usages):
            if not all(column.filter_counts(counts)):
                return False
        return True

    def overlaps(self) -> int:
        """The number of (column, letter) pairs used more than once."""
        return sum(
            1
            for column, counts in zip(self.puzzle.columns, self.usages)
            for n in column.filter_counts(counts)
            if n > 1
        )

    def rank_words(self) -> list[tuple[str, WordRank]]:
        """Rank the candidate words not yet chosen, best first.

        Words are ranked by how many columns they would fill with a still-unused letter
        (descending), then by the rarity of their rarest letter (ascending).  Ties keep
        dictionary order.
        """
        puzzle = self.puzzle
        usages = self.usages
        ranked: list[tuple[str, WordRank]] = []
        for word, indices, rarity in zip(puzzle.words, puzzle.word_indices, puzzle.word_rarity):
            if word in self.words:
                continue
            new_letters = 0
            for counts, i in zip(usages, indices):
                if counts.get_raw(i) == 0:
                    new_letters += 1
            ranked.append((word, (-new_letters, rarity)))

        ranked.sort(key=itemgetter(1))
        return ranked

    def next_words(self) -> list[str]:
        """Return every word tied for the best rank.

        If even the best word would use no new letter, no word can ever complete this
        partial solution, and the result is empty.
        """
        ranked = self.rank_words()
        if not ranked:
            return []
        best_rank = ranked[0][1]
        if best_rank[0] == 0:
            return []
        return [word for word, _rank in takewhile(lambda item: item[1] == best_rank, ranked)]

    def __repr__(self) -> str:
        # The candidate word list is left out to keep the output short
        return (
            f"PartialSolution(words={list(self.words)!r}, "
            f"usages={[counts.as_dict() for counts in self.usages]!r}, "
            f"puzzle.size={self.puzzle.size()})"
        )


@total_ordering
class RankedSolution:
    """Wraps a PartialSolution with its position in the search frontier.

    The smallest RankedSolution is the one to expand first, as `heapq` is a min-heap:
    solved before unsolved, then fewer overlaps, then fewer words.  The chosen words
    break any remaining tie, so the order is total.
    """

    __slots__ = ("solution", "rank")

    def __init__(self, solution: PartialSolution) -> None:
        self.solution: PartialSolution = solution
        """The wrapped partial solution."""

        self.rank: tuple[bool, int, int, tuple[str, ...]] = (
            not solution.solved(),
            solution.overlaps(),
            len(solution.words),
            solution.key(),
        )
        """Sort key, computed once; the partial solution must not change after wrapping."""

    @property
    def solved(self) -> bool:
        """Whether the wrapped partial solution is a complete cover."""
        return not self.rank[0]

    def __lt__(self, other: "RankedSolution") -> bool:
        return self.rank < other.rank

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RankedSolution):
            return NotImplemented
        return self.rank == other.rank

    def __hash__(self) -> int:
        return hash(self.rank)

    def __repr__(self) -> str:
        return f"RankedSolution(rank={self.rank[:3]!r}, words={list(self.rank[3])!r})"
