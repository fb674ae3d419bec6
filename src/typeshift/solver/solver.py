"""Main solver module for Typeshift puzzles: best-first search over partial solutions."""

import heapq
import sys
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from os import PathLike
from time import time
from typing import TextIO

from typeshift.errors import NoCoverExists, SearchBudgetExceeded
from typeshift.logging_utils import get_logger
from typeshift.puzzle import Puzzle, load_puzzle
from typeshift.solver.config import config as solver_config
from typeshift.solver.partial import PartialSolution, RankedSolution
from typeshift.solver.utils import TIMESTAMP_FMT, SearchStats, validate_solution
from typeshift.util import int_comma, time_str
from typeshift.wordlist import Dictionary

logger = get_logger("solver")

Solution = frozenset[str]


class SearchMode(Enum):
    """What the search returns."""

    FIRST = "first"
    """Stop at the first complete cover popped from the frontier."""

    ALL = "all"
    """Exhaust the frontier and collect every complete cover of minimal size."""

    BEST = "best"
    """Stop at a cover as small as the widest column, else behave like ALL."""


@dataclass
class SearchResult:
    """Outcome of a successful search."""

    best: Solution
    """The solution chosen as representative: the first found, or the alphabetically first
    of the minimal ones."""

    solutions: set[Solution]
    """All minimal complete covers found (just `best` for FIRST and early-exit BEST)."""

    stats: SearchStats
    """Search statistics."""

    @property
    def steps(self) -> int:
        """Number of partial solutions popped from the frontier."""
        return self.stats.steps


def _solution_sort_key(solution: Solution) -> list[str]:
    return sorted(solution)


def search(
    puzzle: Puzzle,
    mode: SearchMode = SearchMode.FIRST,
    *,
    max_steps: int | None = None,
    time_limit: float | None = None,
) -> SearchResult:
    """Search for a minimal set of words covering every letter of the puzzle.

    The frontier starts with the empty partial solution.  Each step pops the highest-priority
    partial solution (see `RankedSolution`).  A complete cover is returned or recorded,
    according to `mode`.  Otherwise one child is pushed per word tied for the best rank (see
    `PartialSolution.next_words`), skipping word sets which have already been expanded, and
    the popped word set is marked as expanded.

    The visited set is keyed on word sets only: partial solutions with the same letter usage
    but different words are all expanded, while a word set reached again after expansion is
    never pushed.  This overtrims, so ALL may miss some minimal solutions.

    Args:
        puzzle: The puzzle to solve.
        mode: Whether to return the first cover, all minimal covers, or the best cover.
        max_steps: Step budget.  Defaults to the configured `max_steps`.
        time_limit: Time budget in seconds.  Defaults to the configured `time_limit`.

    Returns:
        A SearchResult.

    Raises:
        NoCoverExists: If no set of candidate words covers the puzzle.
        SearchBudgetExceeded: If the step or time budget runs out first.
    """
    max_steps = solver_config.max_steps if max_steps is None else max_steps
    time_limit = solver_config.time_limit if time_limit is None else time_limit
    report_interval = max(1, solver_config.report_interval)

    stats = SearchStats()
    deadline = None if time_limit is None else stats.start_time + time_limit
    logger.info(
        "Starting %s search over %s candidate words (%d columns)",
        mode.value,
        int_comma(puzzle.size()),
        puzzle.width,
    )

    uncovered = puzzle.uncovered_letters()
    if uncovered:
        letters = ", ".join(f"{ch!r} in column {col}" for col, ch in uncovered)
        raise NoCoverExists(f"No candidate word supplies {letters}.", steps=stats.steps)

    minimum_words = puzzle.min_solution_size()
    frontier: list[RankedSolution] = [RankedSolution(PartialSolution.empty(puzzle))]
    visited: set[tuple[str, ...]] = set()
    complete: set[Solution] = set()

    while frontier:
        if max_steps is not None and stats.steps >= max_steps:
            raise SearchBudgetExceeded(
                f"Step budget of {int_comma(max_steps)} exhausted.",
                steps=stats.steps,
                elapsed=stats.elapsed,
            )
        if deadline is not None and time() >= deadline:
            raise SearchBudgetExceeded(
                f"Time budget of {time_str(time_limit)} exhausted.",
                steps=stats.steps,
                elapsed=stats.elapsed,
            )

        ranked = heapq.heappop(frontier)
        stats.steps += 1
        partial_solution = ranked.solution

        if stats.steps % report_interval == 0:
            logger.debug(
                "Step %s after %s: frontier %s, visited %s, complete %s, current %s",
                int_comma(stats.steps),
                time_str(stats.elapsed),
                int_comma(len(frontier)),
                int_comma(len(visited)),
                int_comma(len(complete)),
                ranked,
            )

        if ranked.solved:
            words = frozenset(partial_solution.words)
            if mode is SearchMode.FIRST or (
                mode is SearchMode.BEST and len(words) == minimum_words
            ):
                return _finish(mode, words, {words}, stats, visited, complete)

            complete.add(words)
            continue

        for next_word in partial_solution.next_words():
            child = partial_solution.copy()
            child.add_word(next_word)
            if child.key() in visited:
                continue

            heapq.heappush(frontier, RankedSolution(child))

        stats.max_frontier = max(stats.max_frontier, len(frontier))
        visited.add(partial_solution.key())

    # Only reached if some letter is supplied by no word, which the check above rules out
    if not complete:
        raise NoCoverExists("Search exhausted without finding a cover.", steps=stats.steps)

    minimum_size = min(len(solution) for solution in complete)
    all_smallest = {solution for solution in complete if len(solution) == minimum_size}
    best = min(all_smallest, key=_solution_sort_key)
    return _finish(mode, best, all_smallest, stats, visited, complete)


def _finish(
    mode: SearchMode,
    best: Solution,
    solutions: set[Solution],
    stats: SearchStats,
    visited: set[tuple[str, ...]],
    complete: set[Solution],
) -> SearchResult:
    stats.end_time = time()
    stats.visited = len(visited)
    stats.complete = len(complete | solutions)
    logger.info(
        "Finished %s search in %s steps (%s): %d minimal solution(s) of %d words",
        mode.value,
        int_comma(stats.steps),
        time_str(stats.elapsed),
        len(solutions),
        len(best),
    )
    return SearchResult(best=best, solutions=solutions, stats=stats)


def find_first_solution(puzzle: Puzzle, **budget: float | None) -> tuple[Solution, int]:
    """Returns the first solution found, and the number of steps taken to find it.

    The search order makes this solution minimal or close to it, but this is not guaranteed.
    Keyword arguments are passed on to `search` (`max_steps`, `time_limit`).
    """
    result = search(puzzle, SearchMode.FIRST, **budget)
    return result.best, result.steps


def find_all_solutions(puzzle: Puzzle, **budget: float | None) -> tuple[set[Solution], int]:
    """Returns every minimal solution found by an exhaustive search, and the steps taken."""
    result = search(puzzle, SearchMode.ALL, **budget)
    return result.solutions, result.steps


def find_best_solution(puzzle: Puzzle, **budget: float | None) -> tuple[Solution, int]:
    """Returns a minimal solution, and the steps taken to find it.

    Stops early at a solution as small as the widest column, which cannot be beaten;
    otherwise exhausts the search and returns the alphabetically first minimal solution.
    """
    result = search(puzzle, SearchMode.BEST, **budget)
    return result.best, result.steps


def run(
    puzzle_path: str | PathLike,
    dictionary: Dictionary,
    *,
    find_all: bool = False,
    out: TextIO | None = None,
) -> SearchResult:
    """Solve one puzzle file and print a report.

    Args:
        puzzle_path: Path to the puzzle file.
        dictionary: The dictionary to draw words from.
        find_all: Whether to also run the exhaustive search for all minimal solutions.
        out: Stream to print the report to.  Defaults to the current `sys.stdout`.

    Returns:
        The SearchResult of the last search run.
    """
    out = sys.stdout if out is None else out
    puzzle = load_puzzle(puzzle_path, dictionary)
    print(f"Puzzle: {puzzle_path}", file=out)
    for col, column in enumerate(puzzle.columns):
        print(f"  column {col}: {column}", file=out)
    print(f"Possible words: {int_comma(puzzle.size())}", file=out)
    start_time_str = datetime.now().astimezone().strftime(TIMESTAMP_FMT)
    print(f"Start time: {start_time_str}", file=out, flush=True)

    result = search(puzzle, SearchMode.FIRST)
    _print_solution("First solution", puzzle, result, out)

    if find_all:
        result = search(puzzle, SearchMode.ALL)
        print(f"Minimal solutions: {int_comma(len(result.solutions))}", file=out)
        _print_solution("Best solution", puzzle, result, out)

    print(file=out, flush=True)
    return result


def _print_solution(label: str, puzzle: Puzzle, result: SearchResult, out: TextIO) -> None:
    if not validate_solution(puzzle, result.best):
        raise RuntimeError(f"Search returned an invalid solution: {sorted(result.best)}")
    print(f"{label}: {', '.join(sorted(result.best))}", file=out)
    print(
        f"  {len(result.best)} words, {int_comma(result.steps)} steps, "
        f"{time_str(result.stats.elapsed)}",
        file=out,
        flush=True,
    )
