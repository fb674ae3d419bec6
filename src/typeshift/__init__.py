"""Typeshift Puzzle Solver.

A Typeshift puzzle has a number of columns, each allowing a set of letters.  The solver finds
a smallest set of dictionary words, each spelled with one allowed letter per column, that
together use every allowed letter of every column.  Uses best-first search over partial
solutions.
"""

import argparse
import sys
from collections.abc import Sequence

from .errors import InvalidPuzzleInput, NoCoverExists, SearchBudgetExceeded, TypeshiftError
from .puzzle import Puzzle, load_puzzle, parse_columns
from .solver import solver
from .solver.solver import (
    SearchMode,
    find_all_solutions,
    find_best_solution,
    find_first_solution,
    search,
)
from .wordlist import Dictionary, load_dictionary

__all__ = [
    "Dictionary",
    "InvalidPuzzleInput",
    "NoCoverExists",
    "Puzzle",
    "SearchBudgetExceeded",
    "SearchMode",
    "TypeshiftError",
    "find_all_solutions",
    "find_best_solution",
    "find_first_solution",
    "load_dictionary",
    "load_puzzle",
    "main",
    "parse_columns",
    "search",
]


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point for the Typeshift solver."""
    parser = argparse.ArgumentParser(prog="typeshift", description="Typeshift Puzzle Solver.")
    parser.add_argument("puzzles", nargs="+", help="puzzle files, one line of letters per column")
    parser.add_argument("--dict", dest="word_list", help="word list file (default: from config)")
    parser.add_argument(
        "--all", action="store_true", help="also search for all minimal solutions"
    )
    args = parser.parse_args(argv)

    try:
        dictionary = load_dictionary(args.word_list)
        for puzzle_path in args.puzzles:
            solver.run(puzzle_path, dictionary, find_all=args.all)
    except (TypeshiftError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("Solver interrupted by user.", file=sys.stderr)
        sys.exit(1)
