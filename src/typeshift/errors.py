"""Exceptions raised by the Typeshift solver."""


class TypeshiftError(Exception):
    """Base class for errors reported to callers of the solver."""


class InvalidPuzzleInput(TypeshiftError, ValueError):
    """The raw puzzle input has no columns, or a column contains non-letter characters."""


class NoCoverExists(TypeshiftError):
    """No set of candidate words covers every allowed letter of every column."""

    def __init__(self, message: str, *, steps: int) -> None:
        super().__init__(message)
        self.steps: int = steps
        """Number of search steps taken before giving up."""


class SearchBudgetExceeded(TypeshiftError):
    """The search hit its step or time budget before reaching a result."""

    def __init__(self, message: str, *, steps: int, elapsed: float) -> None:
        super().__init__(message)
        self.steps: int = steps
        """Number of search steps taken before the budget ran out."""

        self.elapsed: float = elapsed
        """Wall-clock seconds spent searching."""
