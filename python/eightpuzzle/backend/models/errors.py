"""Exception taxonomy for the solver.

``NoSolution`` is deliberately absent: an unsolved search is a normal
``SolveResult`` status, not an exception.
"""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error raised by this package."""


class InvalidStateError(PuzzleError, ValueError):
    """Input is not nine integers forming a permutation of 0..8."""


class UnknownAlgorithmError(PuzzleError, ValueError):
    """Algorithm selector outside the supported set."""

    def __init__(self, name: object) -> None:
        super().__init__(f"Unknown algorithm {name!r}; expected 'astar' or 'backtracking'.")
        self.name = name


class EmptyFrontierError(PuzzleError, IndexError):
    """``extract_min`` on an empty frontier; always a solver bug."""


class WorkerFailureError(PuzzleError, RuntimeError):
    """An offloaded solve raised or crashed."""
