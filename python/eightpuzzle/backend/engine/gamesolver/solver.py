"""8-puzzle solver entry point."""

from __future__ import annotations

import threading
from collections.abc import Iterable

from loguru import logger

from eightpuzzle.backend.engine.gamesolver.astar import AStarSolver
from eightpuzzle.backend.engine.gamesolver.backtracking import BacktrackingSolver
from eightpuzzle.backend.engine.gamesolver.observer import SearchObserver
from eightpuzzle.backend.models.board import Move, PuzzleState, is_solvable
from eightpuzzle.backend.models.result import Algorithm, SolveResult
from eightpuzzle.config import SolverConfig


class Solver:
    """Stateless dispatcher; all methods are static."""

    @staticmethod
    def solve(
        state: PuzzleState | Iterable[int],
        algorithm: Algorithm | str = Algorithm.ASTAR,
        *,
        config: SolverConfig | None = None,
        observer: SearchObserver | None = None,
        cancel: threading.Event | None = None,
    ) -> SolveResult:
        """Search from *state* to the goal with *algorithm*.

        Raises ``InvalidStateError`` or ``UnknownAlgorithmError`` before any
        search starts.  An unsolved search is reported through
        ``SolveResult.status``, never raised.
        """
        start = PuzzleState.from_flat(state)
        algo = Algorithm.parse(algorithm)
        config = config or SolverConfig()

        logger.bind(component=algo.value).debug("Solving {} with {}", start, algo.label)
        if algo is Algorithm.ASTAR:
            solver = AStarSolver()
        else:
            solver = BacktrackingSolver(config.max_depth, config.visited_policy)
        return solver.solve(start, observer=observer, cancel=cancel)

    @staticmethod
    def hint(state: PuzzleState | Iterable[int]) -> Move | None:
        """Return the first move of an optimal solution, or ``None`` if solved / unsolvable."""
        result = Solver.solve(state, Algorithm.ASTAR)
        if not result.solved or len(result.path) < 2:
            return None
        step = result.path[1]
        return Move(step.direction, step.moved_tile)

    @staticmethod
    def is_solvable(state: PuzzleState | Iterable[int]) -> bool:
        """Return True if *state* can reach the goal state."""
        return is_solvable(PuzzleState.from_flat(state))
