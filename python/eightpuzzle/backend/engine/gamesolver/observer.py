"""Optional event sink for solver progress."""

from __future__ import annotations

from loguru import logger

from eightpuzzle.backend.models.board import PuzzleState
from eightpuzzle.backend.models.result import Algorithm, SolveResult


class SearchObserver:
    """No-op hooks; override the ones you need.

    Solvers call these at fixed points and never read anything back, so a
    search behaves the same with or without an observer attached.
    """

    def on_start(self, algorithm: Algorithm, state: PuzzleState) -> None:
        pass

    def on_expand(self, state: PuzzleState, depth: int) -> None:
        pass

    def on_finish(self, result: SolveResult) -> None:
        pass


class LoggingObserver(SearchObserver):
    """Writes every hook to loguru at DEBUG under the solver's component."""

    def __init__(self) -> None:
        self._log = logger

    def on_start(self, algorithm: Algorithm, state: PuzzleState) -> None:
        self._log = logger.bind(component=algorithm.value)
        self._log.debug("Starting {} search from {}", algorithm.label, state)

    def on_expand(self, state: PuzzleState, depth: int) -> None:
        self._log.debug("(Depth {}) Expanding {}", depth, state)

    def on_finish(self, result: SolveResult) -> None:
        self._log.debug(
            "Finished: {} after {} expansions", result.status.value, result.nodes_expanded
        )
