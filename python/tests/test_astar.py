"""A* solver: optimality against a breadth-first reference.

Every solved path is replayed move by move to check it really reaches the
goal.
"""

from __future__ import annotations

import threading

import pytest
from helpers import replay

from eightpuzzle.backend.engine.gamesolver.astar import AStarSolver
from eightpuzzle.backend.engine.gamesolver.observer import SearchObserver
from eightpuzzle.backend.models.board import Direction, PuzzleState
from eightpuzzle.backend.models.result import Algorithm, SolveStatus

UNSOLVABLE = PuzzleState.from_flat([2, 1, 3, 4, 5, 6, 7, 8, 0])
HARDEST = PuzzleState.from_flat([8, 6, 7, 2, 5, 4, 3, 0, 1])


class RecordingObserver(SearchObserver):
    def __init__(self) -> None:
        self.started: list[tuple[Algorithm, PuzzleState]] = []
        self.expanded: list[tuple[PuzzleState, int]] = []
        self.finished = []

    def on_start(self, algorithm, state) -> None:
        self.started.append((algorithm, state))

    def on_expand(self, state, depth) -> None:
        self.expanded.append((state, depth))

    def on_finish(self, result) -> None:
        self.finished.append(result)


def test_goal_start_returns_single_entry_path() -> None:
    result = AStarSolver().solve(PuzzleState.goal())
    assert result.status is SolveStatus.SOLVED
    assert result.moves == 0
    assert len(result.path) == 1
    assert result.path[0].direction is None
    assert result.nodes_expanded == 0


def test_one_move_from_goal() -> None:
    result = AStarSolver().solve(PuzzleState.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8]))
    assert result.solved
    assert len(result.path) == 2
    step = result.path[1]
    assert step.moved_tile == 8
    assert step.direction is Direction.RIGHT
    assert step.state.is_goal()


def test_optimal_on_shuffled_boards(shuffled: PuzzleState, optimal_moves: dict[int, int]) -> None:
    result = AStarSolver().solve(shuffled)
    assert result.status is SolveStatus.SOLVED
    assert result.algorithm is Algorithm.ASTAR
    assert result.path[0].state == shuffled
    replay(result.path)
    assert result.moves == optimal_moves[shuffled.key]


def test_hardest_board_takes_31_moves() -> None:
    result = AStarSolver().solve(HARDEST)
    assert result.solved
    replay(result.path)
    assert result.moves == 31


def test_deterministic(shuffled: PuzzleState) -> None:
    first = AStarSolver().solve(shuffled)
    second = AStarSolver().solve(shuffled)
    assert first.path == second.path
    assert first.nodes_expanded == second.nodes_expanded


def test_unsolvable_exhausts_the_reachable_half() -> None:
    result = AStarSolver().solve(UNSOLVABLE)
    assert result.status is SolveStatus.NO_SOLUTION
    assert result.path == []
    assert result.moves == -1
    # Each of the 9!/2 reachable states is expanded exactly once.
    assert result.nodes_expanded == 181440


def test_observer_sees_every_expansion() -> None:
    start = PuzzleState.from_flat([1, 2, 3, 4, 0, 6, 7, 5, 8])
    observer = RecordingObserver()
    with_observer = AStarSolver().solve(start, observer=observer)
    without = AStarSolver().solve(start)

    assert with_observer.path == without.path
    assert observer.started == [(Algorithm.ASTAR, start)]
    assert len(observer.expanded) == with_observer.nodes_expanded
    assert observer.expanded[0] == (start, 0)
    assert observer.finished == [with_observer]


def test_cancel_before_start() -> None:
    cancel = threading.Event()
    cancel.set()
    result = AStarSolver().solve(HARDEST, cancel=cancel)
    assert result.status is SolveStatus.CANCELLED
    assert result.path == []
    assert result.nodes_expanded == 0


def test_cancel_mid_search() -> None:
    cancel = threading.Event()

    class StopAfter(SearchObserver):
        def on_expand(self, state, depth) -> None:
            if depth >= 3:
                cancel.set()

    result = AStarSolver().solve(UNSOLVABLE, observer=StopAfter(), cancel=cancel)
    assert result.status is SolveStatus.CANCELLED
    assert 0 < result.nodes_expanded < 181440


@pytest.mark.parametrize(
    "flat",
    [
        [1, 2, 3, 4, 5, 6, 0, 7, 8],
        [1, 2, 3, 0, 4, 6, 7, 5, 8],
        [4, 1, 3, 7, 2, 6, 0, 5, 8],
    ],
)
def test_invocations_share_no_state(flat: list[int]) -> None:
    solver = AStarSolver()
    start = PuzzleState.from_flat(flat)
    solver.solve(HARDEST)
    assert solver.solve(start).path == AStarSolver().solve(start).path
