"""Shared fixtures: a breadth-first reference over the solvable state space."""

from __future__ import annotations

from collections import deque

import pytest

from eightpuzzle.backend.engine.gamegenerator import GameGenerator
from eightpuzzle.backend.models.board import PuzzleState

# Seeds for the random boards used across the solver suites.
SEEDS = list(range(25))


def _bfs_from_goal() -> dict[int, int]:
    goal = PuzzleState.goal()
    dist = {goal.key: 0}
    queue = deque([goal])
    while queue:
        state = queue.popleft()
        d = dist[state.key] + 1
        for _, nxt in state.neighbors():
            if nxt.key not in dist:
                dist[nxt.key] = d
                queue.append(nxt)
    return dist


@pytest.fixture(scope="session")
def optimal_moves() -> dict[int, int]:
    """state key -> true minimum number of moves to the goal."""
    return _bfs_from_goal()


@pytest.fixture(params=SEEDS, ids=lambda s: f"seed{s}")
def shuffled(request) -> PuzzleState:
    return GameGenerator.generate(moves=60, seed=request.param)

