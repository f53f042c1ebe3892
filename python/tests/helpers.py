"""Assertion helpers shared by the solver suites."""

from __future__ import annotations

from eightpuzzle.backend.models.result import Step


def replay(path: list[Step]) -> None:
    """Assert every step follows from the previous one by its recorded move."""
    assert path[0].direction is None and path[0].moved_tile is None
    for prev, step in zip(path, path[1:]):
        assert prev.state.move(step.direction) == step.state
        assert prev.state.tiles[step.state.blank] == step.moved_tile
    assert path[-1].state.is_goal()
