"""Search-node arena and path reconstruction.

Nodes live in one growable list and refer to their parent by index, so a
whole search tree is released at once when the arena goes out of scope.
"""

from __future__ import annotations

from typing import NamedTuple

from eightpuzzle.backend.models.board import Move, PuzzleState
from eightpuzzle.backend.models.result import Step


class SearchNode(NamedTuple):
    state: PuzzleState
    parent: int | None
    move: Move | None
    cost: int


class NodeArena:
    """Append-only store of ``SearchNode`` addressed by index."""

    def __init__(self) -> None:
        self._nodes: list[SearchNode] = []

    def add(self, state: PuzzleState, parent: int | None = None, move: Move | None = None) -> int:
        cost = 0 if parent is None else self._nodes[parent].cost + 1
        self._nodes.append(SearchNode(state, parent, move, cost))
        return len(self._nodes) - 1

    def __getitem__(self, index: int) -> SearchNode:
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)

    def truncate(self, size: int) -> None:
        """Drop every node at index ``size`` and above."""
        del self._nodes[size:]

    def reconstruct_path(self, index: int) -> list[Step]:
        return reconstruct_path(self, index)


def reconstruct_path(arena: NodeArena, index: int) -> list[Step]:
    """Walk parent links from ``index`` to the root and return root-to-goal steps."""
    steps: list[Step] = []
    current: int | None = index
    while current is not None:
        node = arena[current]
        if node.move is None:
            steps.append(Step(node.state))
        else:
            steps.append(Step(node.state, node.move.tile, node.move.direction))
        current = node.parent
    steps.reverse()
    return steps
