"""Solver output types shared by the engine, the worker and the frontends."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from eightpuzzle.backend.models.board import Direction, PuzzleState
from eightpuzzle.backend.models.errors import UnknownAlgorithmError


class Algorithm(StrEnum):
    ASTAR = "astar"
    BACKTRACKING = "backtracking"

    @classmethod
    def parse(cls, name: str | Algorithm) -> Algorithm:
        try:
            return cls(name)
        except ValueError:
            raise UnknownAlgorithmError(name) from None

    @property
    def label(self) -> str:
        return "A*" if self is Algorithm.ASTAR else "Backtracking"


class SolveStatus(StrEnum):
    SOLVED = "solved"
    NO_SOLUTION = "no_solution"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class Step:
    """One entry of a solution path.

    ``direction``/``moved_tile`` describe the slide from the previous step and
    are ``None`` on the start entry.
    """

    state: PuzzleState
    moved_tile: int | None = None
    direction: Direction | None = None

    def to_message(self) -> dict[str, Any]:
        return {
            "state": self.state.to_list(),
            "movedTile": self.moved_tile,
            "direction": self.direction.value if self.direction is not None else None,
        }

    @classmethod
    def from_message(cls, message: dict[str, Any]) -> Step:
        direction = message.get("direction")
        return cls(
            state=PuzzleState.from_flat(message["state"]),
            moved_tile=message.get("movedTile"),
            direction=Direction(direction) if direction is not None else None,
        )


@dataclass
class SolveResult:
    status: SolveStatus
    algorithm: Algorithm
    path: list[Step] = field(default_factory=list)
    nodes_expanded: int = 0
    elapsed: float = 0.0

    @property
    def solved(self) -> bool:
        return self.status is SolveStatus.SOLVED

    @property
    def moves(self) -> int:
        """Number of slides in the path, ``-1`` when there is no path."""
        return len(self.path) - 1
