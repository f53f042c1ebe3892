"""Board model for the 8-puzzle.

A state is a flat, row-major tuple of the nine values ``0..8`` where ``0`` is
the blank.  States are immutable: every move produces a new ``PuzzleState``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import NamedTuple

from eightpuzzle.backend.models.errors import InvalidStateError

SIZE = 3
CELLS = SIZE * SIZE
GOAL: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7, 8, 0)


class Direction(StrEnum):
    """Direction the *blank* travels.  Values double as the wire format."""

    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"

    @property
    def opposite(self) -> Direction:
        return _OPPOSITE[self]


_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# Enumeration order is part of the solvers' tie-breaking: Up, Down, Left, Right.
_OFFSETS: tuple[tuple[Direction, int, int], ...] = (
    (Direction.UP, -1, 0),
    (Direction.DOWN, 1, 0),
    (Direction.LEFT, 0, -1),
    (Direction.RIGHT, 0, 1),
)


def _build_adjacency() -> tuple[tuple[tuple[Direction, int], ...], ...]:
    adj: list[tuple[tuple[Direction, int], ...]] = []
    for i in range(CELLS):
        r, c = divmod(i, SIZE)
        nb: list[tuple[Direction, int]] = []
        for direction, dr, dc in _OFFSETS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < SIZE and 0 <= nc < SIZE:
                nb.append((direction, nr * SIZE + nc))
        adj.append(tuple(nb))
    return tuple(adj)


# blank index -> ((direction, target index), ...) in Up/Down/Left/Right order
_ADJ = _build_adjacency()


class Move(NamedTuple):
    """A single slide: the blank travels ``direction``, ``tile`` takes its cell."""

    direction: Direction
    tile: int


def encode(tiles: Iterable[int]) -> int:
    """Pack nine base-9 digits into one int (cell 0 is the least significant)."""
    key = 0
    for v in reversed(tuple(tiles)):
        key = key * CELLS + v
    return key


@dataclass(frozen=True, slots=True)
class PuzzleState:
    """An immutable 3×3 configuration.

    Build one with ``PuzzleState.from_flat`` (validated) or
    ``PuzzleState.goal()``.  ``key`` is the packed canonical encoding used for
    visited sets and cost maps.
    """

    tiles: tuple[int, ...]
    blank: int = field(init=False, repr=False, compare=False)
    key: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        tiles = tuple(self.tiles)
        _validate(tiles)
        object.__setattr__(self, "tiles", tiles)
        object.__setattr__(self, "blank", tiles.index(0))
        object.__setattr__(self, "key", encode(tiles))

    def __hash__(self) -> int:
        return self.key

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: Iterable[int]) -> PuzzleState:
        """Create a state from a row-major tile list.

        Example::

            PuzzleState.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if isinstance(flat, PuzzleState):
            return flat
        try:
            tiles = tuple(flat)
        except TypeError as exc:
            raise InvalidStateError(f"State must be a sequence of ints, got {flat!r}.") from exc
        return cls(tiles)

    @classmethod
    def goal(cls) -> PuzzleState:
        return cls(GOAL)

    @classmethod
    def from_key(cls, key: int) -> PuzzleState:
        """Inverse of ``encode``."""
        if key < 0:
            raise InvalidStateError(f"Negative state key {key}.")
        tiles: list[int] = []
        for _ in range(CELLS):
            key, digit = divmod(key, CELLS)
            tiles.append(digit)
        if key:
            raise InvalidStateError("State key has more than nine base-9 digits.")
        return cls(tiles)

    @classmethod
    def _derive(cls, tiles: tuple[int, ...], blank: int) -> PuzzleState:
        # Trusted path for neighbours of an already valid state.
        obj = object.__new__(cls)
        object.__setattr__(obj, "tiles", tiles)
        object.__setattr__(obj, "blank", blank)
        object.__setattr__(obj, "key", encode(tiles))
        return obj

    # -- queries --------------------------------------------------------------

    def is_goal(self) -> bool:
        return self.tiles == GOAL

    def rows(self) -> list[list[int]]:
        return [list(self.tiles[r * SIZE : (r + 1) * SIZE]) for r in range(SIZE)]

    def is_tile_correct(self, index: int) -> bool:
        return self.tiles[index] == GOAL[index]

    def to_list(self) -> list[int]:
        return list(self.tiles)

    # -- transitions ----------------------------------------------------------

    def neighbors(self) -> list[tuple[Move, PuzzleState]]:
        """Every state one slide away, in Up, Down, Left, Right order.

        Returns 2 entries with the blank in a corner, 3 on an edge and 4 in
        the centre.
        """
        out: list[tuple[Move, PuzzleState]] = []
        blank = self.blank
        for direction, target in _ADJ[blank]:
            tiles = list(self.tiles)
            tile = tiles[target]
            tiles[blank], tiles[target] = tile, 0
            out.append((Move(direction, tile), PuzzleState._derive(tuple(tiles), target)))
        return out

    def move(self, direction: Direction) -> PuzzleState | None:
        """Slide the blank one cell in ``direction``; ``None`` if off the grid."""
        for move, state in self.neighbors():
            if move.direction == direction:
                return state
        return None

    def __str__(self) -> str:
        return " ".join(str(v) for v in self.tiles)


def _validate(tiles: tuple[int, ...]) -> None:
    if len(tiles) != CELLS:
        raise InvalidStateError(f"Expected {CELLS} tiles for a {SIZE}×{SIZE} board, got {len(tiles)}.")
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in tiles):
        raise InvalidStateError(f"Tiles must be integers, got {list(tiles)}.")
    if sorted(tiles) != list(range(CELLS)):
        raise InvalidStateError(f"Tiles must be a permutation of 0..{CELLS - 1}, got {list(tiles)}.")


def is_solvable(state: PuzzleState) -> bool:
    """Return True if ``state`` can reach the goal.

    On an odd-width board a permutation is reachable exactly when the number
    of inversions among the non-blank tiles is even.
    """
    flat = [v for v in state.tiles if v != 0]
    inversions = 0
    for i in range(len(flat)):
        for j in range(i + 1, len(flat)):
            if flat[i] > flat[j]:
                inversions += 1
    return inversions % 2 == 0
