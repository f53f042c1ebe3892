"""State model: validation, canonical keys and neighbour generation."""

from __future__ import annotations

import pytest

from eightpuzzle.backend.models.board import (
    GOAL,
    Direction,
    Move,
    PuzzleState,
    encode,
    is_solvable,
)
from eightpuzzle.backend.models.errors import InvalidStateError


def _with_blank_at(index: int) -> PuzzleState:
    tiles = list(GOAL)
    j = tiles.index(0)
    tiles[index], tiles[j] = tiles[j], tiles[index]
    return PuzzleState.from_flat(tiles)


# -- validation ---------------------------------------------------------------


@pytest.mark.parametrize(
    "flat",
    [
        [1, 2, 3, 4, 5, 6, 7, 8],
        [1, 2, 3, 4, 5, 6, 7, 8, 0, 9],
        [1, 1, 3, 4, 5, 6, 7, 8, 0],
        [1, 2, 3, 4, 5, 6, 7, 8, 9],
        [-1, 2, 3, 4, 5, 6, 7, 8, 0],
        [1.0, 2, 3, 4, 5, 6, 7, 8, 0],
        ["1", 2, 3, 4, 5, 6, 7, 8, 0],
        [True, 2, 3, 4, 5, 6, 7, 8, 0],
        [],
    ],
    ids=["short", "long", "duplicate", "out-of-range", "negative", "float", "str", "bool", "empty"],
)
def test_rejects_invalid_states(flat) -> None:
    with pytest.raises(InvalidStateError):
        PuzzleState.from_flat(flat)


def test_rejects_non_iterable() -> None:
    with pytest.raises(InvalidStateError):
        PuzzleState.from_flat(None)


def test_invalid_state_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        PuzzleState.from_flat([0] * 9)


def test_goal_state() -> None:
    goal = PuzzleState.goal()
    assert goal.tiles == (1, 2, 3, 4, 5, 6, 7, 8, 0)
    assert goal.blank == 8
    assert goal.is_goal()
    assert not PuzzleState.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8]).is_goal()


def test_states_are_immutable() -> None:
    state = PuzzleState.goal()
    with pytest.raises(AttributeError):
        state.tiles = (0, 1, 2, 3, 4, 5, 6, 7, 8)  # type: ignore[misc]
    assert isinstance(state.tiles, tuple)


def test_from_flat_accepts_any_iterable_and_states() -> None:
    state = PuzzleState.from_flat(iter(GOAL))
    assert state == PuzzleState.goal()
    assert PuzzleState.from_flat(state) is state


def test_rows_and_correct_tiles() -> None:
    state = PuzzleState.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert state.rows() == [[1, 2, 3], [4, 5, 6], [7, 0, 8]]
    assert state.is_tile_correct(0)
    assert not state.is_tile_correct(8)


# -- canonical key ------------------------------------------------------------


def test_key_round_trips() -> None:
    state = PuzzleState.from_flat([8, 6, 7, 2, 5, 4, 3, 0, 1])
    assert PuzzleState.from_key(state.key) == state


def test_key_is_packed_base9() -> None:
    assert encode([1, 0, 0, 0, 0, 0, 0, 0, 0]) == 1
    assert encode([0, 1, 0, 0, 0, 0, 0, 0, 0]) == 9
    assert PuzzleState.goal().key < 9**9


def test_equal_states_hash_alike() -> None:
    a = PuzzleState.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
    b = PuzzleState.goal().move(Direction.LEFT)
    assert a == b
    assert hash(a) == hash(b) == a.key
    assert len({a, b}) == 1


def test_keys_are_distinct_across_neighbours() -> None:
    state = _with_blank_at(4)
    keys = {s.key for _, s in state.neighbors()} | {state.key}
    assert len(keys) == 5


@pytest.mark.parametrize("key", [-1, 9**9])
def test_from_key_rejects_out_of_range(key: int) -> None:
    with pytest.raises(InvalidStateError):
        PuzzleState.from_key(key)


# -- neighbours ---------------------------------------------------------------


@pytest.mark.parametrize(
    ("blank", "count"),
    [(0, 2), (2, 2), (6, 2), (8, 2), (1, 3), (3, 3), (5, 3), (7, 3), (4, 4)],
)
def test_neighbor_count_by_blank_position(blank: int, count: int) -> None:
    assert len(_with_blank_at(blank).neighbors()) == count


def test_neighbor_order_and_moved_tiles() -> None:
    state = PuzzleState.from_flat([1, 2, 3, 4, 0, 6, 7, 5, 8])
    moves = [move for move, _ in state.neighbors()]
    assert moves == [
        Move(Direction.UP, 2),
        Move(Direction.DOWN, 5),
        Move(Direction.LEFT, 4),
        Move(Direction.RIGHT, 6),
    ]


def test_neighbor_swaps_blank_with_target() -> None:
    state = PuzzleState.from_flat([1, 2, 3, 4, 0, 6, 7, 5, 8])
    (_, up), *_ = state.neighbors()
    assert up.tiles == (1, 0, 3, 4, 2, 6, 7, 5, 8)
    assert up.blank == 1
    # Parent untouched.
    assert state.tiles == (1, 2, 3, 4, 0, 6, 7, 5, 8)


def test_corner_blank_skips_off_grid_moves() -> None:
    goal = PuzzleState.goal()
    directions = [move.direction for move, _ in goal.neighbors()]
    assert directions == [Direction.UP, Direction.LEFT]
    assert goal.move(Direction.DOWN) is None
    assert goal.move(Direction.RIGHT) is None


def test_move_is_reversible() -> None:
    state = _with_blank_at(4)
    for direction in Direction:
        assert state.move(direction).move(direction.opposite) == state


def test_direction_wire_values() -> None:
    assert [d.value for d in Direction] == ["Up", "Down", "Left", "Right"]


# -- parity -------------------------------------------------------------------


@pytest.mark.parametrize(
    ("flat", "expected"),
    [
        (GOAL, True),
        ((1, 2, 3, 4, 5, 6, 7, 0, 8), True),
        ((8, 6, 7, 2, 5, 4, 3, 0, 1), True),
        ((2, 1, 3, 4, 5, 6, 7, 8, 0), False),
        ((1, 2, 3, 4, 5, 6, 8, 7, 0), False),
    ],
)
def test_is_solvable(flat, expected: bool) -> None:
    assert is_solvable(PuzzleState.from_flat(flat)) is expected


def test_parity_is_preserved_by_moves() -> None:
    state = PuzzleState.from_flat([2, 1, 3, 4, 5, 6, 7, 8, 0])
    for _, nxt in state.neighbors():
        assert not is_solvable(nxt)
