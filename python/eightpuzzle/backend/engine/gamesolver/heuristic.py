"""Manhattan-distance heuristic."""

from __future__ import annotations

from eightpuzzle.backend.models.board import CELLS, SIZE, PuzzleState


def _build_table() -> tuple[tuple[int, ...], ...]:
    # table[value][index] = grid distance from index to value's goal cell
    table: list[tuple[int, ...]] = [(0,) * CELLS]  # the blank never counts
    for value in range(1, CELLS):
        gr, gc = divmod(value - 1, SIZE)
        row: list[int] = []
        for i in range(CELLS):
            r, c = divmod(i, SIZE)
            row.append(abs(r - gr) + abs(c - gc))
        table.append(tuple(row))
    return tuple(table)


_DISTANCE = _build_table()


def manhattan(state: PuzzleState) -> int:
    """Sum of each non-blank tile's grid distance to its goal cell.

    Admissible and consistent under unit move costs: one slide changes the
    total by exactly one.
    """
    return sum(_DISTANCE[v][i] for i, v in enumerate(state.tiles))
