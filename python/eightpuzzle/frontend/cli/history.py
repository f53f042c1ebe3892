"""Plain-text history log and status lines shared by the CLI frontends."""

from __future__ import annotations

from eightpuzzle.backend.models.board import PuzzleState, is_solvable
from eightpuzzle.backend.models.result import SolveResult, SolveStatus, Step


def step_line(number: int, step: Step) -> str:
    return f"Step {number}: Move tile {step.moved_tile} {step.direction}."


def history_lines(path: list[Step]) -> list[str]:
    """One line per slide, skipping the start entry."""
    return [step_line(i, step) for i, step in enumerate(path[1:], 1)]


def status_message(result: SolveResult, start: PuzzleState) -> str:
    if result.status is SolveStatus.SOLVED:
        if result.moves == 0:
            return "Puzzle is already solved!"
        return f"Solved with {result.algorithm.label} in {result.moves} moves ({result.elapsed:.2f}s)."
    if result.status is SolveStatus.CANCELLED:
        return "Solve cancelled."
    if not is_solvable(start):
        return "No solution found. This arrangement is unsolvable (odd inversion parity)."
    return "No solution found. The puzzle might be too complex for this search."
