"""Vanilla terminal frontend: plain ``print`` output, no colour codes.

Suitable for piping into files or other programs.
"""

from __future__ import annotations

import time

from eightpuzzle.backend.models.board import SIZE, PuzzleState
from eightpuzzle.backend.models.result import SolveResult
from eightpuzzle.frontend.cli.history import history_lines, status_message, step_line


def _render_board(state: PuzzleState) -> str:
    """Return a boxed text representation of the board."""
    sep = "+" + ("---+" * SIZE)
    lines: list[str] = [sep]
    for row in state.rows():
        cells = [f" {'·' if val == 0 else val} " for val in row]
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


def _animate(result: SolveResult, delay: float) -> None:
    for number, step in enumerate(result.path[1:], 1):
        print()
        print(f"  {step_line(number, step)}")
        print(_render_board(step.state))
        time.sleep(delay)


def show_error(message: str) -> None:
    print(f"Error: {message}")


def run(result: SolveResult, start: PuzzleState, animate: bool = False, delay: float = 0.25) -> None:
    """Print *result* for a solve that started at *start*."""
    print(f"  === {result.algorithm.label} ===")
    print(_render_board(start))

    if animate and result.solved:
        _animate(result, delay)
    else:
        for line in history_lines(result.path):
            print(f"  {line}")

    print()
    print(f"  Moves: {max(result.moves, 0)}  |  Expanded: {result.nodes_expanded}")
    print(f"  {status_message(result, start)}")
