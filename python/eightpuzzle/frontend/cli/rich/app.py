"""Rich terminal frontend: tables, colours, and panels.

Draws the start board, the solver's history log and a status line.  With
``animate`` the board is redrawn after every slide.
"""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from eightpuzzle.backend.models.board import SIZE, PuzzleState
from eightpuzzle.backend.models.result import SolveResult, SolveStatus, Step
from eightpuzzle.frontend.cli.history import history_lines, status_message, step_line

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(state: PuzzleState, moved_tile: int | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(SIZE):
        table.add_column(width=2, justify="center")

    for r, row in enumerate(state.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif val == moved_tile:
                cells.append(f"[bold yellow]{val}[/bold yellow]")
            elif state.is_tile_correct(r * SIZE + c):
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


def _status_markup(result: SolveResult, start: PuzzleState) -> str:
    message = status_message(result, start)
    if result.status is SolveStatus.SOLVED:
        return f"[bold green]{message}[/bold green]"
    if result.status is SolveStatus.CANCELLED:
        return f"[yellow]{message}[/yellow]"
    return f"[red]{message}[/red]"


# -- screens ------------------------------------------------------------------


def _draw_step(step: Step, number: int, total: int, algorithm: str) -> None:
    console.clear()

    progress = Text()
    progress.append(f"  Solving… move {number}/{total} ", style="bold cyan")
    progress.append(f"({step_line(number, step)})", style="dim")

    panel = Panel(
        Align.center(_render_board(step.state, step.moved_tile)),
        title=f"[bold cyan]{algorithm}  {SIZE}×{SIZE}[/bold cyan]",
        border_style="cyan",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(progress))


def _animate(result: SolveResult, delay: float) -> None:
    total = result.moves
    for number, step in enumerate(result.path[1:], 1):
        _draw_step(step, number, total, result.algorithm.label)
        time.sleep(delay)


def _draw_summary(result: SolveResult, start: PuzzleState) -> None:
    parts: list = [Align.center(_render_board(start))]

    lines = history_lines(result.path)
    if lines:
        log = Table(
            title="History",
            title_style="bold cyan",
            box=rich.box.ROUNDED,
            border_style="dim",
            show_header=False,
        )
        log.add_column(style="white")
        for line in lines:
            log.add_row(line)
        parts.append(Text(""))
        parts.append(Align.center(log))

    panel = Panel(
        Group(*parts),
        title=f"[bold]{result.algorithm.label}[/bold]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(max(result.moves, 0)), style="bold yellow")
    stats.append("    Expanded: ", style="dim")
    stats.append(str(result.nodes_expanded), style="bold yellow")
    console.print(Align.center(stats))
    console.print(Align.center(Text.from_markup(f"  {_status_markup(result, start)}")))


def show_error(message: str) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


# -- public entry point -------------------------------------------------------


def run(result: SolveResult, start: PuzzleState, animate: bool = False, delay: float = 0.25) -> None:
    """Render *result* for a solve that started at *start*."""
    if animate and result.solved:
        _animate(result, delay)
        console.clear()
    _draw_summary(result, start)
