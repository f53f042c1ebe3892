"""8-Puzzle Solver.

Usage::

    eightpuzzle solve 1 2 3 4 5 6 7 0 8              # A*, Rich output
    eightpuzzle solve 8 6 7 2 5 4 3 0 1 -a backtracking
    eightpuzzle solve 1 2 3 4 5 6 0 7 8 -f vanilla --animate
    eightpuzzle shuffle --moves 150 --seed 7
"""

import importlib
from enum import StrEnum
from time import perf_counter
from typing import List, Optional

import typer
from loguru import logger

from eightpuzzle.backend.engine.gamegenerator import GameGenerator
from eightpuzzle.backend.engine.gamesolver import LoggingObserver, Solver
from eightpuzzle.backend.engine.worker import result_from_response, run_in_background
from eightpuzzle.backend.models.board import PuzzleState
from eightpuzzle.backend.models.errors import InvalidStateError, PuzzleError
from eightpuzzle.backend.models.result import Algorithm
from eightpuzzle.config import SolverConfig, VisitedPolicy
from eightpuzzle.logger import setup_logging

log = logger.bind(component="cli")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "eightpuzzle.frontend.cli.vanilla.app",
    Frontend.rich: "eightpuzzle.frontend.cli.rich.app",
}


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="8-puzzle solver (A* and backtracking).")


@app.command()
def solve(
    state: List[int] = typer.Argument(
        ...,
        help="Nine tiles in row-major order, 0 for the blank.",
    ),
    algorithm: Algorithm = typer.Option(
        Algorithm.ASTAR, "-a", "--algorithm",
        help="Search algorithm.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Output renderer.",
    ),
    max_depth: int = typer.Option(
        SolverConfig.max_depth, "--max-depth",
        min=0,
        help="Backtracking depth bound.",
    ),
    visited: VisitedPolicy = typer.Option(
        VisitedPolicy.GLOBAL, "--visited",
        help="Backtracking visited-state policy.",
    ),
    background: Optional[bool] = typer.Option(
        None, "--background/--foreground",
        help="Run the search on a worker thread. Defaults to background for backtracking.",
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout",
        min=0,
        help="Seconds to wait for a background solve.",
    ),
    animate: bool = typer.Option(
        False, "--animate",
        help="Redraw the board after every move.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log every node expansion.",
    ),
) -> None:
    """Solve an 8-puzzle state."""
    config = SolverConfig(
        max_depth=max_depth,
        visited_policy=visited,
        background_timeout=timeout,
        log_level="DEBUG" if verbose else "WARNING",
    )
    setup_logging(config.log_level)
    ui = importlib.import_module(_RUNNERS[frontend])
    observer = LoggingObserver() if verbose else None

    if background is None:
        background = algorithm is Algorithm.BACKTRACKING

    try:
        start = PuzzleState.from_flat(state)
        if background:
            t0 = perf_counter()
            log.debug("Offloading {} solve to a worker", algorithm.value)
            response = run_in_background(
                {"state": start.to_list(), "algorithm": algorithm.value},
                config,
                observer=observer,
            )
            result = result_from_response(response, algorithm)
            result.elapsed = perf_counter() - t0
        else:
            result = Solver.solve(start, algorithm, config=config, observer=observer)
    except InvalidStateError as exc:
        ui.show_error(str(exc))
        raise typer.Exit(code=2)
    except PuzzleError as exc:
        ui.show_error(str(exc))
        raise typer.Exit(code=1)

    ui.run(result, start, animate=animate)


@app.command()
def shuffle(
    moves: int = typer.Option(
        SolverConfig.shuffle_moves, "-n", "--moves",
        min=0,
        help="Number of random slides applied to the goal state.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random seed for a reproducible shuffle.",
    ),
) -> None:
    """Print a random solvable state, ready to pass to ``solve``."""
    config = SolverConfig(shuffle_moves=moves)
    state = GameGenerator.generate(config.shuffle_moves, seed=seed)
    typer.echo(str(state))


if __name__ == "__main__":
    app()
