"""A* search with the Manhattan heuristic."""

from __future__ import annotations

import threading
from time import perf_counter

from loguru import logger

from eightpuzzle.backend.engine.gamesolver.frontier import PriorityFrontier
from eightpuzzle.backend.engine.gamesolver.heuristic import manhattan
from eightpuzzle.backend.engine.gamesolver.nodes import NodeArena
from eightpuzzle.backend.engine.gamesolver.observer import SearchObserver
from eightpuzzle.backend.models.board import PuzzleState
from eightpuzzle.backend.models.result import Algorithm, SolveResult, SolveStatus, Step

log = logger.bind(component="astar")


class AStarSolver:
    """Best-first search on ``g + manhattan``; returns a minimum-move path.

    Every call owns its own frontier, cost map and node arena.  Stale frontier
    entries (a cheaper route to the same state was found after they were
    queued) are skipped when popped.  Unsolvable inputs exhaust the finite
    reachable space and come back as ``NO_SOLUTION``.
    """

    algorithm = Algorithm.ASTAR

    def solve(
        self,
        start: PuzzleState,
        observer: SearchObserver | None = None,
        cancel: threading.Event | None = None,
    ) -> SolveResult:
        observer = observer or SearchObserver()
        observer.on_start(self.algorithm, start)
        t0 = perf_counter()

        arena = NodeArena()
        frontier: PriorityFrontier[int] = PriorityFrontier()
        best_cost: dict[int, int] = {start.key: 0}
        frontier.insert(arena.add(start), manhattan(start))

        expanded = 0
        status = SolveStatus.NO_SOLUTION
        path: list[Step] = []

        while not frontier.is_empty():
            if cancel is not None and cancel.is_set():
                status = SolveStatus.CANCELLED
                break

            index = frontier.extract_min()
            node = arena[index]
            if node.cost > best_cost[node.state.key]:
                continue  # stale entry

            if node.state.is_goal():
                status = SolveStatus.SOLVED
                path = arena.reconstruct_path(index)
                break

            expanded += 1
            observer.on_expand(node.state, node.cost)

            new_cost = node.cost + 1
            for move, nxt in node.state.neighbors():
                known = best_cost.get(nxt.key)
                if known is None or new_cost < known:
                    best_cost[nxt.key] = new_cost
                    frontier.insert(arena.add(nxt, index, move), new_cost + manhattan(nxt))

        result = SolveResult(
            status=status,
            algorithm=self.algorithm,
            path=path,
            nodes_expanded=expanded,
            elapsed=perf_counter() - t0,
        )
        log.info(
            "{} in {:.3f}s ({} expanded, {} states seen, {} moves)",
            status.value, result.elapsed, expanded, len(best_cost), result.moves,
        )
        observer.on_finish(result)
        return result
