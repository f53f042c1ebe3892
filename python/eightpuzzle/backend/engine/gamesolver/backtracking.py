"""Depth-bounded backtracking (DFS) search."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from time import perf_counter

from loguru import logger

from eightpuzzle.backend.engine.gamesolver.nodes import NodeArena
from eightpuzzle.backend.engine.gamesolver.observer import SearchObserver
from eightpuzzle.backend.models.board import Move, PuzzleState
from eightpuzzle.backend.models.result import Algorithm, SolveResult, SolveStatus, Step
from eightpuzzle.config import VisitedPolicy

log = logger.bind(component="backtracking")

DEFAULT_MAX_DEPTH = 35


class BacktrackingSolver:
    """Depth-first search bounded at ``max_depth`` moves.

    Returns the first path found in Up/Down/Left/Right order, which is
    usually not the shortest.

    With ``VisitedPolicy.GLOBAL`` (the default) a state is marked the first
    time it is generated and is never reconsidered, even after the branch
    that reached it is abandoned.  That caps the work at one visit per
    reachable state, but a state first reached deep in a dead branch stays
    blocked for shallower branches, so a solution inside the bound can be
    missed.  ``VisitedPolicy.PATH`` only excludes states on the current path
    and is complete within the bound, at exponential cost.
    """

    algorithm = Algorithm.BACKTRACKING

    def __init__(
        self,
        max_depth: int = DEFAULT_MAX_DEPTH,
        visited_policy: VisitedPolicy = VisitedPolicy.GLOBAL,
    ) -> None:
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")
        self.max_depth = max_depth
        self.visited_policy = VisitedPolicy(visited_policy)

    def solve(
        self,
        start: PuzzleState,
        observer: SearchObserver | None = None,
        cancel: threading.Event | None = None,
    ) -> SolveResult:
        observer = observer or SearchObserver()
        observer.on_start(self.algorithm, start)
        t0 = perf_counter()

        status, path, expanded = self._search(start, observer, cancel)

        result = SolveResult(
            status=status,
            algorithm=self.algorithm,
            path=path,
            nodes_expanded=expanded,
            elapsed=perf_counter() - t0,
        )
        log.info(
            "{} in {:.3f}s ({} expanded, max depth {}, {} policy, {} moves)",
            status.value, result.elapsed, expanded, self.max_depth,
            self.visited_policy.value, result.moves,
        )
        observer.on_finish(result)
        return result

    def _search(
        self,
        start: PuzzleState,
        observer: SearchObserver,
        cancel: threading.Event | None,
    ) -> tuple[SolveStatus, list[Step], int]:
        arena = NodeArena()
        root = arena.add(start)
        if start.is_goal():
            return SolveStatus.SOLVED, arena.reconstruct_path(root), 0
        if self.max_depth == 0:
            return SolveStatus.NO_SOLUTION, [], 0

        restore = self.visited_policy is VisitedPolicy.PATH
        visited: set[int] = {start.key}

        # Each frame is (node index, iterator over that node's neighbours).
        # Nodes are allocated in DFS order, so popping a frame can drop it and
        # everything allocated after it from the arena.
        stack: list[tuple[int, Iterator[tuple[Move, PuzzleState]]]] = []
        expanded = 0

        def expand(index: int) -> bool:
            nonlocal expanded
            if cancel is not None and cancel.is_set():
                return False
            node = arena[index]
            expanded += 1
            observer.on_expand(node.state, node.cost)
            stack.append((index, iter(node.state.neighbors())))
            return True

        if not expand(root):
            return SolveStatus.CANCELLED, [], expanded

        while stack:
            index, children = stack[-1]
            pair = next(children, None)
            if pair is None:
                stack.pop()
                if restore:
                    visited.discard(arena[index].state.key)
                arena.truncate(index)
                continue

            move, nxt = pair
            if nxt.key in visited:
                continue
            visited.add(nxt.key)
            child = arena.add(nxt, index, move)

            if nxt.is_goal():
                return SolveStatus.SOLVED, arena.reconstruct_path(child), expanded

            if arena[child].cost >= self.max_depth:
                if restore:
                    visited.discard(nxt.key)
                arena.truncate(child)
                continue

            if not expand(child):
                return SolveStatus.CANCELLED, [], expanded

        return SolveStatus.NO_SOLUTION, [], expanded
