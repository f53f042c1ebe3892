from eightpuzzle.backend.engine.gamesolver.astar import AStarSolver
from eightpuzzle.backend.engine.gamesolver.backtracking import BacktrackingSolver
from eightpuzzle.backend.engine.gamesolver.frontier import PriorityFrontier
from eightpuzzle.backend.engine.gamesolver.heuristic import manhattan
from eightpuzzle.backend.engine.gamesolver.nodes import NodeArena, SearchNode, reconstruct_path
from eightpuzzle.backend.engine.gamesolver.observer import LoggingObserver, SearchObserver
from eightpuzzle.backend.engine.gamesolver.solver import Solver

__all__ = [
    "AStarSolver",
    "BacktrackingSolver",
    "LoggingObserver",
    "NodeArena",
    "PriorityFrontier",
    "SearchNode",
    "SearchObserver",
    "Solver",
    "manhattan",
    "reconstruct_path",
]
