from eightpuzzle.backend.models.board import GOAL, Direction, Move, PuzzleState, is_solvable
from eightpuzzle.backend.models.errors import (
    EmptyFrontierError,
    InvalidStateError,
    PuzzleError,
    UnknownAlgorithmError,
    WorkerFailureError,
)
from eightpuzzle.backend.models.result import Algorithm, SolveResult, SolveStatus, Step

__all__ = [
    "GOAL",
    "Algorithm",
    "Direction",
    "EmptyFrontierError",
    "InvalidStateError",
    "Move",
    "PuzzleError",
    "PuzzleState",
    "SolveResult",
    "SolveStatus",
    "Step",
    "UnknownAlgorithmError",
    "WorkerFailureError",
    "is_solvable",
]
