"""
Configuration for solving and shuffling.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional


class VisitedPolicy(StrEnum):
    # Historical: a state is excluded forever once first reached.
    GLOBAL = "global"
    # Only states on the current DFS path are excluded; restored on backtrack.
    PATH = "path"


@dataclass
class SolverConfig:
    """Configuration for a solve invocation."""

    # Backtracking parameters
    max_depth: int = 35  # Optimal 8-puzzle solutions never exceed 31 moves
    visited_policy: VisitedPolicy = VisitedPolicy.GLOBAL

    # Generator parameters
    shuffle_moves: int = 150

    # Background worker
    background_timeout: Optional[float] = None  # Seconds; None waits forever

    # Logging
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
        if self.shuffle_moves < 0:
            raise ValueError(f"shuffle_moves must be >= 0, got {self.shuffle_moves}")
        self.visited_policy = VisitedPolicy(self.visited_policy)
