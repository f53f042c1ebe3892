"""8-puzzle state-space search: A* and depth-bounded backtracking."""

from loguru import logger

# Library code logs through loguru but stays silent until the
# application calls ``eightpuzzle.logger.setup_logging``.
logger.disable("eightpuzzle")

__version__ = "0.1.0"
