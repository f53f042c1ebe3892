"""Generates solvable 8-puzzle states."""

from __future__ import annotations

import random

from eightpuzzle.backend.models.board import Direction, PuzzleState

DEFAULT_SHUFFLE_MOVES = 150


class GameGenerator:
    """Creates solvable puzzles by walking the blank from the solved state."""

    @staticmethod
    def solved() -> PuzzleState:
        """Return the goal state (tiles in order, blank bottom-right)."""
        return PuzzleState.goal()

    @staticmethod
    def scramble(
        state: PuzzleState,
        moves: int = DEFAULT_SHUFFLE_MOVES,
        rng: random.Random | None = None,
    ) -> PuzzleState:
        """Apply *moves* random legal slides to *state*.

        The blank never immediately reverses its previous slide.
        """
        rng = rng or random.Random()
        prev: Direction | None = None

        for _ in range(moves):
            options = state.neighbors()
            if prev is not None and len(options) > 1:
                options = [o for o in options if o[0].direction != prev.opposite]
            move, state = rng.choice(options)
            prev = move.direction
        return state

    @staticmethod
    def generate(moves: int = DEFAULT_SHUFFLE_MOVES, seed: int | None = None) -> PuzzleState:
        """Return a random, solvable, not-yet-solved state."""
        rng = random.Random(seed)
        # An even number of slides can land back on the goal; keep walking.
        state = GameGenerator.scramble(GameGenerator.solved(), moves, rng)
        while state.is_goal():
            state = GameGenerator.scramble(state, max(moves, 2), rng)
        return state
