"""Generates solvable start states for the search engine."""

from __future__ import annotations

import random

from backend.models.board import Board, Direction, Goal

DEFAULT_MOVES = 20


class Scrambler:
    """Creates solvable boards by walking the blank away from the goal."""

    @staticmethod
    def solved() -> Board:
        """Return goal A."""
        return Board.from_state(Goal.A.value)

    @staticmethod
    def scramble(moves: int = DEFAULT_MOVES, seed: int | None = None) -> Board:
        """Return the board reached after *moves* random blank moves.

        The walk never immediately undoes its previous move, so the result
        is at most *moves* moves from goal A.  A fixed *seed* gives a
        reproducible board.
        """
        if moves < 0:
            raise ValueError(f"Number of moves must be non-negative, got {moves}.")
        rng = random.Random(seed)
        board = Scrambler.solved()
        previous: Direction | None = None

        for _ in range(moves):
            options = [d for d in Direction if board.can_move(d)]
            if previous is not None:
                options.remove(_OPPOSITE[previous])
            previous = rng.choice(options)
            board = board.copy_with_swap(previous)

        return board


_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}
