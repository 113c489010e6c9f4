"""Builds goal boards and scrambled puzzles."""

from __future__ import annotations

import random

from npuzzle.engine.movegen import MoveGenerator
from npuzzle.models.board import Board


class PuzzleGenerator:
    """Creates goal boards and solvable puzzles by shuffling from a goal."""

    @staticmethod
    def solved(size: int, blank_target: int | None = None) -> Board:
        """Return the goal board: tiles in order, blank at *blank_target*.

        ``None`` or ``-1`` puts the blank in the bottom-right cell.
        """
        cells = size * size
        if blank_target is None or blank_target == -1:
            blank_target = cells - 1
        if not 0 <= blank_target < cells:
            raise ValueError(
                f"Blank target {blank_target} is outside a {size}×{size} board."
            )
        tiles: list[int] = []
        num = 1
        for i in range(cells):
            if i == blank_target:
                tiles.append(0)
            else:
                tiles.append(num)
                num += 1
        return Board.from_flat(size, tiles)

    @staticmethod
    def scramble(board: Board, moves: int, rng: random.Random) -> Board:
        """Return *board* after *moves* random blank moves.

        The walk never undoes the previous move unless it has no other
        choice, so short walks actually drift away from the start.
        """
        previous = None
        for _ in range(moves):
            options = MoveGenerator.legal_moves(board)
            if previous is not None and len(options) > 1:
                options.remove(previous.opposite)
            direction = rng.choice(options)
            board = MoveGenerator.apply(board, direction)
            previous = direction
        return board

    @staticmethod
    def generate(
        size: int,
        moves: int,
        seed: int | None = None,
        blank_target: int | None = None,
    ) -> Board:
        """Return a solvable board scrambled away from the goal."""
        goal = PuzzleGenerator.solved(size, blank_target)
        return PuzzleGenerator.scramble(goal, moves, random.Random(seed))
