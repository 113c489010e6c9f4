"""Sliding puzzle solver."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from npuzzle.engine.generator import PuzzleGenerator
from npuzzle.engine.search import IDAStar, SearchLimits
from npuzzle.engine.solvability import is_solvable
from npuzzle.models.board import Board, Direction
from npuzzle.models.result import Result, Unsolvable

log = logging.getLogger(__name__)


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(
        board: Board, goal: Board, limits: SearchLimits | None = None
    ) -> Result:
        """Return an optimal move sequence from *board* to *goal*.

        Unsolvable boards are rejected by the parity check before any
        search runs.
        """
        if not Solver.is_solvable(board, goal):
            log.info("board rejected by the parity check")
            return Unsolvable()
        return IDAStar(goal, limits=limits).run(board)

    @staticmethod
    def hint(board: Board, goal: Board) -> Direction | None:
        """Return the first move of an optimal solution, or ``None`` if solved / unsolvable."""
        result = Solver.solve(board, goal)
        if not result.solvable or not result.moves:
            return None
        return result.moves[0]

    @staticmethod
    def is_solvable(board: Board, goal: Board) -> bool:
        """Return True if *board* can reach *goal*."""
        return is_solvable(board, goal)


def solve(
    size: int,
    blank_target: int | None,
    board: Sequence[int],
    *,
    limits: SearchLimits | None = None,
) -> Result:
    """Solve a flat *board* against the ordered goal for *size*.

    The goal holds tiles ``1..size²-1`` in row-major order with the blank
    at *blank_target* (``None`` or ``-1`` for the last cell).  *board* must
    be a permutation of ``0..size²-1``.
    """
    start = Board.from_flat(size, list(board))
    goal = PuzzleGenerator.solved(size, blank_target)
    return Solver.solve(start, goal, limits)
