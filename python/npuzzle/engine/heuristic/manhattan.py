"""Manhattan-distance heuristic."""

from __future__ import annotations

from npuzzle.models.board import Board


def manhattan(board: Board, goal: Board) -> int:
    """Sum of row and column distances of every tile from its goal cell.

    The blank is not counted, which keeps the estimate admissible and
    consistent for unit-cost moves.
    """
    n = board.size
    distance = 0
    for value in range(1, board.cells):
        r, c = divmod(board.position_of(value), n)
        gr, gc = divmod(goal.position_of(value), n)
        distance += abs(r - gr) + abs(c - gc)
    return distance
