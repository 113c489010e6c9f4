"""Parity test deciding whether a board can reach its goal."""

from __future__ import annotations

from npuzzle.models.board import Board


def is_solvable(start: Board, goal: Board) -> bool:
    """Return True if *start* can be transformed into *goal*.

    Odd widths: every blank move preserves inversion parity, so both
    boards must agree on it.

    Even widths: a vertical blank move shifts one tile past n-1 others
    (an odd count) and changes the blank row by one, so
    ``inversions + blank_row`` keeps its parity.  Rows are counted from
    the top for both boards.
    """
    if start.size != goal.size:
        return False
    if not (start.has_blank and goal.has_blank):
        return False

    si = start.inversions()
    gi = goal.inversions()
    if start.size % 2 == 1:
        return si % 2 == gi % 2

    sz = start.row_of(0)
    gz = goal.row_of(0)
    return gi % 2 == (si + gz + sz) % 2
