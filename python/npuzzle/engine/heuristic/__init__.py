from collections.abc import Callable

from npuzzle.engine.heuristic.manhattan import manhattan
from npuzzle.models.board import Board

Heuristic = Callable[[Board, Board], int]

__all__ = ["Heuristic", "manhattan"]
