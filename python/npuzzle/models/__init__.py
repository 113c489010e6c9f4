from npuzzle.models.board import Board, Direction
from npuzzle.models.result import Result, SearchStats, Solved, Unsolvable

__all__ = ["Board", "Direction", "Result", "SearchStats", "Solved", "Unsolvable"]
