"""Optimal sliding-tile puzzle solver."""

from npuzzle.engine.search import SearchAborted, SearchExhausted, SearchLimits
from npuzzle.engine.solver import Solver, solve
from npuzzle.models import Board, Direction, Result, SearchStats, Solved, Unsolvable

__all__ = [
    "Board",
    "Direction",
    "Result",
    "SearchAborted",
    "SearchExhausted",
    "SearchLimits",
    "SearchStats",
    "Solved",
    "Solver",
    "Unsolvable",
    "solve",
]
