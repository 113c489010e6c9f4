"""Outcomes of a solve."""

from __future__ import annotations

from dataclasses import dataclass, field

from npuzzle.models.board import Direction


@dataclass
class SearchStats:
    """Counters collected by the search engine during one solve."""

    nodes: int = 0
    expanded: int = 0
    iterations: int = 0
    bound: int = 0


@dataclass(frozen=True)
class Solved:
    """An optimal move sequence; empty when the board is already solved."""

    moves: tuple[Direction, ...]
    stats: SearchStats = field(default_factory=SearchStats, compare=False)

    @property
    def solvable(self) -> bool:
        return True


@dataclass(frozen=True)
class Unsolvable:
    """The board cannot reach the goal; no search was attempted."""

    @property
    def solvable(self) -> bool:
        return False


Result = Solved | Unsolvable
