"""Iterative Deepening A* over sliding-tile boards.

Repeated bounded depth-first searches; each iteration raises the bound to
the smallest ``f = g + h`` that overshot the previous one.  Only the
current path is kept in memory, which doubles as the cycle check.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from time import perf_counter

from npuzzle.engine.heuristic import Heuristic, manhattan
from npuzzle.engine.movegen import MoveGenerator
from npuzzle.engine.search.path import SearchPath
from npuzzle.models.board import Board, Direction
from npuzzle.models.result import SearchStats, Solved

log = logging.getLogger(__name__)

FOUND = -1


class SearchAborted(RuntimeError):
    """A host-imposed limit stopped the search before it finished."""


class SearchExhausted(RuntimeError):
    """Every branch died without reaching the goal.

    Only possible when the solvability check let through a board the
    search cannot solve.
    """


@dataclass(frozen=True)
class SearchLimits:
    """Optional caps checked on every DFS entry."""

    max_nodes: int | None = None
    timeout: float | None = None


class IDAStar:
    """Optimal solver for a fixed goal board."""

    def __init__(
        self,
        goal: Board,
        heuristic: Heuristic = manhattan,
        limits: SearchLimits | None = None,
    ) -> None:
        self.goal = goal
        self.heuristic = heuristic
        self.limits = limits or SearchLimits()
        self.stats = SearchStats()
        self._solution: tuple[Direction, ...] = ()
        self._deadline: float | None = None

    def run(self, start: Board) -> Solved:
        """Return a shortest move sequence from *start* to the goal.

        Raises :class:`SearchExhausted` if the goal is unreachable and
        :class:`SearchAborted` if a limit is hit.
        """
        self.stats = SearchStats()
        self._solution = ()
        self._deadline = None
        if self.limits.timeout is not None:
            self._deadline = perf_counter() + self.limits.timeout

        path = SearchPath(start)
        bound = self.heuristic(start, self.goal)

        while True:
            self.stats.iterations += 1
            self.stats.bound = bound
            log.debug(
                "iteration %d: bound=%d nodes=%d",
                self.stats.iterations, bound, self.stats.nodes,
            )
            t = self._search(path, 0, bound)
            if t == FOUND:
                log.info(
                    "solved in %d moves (%d nodes, %d iterations)",
                    len(self._solution), self.stats.nodes, self.stats.iterations,
                )
                return Solved(moves=self._solution, stats=self.stats)
            if t == math.inf:
                raise SearchExhausted(
                    f"No path to the goal after {self.stats.iterations} "
                    f"iterations (last bound {bound})."
                )
            bound = int(t)

    # -- bounded DFS ----------------------------------------------------------

    def _search(self, path: SearchPath, g: int, bound: int) -> float:
        self._check_limits()
        self.stats.nodes += 1

        state = path.last
        f = g + self.heuristic(state, self.goal)
        if f > bound:
            return f
        if state == self.goal:
            self._solution = path.moves()
            return FOUND

        self.stats.expanded += 1
        minimum = math.inf
        for direction, child in MoveGenerator.successors(state):
            if child in path:
                continue
            with path.extended(child, direction):
                t = self._search(path, g + 1, bound)
            if t == FOUND:
                return FOUND
            if t < minimum:
                minimum = t
        return minimum

    def _check_limits(self) -> None:
        max_nodes = self.limits.max_nodes
        if max_nodes is not None and self.stats.nodes >= max_nodes:
            raise SearchAborted(f"Node limit of {max_nodes} reached.")
        if self._deadline is not None and perf_counter() >= self._deadline:
            raise SearchAborted(
                f"Timed out after {self.limits.timeout} seconds."
            )
