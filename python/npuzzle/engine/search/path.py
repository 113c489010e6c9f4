"""The current DFS path — cycle-avoidance set and solution source."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from npuzzle.models.board import Board, Direction


@dataclass(frozen=True)
class Step:
    board: Board
    move: Direction | None = None


class SearchPath:
    """Boards from the root to the frontier, each tagged with its move.

    Pushes only happen through :meth:`extended`, which pops on every exit
    path, so the path is back to the root once a search unwinds.
    """

    def __init__(self, root: Board) -> None:
        self._steps: list[Step] = [Step(root)]

    def __len__(self) -> int:
        return len(self._steps)

    def __contains__(self, board: object) -> bool:
        return any(step.board == board for step in self._steps)

    @property
    def root(self) -> Board:
        return self._steps[0].board

    @property
    def last(self) -> Board:
        return self._steps[-1].board

    @contextmanager
    def extended(self, board: Board, move: Direction) -> Iterator[None]:
        self._steps.append(Step(board, move))
        try:
            yield
        finally:
            self._steps.pop()

    def boards(self) -> tuple[Board, ...]:
        return tuple(step.board for step in self._steps)

    def moves(self) -> tuple[Direction, ...]:
        return tuple(step.move for step in self._steps if step.move is not None)
