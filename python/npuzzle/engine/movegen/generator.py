"""Legal blank moves and the boards they lead to."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from npuzzle.models.board import Board, Direction

# Fixed expansion order; decides which of several optimal solutions wins.
MOVE_ORDER: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


class IllegalMoveError(ValueError):
    """Raised when a move would push the blank off the grid."""


class MoveGenerator:
    """Stateless move generator — all methods are static."""

    @staticmethod
    def target(board: Board, direction: Direction) -> int | None:
        """Return the cell the blank moves to, or ``None`` if off-grid."""
        br, bc = board.blank_pos
        dr, dc = direction.delta
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < board.size and 0 <= tc < board.size):
            return None
        return tr * board.size + tc

    @staticmethod
    def legal_moves(board: Board) -> list[Direction]:
        return [d for d in MOVE_ORDER if MoveGenerator.target(board, d) is not None]

    @staticmethod
    def successors(board: Board) -> Iterator[tuple[Direction, Board]]:
        """Yield ``(direction, next_board)`` for every legal move, in order."""
        blank = board.position_of(0)
        for direction in MOVE_ORDER:
            target = MoveGenerator.target(board, direction)
            if target is not None:
                yield direction, board.swap(blank, target)

    @staticmethod
    def apply(board: Board, direction: Direction) -> Board:
        """Slide a tile in *direction* into the blank and return the new board."""
        target = MoveGenerator.target(board, direction)
        if target is None:
            raise IllegalMoveError(
                f"Cannot move {direction.value}: blank at {board.blank_pos} "
                f"is on the edge of a {board.size}×{board.size} board."
            )
        return board.swap(board.position_of(0), target)

    @staticmethod
    def apply_all(board: Board, moves: Iterable[Direction]) -> Board:
        """Replay *moves* in order starting from *board*."""
        for direction in moves:
            board = MoveGenerator.apply(board, direction)
        return board
