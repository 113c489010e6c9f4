"""Board model for the sliding-tile puzzle."""

from __future__ import annotations

from bisect import bisect_left, insort
from dataclasses import dataclass, field
from enum import StrEnum


class Direction(StrEnum):
    """Move label — the direction the *tile* slides into the blank.

    ``Direction.UP`` moves the tile below the blank upward, so the blank
    itself travels one row down.
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        """(row, col) offset travelled by the blank."""
        return _BLANK_OFFSETS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


# UP   → tile at (br+1, bc) moves up   → blank shifts down
# DOWN → tile at (br-1, bc) moves down  → blank shifts up
# LEFT → tile at (br, bc+1) moves left  → blank shifts right
# RIGHT→ tile at (br, bc-1) moves right → blank shifts left
_BLANK_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Board:
    """Immutable snapshot of an n×n puzzle.

    Tiles are stored as a flat row-major tuple; 0 represents the blank.
    An inverse index (value → position) is built once at construction so
    positional queries are O(1).
    """

    size: int
    tiles: tuple[int, ...]
    _index: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        tiles = tuple(self.tiles)
        if len(tiles) != self.size * self.size:
            raise ValueError(
                f"Expected {self.size * self.size} tiles for a "
                f"{self.size}×{self.size} board, got {len(tiles)}."
            )
        index = [-1] * len(tiles)
        for pos, value in enumerate(tiles):
            if 0 <= value < len(index):
                index[value] = pos
        object.__setattr__(self, "tiles", tiles)
        object.__setattr__(self, "_index", tuple(index))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        return cls(size=size, tiles=tuple(flat))

    def swap(self, a: int, b: int) -> Board:
        """Return a new board with the cells at positions *a* and *b* swapped."""
        tiles = list(self.tiles)
        tiles[a], tiles[b] = tiles[b], tiles[a]
        return Board(size=self.size, tiles=tuple(tiles))

    # -- queries --------------------------------------------------------------

    @property
    def cells(self) -> int:
        return self.size * self.size

    def position_of(self, value: int) -> int:
        if not 0 <= value < self.cells:
            raise IndexError(
                f"Tile {value} is out of range for a {self.size}×{self.size} board."
            )
        return self._index[value]

    def row_of(self, value: int) -> int:
        return self.position_of(value) // self.size

    def col_of(self, value: int) -> int:
        return self.position_of(value) % self.size

    @property
    def blank_pos(self) -> tuple[int, int]:
        return divmod(self.position_of(0), self.size)

    @property
    def has_blank(self) -> bool:
        return self._index[0] != -1

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row * self.size + col]

    def rows(self) -> list[tuple[int, ...]]:
        n = self.size
        return [self.tiles[r * n : (r + 1) * n] for r in range(n)]

    def is_tile_correct(self, row: int, col: int, goal: Board) -> bool:
        """Check if the tile at (row, col) sits where *goal* has it."""
        return self.get_tile(row, col) == goal.get_tile(row, col)

    def inversions(self) -> int:
        """Count pairs of non-blank tiles that are out of relative order."""
        inv = 0
        seen: list[int] = []
        for v in self.tiles:
            if v == 0:
                continue
            inv += len(seen) - bisect_left(seen, v)
            insort(seen, v)
        return inv
