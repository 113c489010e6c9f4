"""Reads and writes puzzles in the plain-text input format.

The format is a whitespace-separated list of integers::

    N I t0 t1 ... tN

``N`` is the number of tiles (``N + 1`` must be a perfect square), ``I``
the index of the blank in the goal (``-1`` for the last cell) and
``t0..tN`` the board in row-major order with ``0`` as the blank.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


class PuzzleFormatError(ValueError):
    """The input is not a well-formed puzzle."""


@dataclass(frozen=True)
class PuzzleInput:
    size: int
    blank_target: int
    tiles: tuple[int, ...]

    @property
    def tile_count(self) -> int:
        return self.size * self.size - 1


def _to_int(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise PuzzleFormatError(f"Not an integer: {token!r}.") from None


def parse_puzzle(text: str) -> PuzzleInput:
    """Parse and validate a puzzle; raises :class:`PuzzleFormatError`."""
    values = [_to_int(token) for token in text.split()]
    if len(values) < 2:
        raise PuzzleFormatError("Expected the tile count and blank index.")

    tile_count, blank_target = values[0], values[1]
    cells = tile_count + 1
    size = math.isqrt(cells) if cells > 0 else 0
    if size < 2 or size * size != cells:
        raise PuzzleFormatError(
            f"Tile count {tile_count} does not fill a square board "
            f"(expected 3, 8, 15, 24, ...)."
        )

    if blank_target == -1:
        blank_target = tile_count
    if not 0 <= blank_target < cells:
        raise PuzzleFormatError(
            f"Blank index {values[1]} is outside a {size}×{size} board."
        )

    tiles = values[2:]
    if len(tiles) != cells:
        raise PuzzleFormatError(
            f"Expected {cells} tiles for a {size}×{size} board, got {len(tiles)}."
        )

    if sorted(tiles) != list(range(cells)):
        missing = sorted(set(range(cells)) - set(tiles))
        extra = sorted({t for t in tiles if not 0 <= t < cells or tiles.count(t) > 1})
        raise PuzzleFormatError(
            f"Board is not a permutation of 0..{tile_count} "
            f"(missing {missing}, unexpected or repeated {extra})."
        )

    return PuzzleInput(size=size, blank_target=blank_target, tiles=tuple(tiles))


def format_puzzle(puzzle: PuzzleInput) -> str:
    """Render *puzzle* back into the input format, one board row per line."""
    n = puzzle.size
    lines = [f"{puzzle.tile_count} {puzzle.blank_target}"]
    for r in range(n):
        lines.append(" ".join(str(v) for v in puzzle.tiles[r * n : (r + 1) * n]))
    return "\n".join(lines) + "\n"
