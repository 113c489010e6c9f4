from __future__ import annotations

import pytest

from tests.helpers import bfs_distances


@pytest.fixture(scope="session")
def distances_3x3() -> dict[tuple[int, ...], int]:
    """Every solvable 3×3 board mapped to its distance from the ordered goal."""
    return bfs_distances(3)


@pytest.fixture(scope="session")
def distances_4x4_shallow() -> dict[tuple[int, ...], int]:
    """4×4 boards up to 14 moves from the ordered goal, with exact distances."""
    return bfs_distances(4, max_depth=14)
