"""Test helpers — fixture loading and a breadth-first oracle over raw tile tuples."""

from __future__ import annotations

import json
from collections import deque
from pathlib import Path

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


def load_fixture(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def goal_tiles(size: int, blank_target: int = -1) -> tuple[int, ...]:
    cells = size * size
    if blank_target == -1:
        blank_target = cells - 1
    tiles = list(range(1, cells))
    tiles.insert(blank_target, 0)
    return tuple(tiles)


def bfs_distances(
    size: int, blank_target: int = -1, max_depth: int | None = None
) -> dict[tuple[int, ...], int]:
    """Shortest move count to the goal from every board within *max_depth* moves."""
    goal = goal_tiles(size, blank_target)
    distances = {goal: 0}
    frontier = deque([goal])
    while frontier:
        state = frontier.popleft()
        if max_depth is not None and distances[state] >= max_depth:
            continue
        blank = state.index(0)
        r, c = divmod(blank, size)
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = r + dr, c + dc
            if not (0 <= nr < size and 0 <= nc < size):
                continue
            j = nr * size + nc
            nxt = list(state)
            nxt[blank], nxt[j] = nxt[j], nxt[blank]
            key = tuple(nxt)
            if key not in distances:
                distances[key] = distances[state] + 1
                frontier.append(key)
    return distances
