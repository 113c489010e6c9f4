"""IDA* engine — path discipline, limits and exhaustion."""

from __future__ import annotations

import pytest

from npuzzle.engine.generator import PuzzleGenerator
from npuzzle.engine.heuristic import manhattan
from npuzzle.engine.movegen import MoveGenerator
from npuzzle.engine.search import (
    IDAStar,
    SearchAborted,
    SearchExhausted,
    SearchLimits,
    SearchPath,
)
from npuzzle.models.board import Board, Direction


# -- search path --------------------------------------------------------------


def test_path_pops_on_exit() -> None:
    root = PuzzleGenerator.solved(3)
    path = SearchPath(root)
    child = MoveGenerator.apply(root, Direction.DOWN)
    with path.extended(child, Direction.DOWN):
        assert len(path) == 2
        assert path.root == root
        assert path.last == child
        assert child in path
        assert path.moves() == (Direction.DOWN,)
    assert len(path) == 1
    assert child not in path
    assert path.last == root
    assert path.root == root


def test_path_pops_when_body_raises() -> None:
    root = PuzzleGenerator.solved(3)
    path = SearchPath(root)
    child = MoveGenerator.apply(root, Direction.RIGHT)
    with pytest.raises(RuntimeError):
        with path.extended(child, Direction.RIGHT):
            raise RuntimeError("boom")
    assert path.boards() == (root,)


# -- search -------------------------------------------------------------------


def test_start_equal_to_goal() -> None:
    goal = PuzzleGenerator.solved(3)
    result = IDAStar(goal).run(goal)
    assert result.moves == ()
    assert result.stats.iterations == 1


def test_bound_rises_until_found(distances_3x3: dict) -> None:
    goal = PuzzleGenerator.solved(3)
    # Pick a board the heuristic underestimates, forcing extra iterations.
    start = next(
        board
        for board in (Board.from_flat(3, list(t)) for t in sorted(distances_3x3))
        if 0 < distances_3x3[board.tiles] <= 10
        and manhattan(board, goal) < distances_3x3[board.tiles]
    )
    result = IDAStar(goal).run(start)
    assert len(result.moves) == distances_3x3[start.tiles]
    assert result.stats.iterations > 1
    assert result.stats.bound == len(result.moves)
    assert MoveGenerator.apply_all(start, result.moves) == goal


def test_solution_is_deterministic() -> None:
    goal = PuzzleGenerator.solved(3)
    start = PuzzleGenerator.generate(3, 40, seed=5)
    first = IDAStar(goal).run(start)
    second = IDAStar(goal).run(start)
    assert first.moves == second.moves


def test_unreachable_goal_exhausts() -> None:
    # Parity-flipped 2×2: the twelve reachable boards never include the goal.
    goal = PuzzleGenerator.solved(2)
    start = Board.from_flat(2, [2, 1, 3, 0])
    with pytest.raises(SearchExhausted):
        IDAStar(goal).run(start)


def test_node_limit_aborts() -> None:
    goal = PuzzleGenerator.solved(4)
    start = PuzzleGenerator.generate(4, 80, seed=3)
    engine = IDAStar(goal, limits=SearchLimits(max_nodes=50))
    with pytest.raises(SearchAborted, match="Node limit"):
        engine.run(start)
    assert engine.stats.nodes == 50


def test_timeout_aborts() -> None:
    goal = PuzzleGenerator.solved(4)
    start = PuzzleGenerator.generate(4, 200, seed=11)
    with pytest.raises(SearchAborted, match="Timed out"):
        IDAStar(goal, limits=SearchLimits(timeout=0.0)).run(start)


def test_custom_heuristic_is_used() -> None:
    calls: list[Board] = []

    def zero(board: Board, goal: Board) -> int:
        calls.append(board)
        return 0

    goal = PuzzleGenerator.solved(3)
    start = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 0, 7, 8])
    result = IDAStar(goal, heuristic=zero).run(start)
    assert len(result.moves) == 2
    assert calls
