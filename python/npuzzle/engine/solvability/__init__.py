from npuzzle.engine.solvability.checker import is_solvable

__all__ = ["is_solvable"]
