from npuzzle.engine.solver.solver import Solver, solve

__all__ = ["Solver", "solve"]
