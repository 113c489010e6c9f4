from npuzzle.engine.movegen.generator import MOVE_ORDER, IllegalMoveError, MoveGenerator

__all__ = ["MOVE_ORDER", "IllegalMoveError", "MoveGenerator"]
