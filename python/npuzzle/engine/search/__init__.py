from npuzzle.engine.search.ida_star import (
    IDAStar,
    SearchAborted,
    SearchExhausted,
    SearchLimits,
)
from npuzzle.engine.search.path import SearchPath, Step

__all__ = [
    "IDAStar",
    "SearchAborted",
    "SearchExhausted",
    "SearchLimits",
    "SearchPath",
    "Step",
]
