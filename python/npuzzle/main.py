"""Optimal sliding-tile puzzle solver.

Usage::

    npuzzle solve puzzle.txt          # plain output
    npuzzle solve -t < puzzle.txt     # also print execution time
    npuzzle solve -p puzzle.txt       # Rich boards + move list
    npuzzle scramble -s 4 -m 40       # print a random solvable 4×4 puzzle
"""

from __future__ import annotations

import logging
from time import perf_counter
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from npuzzle.engine.generator import PuzzleGenerator
from npuzzle.engine.search import SearchAborted, SearchLimits
from npuzzle.engine.solver import Solver
from npuzzle.frontend.cli.reader import (
    PuzzleFormatError,
    PuzzleInput,
    format_puzzle,
    parse_puzzle,
)
from npuzzle.frontend.cli.render import plain_lines, render_result, timing_line
from npuzzle.models.board import Board

console = Console()
err_console = Console(stderr=True)

EXIT_BAD_INPUT = 2
EXIT_ABORTED = 3


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _fail(message: str, code: int) -> typer.Exit:
    err_console.print(f"[bold red]error:[/bold red] {message}")
    return typer.Exit(code=code)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Optimal sliding-tile puzzle solver.")


@app.command()
def solve(
    puzzle: typer.FileText = typer.Argument(
        "-",
        help="Puzzle file ('N I' then the board). Reads standard input if omitted.",
    ),
    timing: bool = typer.Option(
        False, "-t", "--time",
        help="Print the execution time of the solve.",
    ),
    pretty: bool = typer.Option(
        False, "-p", "--pretty",
        help="Render the boards and moves with Rich instead of plain lines.",
    ),
    max_nodes: Optional[int] = typer.Option(
        None, "--max-nodes",
        min=1, envvar="NPUZZLE_MAX_NODES",
        help="Abort after visiting this many search nodes.",
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout",
        min=0.0, envvar="NPUZZLE_TIMEOUT",
        help="Abort after this many seconds.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log every search iteration to stderr.",
    ),
) -> None:
    """Print a shortest move sequence, or -1 if the puzzle is unsolvable."""
    _configure_logging(verbose)

    try:
        data = parse_puzzle(puzzle.read())
    except PuzzleFormatError as exc:
        raise _fail(str(exc), EXIT_BAD_INPUT) from None

    start = Board.from_flat(data.size, list(data.tiles))
    goal = PuzzleGenerator.solved(data.size, data.blank_target)
    limits = SearchLimits(max_nodes=max_nodes, timeout=timeout)

    began = perf_counter()
    try:
        result = Solver.solve(start, goal, limits)
    except SearchAborted as exc:
        raise _fail(str(exc), EXIT_ABORTED) from None
    elapsed = perf_counter() - began

    if pretty:
        render_result(console, start, goal, result, elapsed if timing else None)
        return

    for line in plain_lines(result):
        typer.echo(line)
    if timing:
        typer.echo(timing_line(elapsed))


@app.command()
def scramble(
    size: int = typer.Option(
        4, "-s", "--size",
        min=2, max=8,
        help="Grid size (2-8).",
    ),
    moves: int = typer.Option(
        30, "-m", "--moves",
        min=0,
        help="Number of random moves away from the goal.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random seed for a reproducible puzzle.",
    ),
    blank: int = typer.Option(
        -1, "-b", "--blank",
        help="Blank index in the goal (-1 for the last cell).",
    ),
) -> None:
    """Print a random solvable puzzle in the solver's input format."""
    try:
        goal = PuzzleGenerator.solved(size, blank)
    except ValueError as exc:
        raise _fail(str(exc), EXIT_BAD_INPUT) from None

    board = PuzzleGenerator.generate(size, moves, seed=seed, blank_target=blank)
    puzzle = PuzzleInput(size=size, blank_target=goal.position_of(0), tiles=board.tiles)
    typer.echo(format_puzzle(puzzle), nl=False)


if __name__ == "__main__":
    app()
