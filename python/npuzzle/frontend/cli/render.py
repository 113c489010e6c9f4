"""Output for the command line — plain move lists and Rich panels."""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.models.board import Board
from npuzzle.models.result import Result


# -- plain output -------------------------------------------------------------


def plain_lines(result: Result) -> list[str]:
    """``-1`` for an unsolvable board, else the move count and one move per line."""
    if not result.solvable:
        return ["-1"]
    return [str(len(result.moves))] + [m.value for m in result.moves]


def timing_line(seconds: float) -> str:
    return f"Execution time: {seconds:.6f}s"


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, goal: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.cells - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c, goal):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def render_result(
    console: Console,
    start: Board,
    goal: Board,
    result: Result,
    elapsed: float | None = None,
) -> None:
    """Print the start and goal boards side by side followed by the verdict."""
    size = start.size
    boards = Columns(
        [
            Panel(render_board(start, goal), title="[bold]Start[/bold]", border_style="cyan"),
            Panel(render_board(goal, goal), title="[bold]Goal[/bold]", border_style="green"),
        ],
        padding=(0, 2),
    )

    verdict = Text()
    if not result.solvable:
        verdict.append("Unsolvable", style="bold red")
        verdict.append("  (start and goal have different parity)", style="dim")
    elif not result.moves:
        verdict.append("Already solved!", style="bold green")
    else:
        verdict.append(f"Solved in {len(result.moves)} moves", style="bold green")
        verdict.append(
            f"  ({result.stats.nodes} nodes, {result.stats.iterations} iterations)",
            style="dim",
        )

    parts = [Align.center(boards), Text(""), Align.center(verdict)]

    if result.solvable and result.moves:
        moves = Text(", ".join(m.value for m in result.moves), style="cyan")
        parts.append(Text(""))
        parts.append(moves)

    if elapsed is not None:
        stats = Text()
        stats.append("Time: ", style="dim")
        stats.append(f"{elapsed:.3f}s", style="bold yellow")
        parts.append(Align.center(stats))

    panel = Panel(
        Group(*parts),
        title=f"[bold cyan]Sliding Puzzle  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print(panel)
