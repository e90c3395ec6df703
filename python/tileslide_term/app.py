"""Rich terminal frontend: board table, cursor, stats and win panel.

The screen is redrawn after every key. While no key arrives the stats line
is refreshed twice a second so the clock keeps ticking.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tileslide.engine.gameplay import GamePlay
from tileslide.models.board import EMPTY, Board, Direction
from tileslide.utils.timefmt import DEFAULT_LOCALE, format_clock, format_readable
from tileslide_term.input_handler import get_key, get_key_timeout

logger = logging.getLogger(__name__)

console = Console()

_SLIDES: dict[str, Direction] = {
    "slide_up": Direction.UP,
    "slide_down": Direction.DOWN,
    "slide_left": Direction.LEFT,
    "slide_right": Direction.RIGHT,
}

_CURSOR_STEPS: dict[str, tuple[int, int]] = {
    "cursor_up": (-1, 0),
    "cursor_down": (1, 0),
    "cursor_left": (0, -1),
    "cursor_right": (0, 1),
}


@dataclass
class Cursor:
    row: int = 0
    col: int = 0

    def step(self, key: str, board: Board) -> None:
        dr, dc = _CURSOR_STEPS[key]
        self.row = min(max(self.row + dr, 0), board.rows - 1)
        self.col = min(max(self.col + dc, 0), board.columns - 1)


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, cursor: Cursor | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.grid.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.columns):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.to_matrix()):
        cells: list[Text] = []
        for c, val in enumerate(row):
            style = "bold white"
            if val == EMPTY:
                text, style = "·", "dim"
            else:
                text = f"{val:>{width}}"
                if board.is_tile_correct(r, c):
                    style = "bold green"
            if cursor is not None and (cursor.row, cursor.col) == (r, c):
                style += " reverse"
            cells.append(Text(text, style=style))
        table.add_row(*cells)

    return table


def _stats(game: GamePlay) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(format_clock(game.elapsed_seconds), style="bold yellow")
    return stats


def _controls() -> Text:
    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append("  cursor   ", style="dim")
    controls.append("Space", style="bold cyan")
    controls.append("  slide   ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  reshuffle   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")
    return controls


def build_screen(game: GamePlay, cursor: Cursor, locale: str = DEFAULT_LOCALE) -> Panel:
    """Compose the whole play (or win) screen as one renderable."""
    board = game.board
    title = f"Sliding Puzzle  {board.rows}×{board.columns}"

    if not game.is_won:
        return Panel(
            Group(
                Align.center(render_board(board, cursor)),
                Text(""),
                Align.center(_stats(game)),
                Align.center(_controls()),
            ),
            title=f"[bold cyan]{title}[/bold cyan]",
            border_style="bright_blue",
            padding=(1, 2),
        )

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("SOLVED!", style="bold green")
    congrats.append(
        f"  {game.moves} moves in {format_readable(game.elapsed_seconds, locale)}  ",
        style="green",
    )
    congrats.append("★\n", style="bold yellow")

    hint = Text("R to play again, Q to quit", style="dim")
    return Panel(
        Group(
            Align.center(render_board(board)),
            Align.center(congrats),
            Align.center(hint),
        ),
        title=f"[bold green]{title}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )


def _draw(game: GamePlay, cursor: Cursor, locale: str) -> None:
    console.clear()
    console.print()
    console.print(Align.center(build_screen(game, cursor, locale)))


# -- key dispatch -------------------------------------------------------------


def handle_key(game: GamePlay, cursor: Cursor, key: str) -> bool:
    """Apply one key to the session. Returns False when the player quits."""
    if key == "quit":
        return False
    if key == "reset":
        game.reset()
    elif game.is_won:
        pass
    elif key in _CURSOR_STEPS:
        cursor.step(key, game.board)
    elif key in _SLIDES:
        game.move(_SLIDES[key])
    elif key == "click":
        game.click(cursor.row, cursor.col)
    return True


# -- public entry point -------------------------------------------------------


def run(game: GamePlay, locale: str = DEFAULT_LOCALE) -> None:
    """Run the key loop until the player quits."""
    cursor = Cursor()
    running = True
    while running:
        _draw(game, cursor, locale)
        if game.is_won:
            key = get_key()
        else:
            # Short timeout so the clock keeps ticking.
            key = get_key_timeout(0.5)
            while key is None:
                _draw(game, cursor, locale)
                key = get_key_timeout(0.5)
        logger.debug("key=%r", key)
        running = handle_key(game, cursor, key)

    console.clear()
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
