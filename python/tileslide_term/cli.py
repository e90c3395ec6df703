"""Command-line entry point.

Usage::

    tileslide                      # 4×4, interactive
    tileslide -r 3 -c 5            # 3 rows, 5 columns
    tileslide --seed 7 --dump      # print a reproducible shuffle and exit

Every option can also be set through a ``TILESLIDE_*`` environment variable.
"""

import logging
import random
from enum import StrEnum
from typing import Optional

import typer
from rich.align import Align

from tileslide.engine.gameplay import GamePlay
from tileslide.utils.timefmt import DEFAULT_LOCALE, WORDINGS
from tileslide_term import app as term_app

logger = logging.getLogger(__name__)


class LogLevel(StrEnum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"


app = typer.Typer(add_completion=False)


def _check_locale(value: str) -> str:
    if value not in WORDINGS:
        raise typer.BadParameter(f"choose from {', '.join(sorted(WORDINGS))}")
    return value


@app.command()
def main(
    rows: int = typer.Option(
        4, "-r", "--rows",
        min=1, max=10,
        envvar="TILESLIDE_ROWS",
        help="Number of rows.",
    ),
    columns: int = typer.Option(
        4, "-c", "--columns",
        min=1, max=10,
        envvar="TILESLIDE_COLUMNS",
        help="Number of columns.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar="TILESLIDE_SEED",
        help="Seed for the shuffle, for reproducible boards.",
    ),
    shuffle_moves: Optional[int] = typer.Option(
        None, "--shuffle-moves",
        min=0,
        envvar="TILESLIDE_SHUFFLE_MOVES",
        help="Random-walk length (default: 40 per tile).",
    ),
    locale: str = typer.Option(
        DEFAULT_LOCALE, "--locale",
        envvar="TILESLIDE_LOCALE",
        callback=_check_locale,
        help="Language of the win message.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        envvar="TILESLIDE_LOG_LEVEL",
        help="Logging verbosity.",
    ),
    dump: bool = typer.Option(
        False, "--dump",
        help="Print a shuffled board and exit.",
    ),
) -> None:
    """Sliding Puzzle."""
    logging.basicConfig(
        level=log_level.value,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    rng = random.Random(seed)
    try:
        game = GamePlay(rows, columns, rng=rng, shuffle_moves=shuffle_moves)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    logger.info("Dealt %d×%d board (seed=%s)", rows, columns, seed)

    if dump:
        term_app.console.print(Align.left(term_app.render_board(game.board)))
        return

    term_app.run(game, locale=locale)


if __name__ == "__main__":
    app()
