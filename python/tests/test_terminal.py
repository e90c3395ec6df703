"""Terminal host: key dispatch, rendering and the CLI entry point."""

from __future__ import annotations

import random

from rich.console import Console
from typer.testing import CliRunner

from tileslide.engine.gameplay import GamePlay
from tileslide.models.board import Board
from tileslide_term.app import Cursor, build_screen, handle_key, render_board
from tileslide_term.cli import app
from tileslide_term.input_handler import _resolve

runner = CliRunner()


# -- helpers ------------------------------------------------------------------


def _game(flat: list[int]) -> GamePlay:
    board = Board.from_flat(3, 3, flat)
    return GamePlay.from_board(board, rng=random.Random(0), clock=lambda: 0.0)


def _render(renderable) -> str:
    console = Console(width=80, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


# -- key dispatch -------------------------------------------------------------


def test_key_map() -> None:
    assert _resolve("w") == "slide_up"
    assert _resolve("D") == "slide_right"
    assert _resolve(" ") == "click"
    assert _resolve("q") == "quit"
    assert _resolve("z") == ""


def test_cursor_stays_on_board() -> None:
    game = _game([1, 2, 3, 4, 5, 6, 7, 8, 0])
    cursor = Cursor()
    handle_key(game, cursor, "cursor_up")
    handle_key(game, cursor, "cursor_left")
    assert (cursor.row, cursor.col) == (0, 0)
    for _ in range(5):
        handle_key(game, cursor, "cursor_right")
    assert (cursor.row, cursor.col) == (0, 2)


def test_click_under_cursor_slides_column() -> None:
    game = _game([1, 2, 5, 8, 3, 4, 6, 7, 0])
    cursor = Cursor(row=0, col=2)
    assert handle_key(game, cursor, "click")
    assert game.board.tiles == (1, 2, 0, 8, 3, 5, 6, 7, 4)
    assert game.moves == 1


def test_slide_key_and_quit() -> None:
    game = _game([1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert handle_key(game, Cursor(), "slide_left")
    assert game.is_won
    assert handle_key(game, Cursor(), "reset")
    assert not game.is_won
    assert handle_key(game, Cursor(), "quit") is False


# -- rendering ----------------------------------------------------------------


def test_render_board_shows_every_tile() -> None:
    text = _render(render_board(Board.from_flat(2, 3, [1, 2, 3, 4, 0, 5])))
    for value in "12345":
        assert value in text
    assert "·" in text


def test_win_screen_uses_readable_time() -> None:
    game = _game([1, 2, 3, 4, 5, 6, 7, 0, 8])
    game.click(2, 2)
    text = _render(build_screen(game, Cursor(), locale="sv"))
    assert "SOLVED!" in text
    assert "0 sekunder" in text


# -- CLI ----------------------------------------------------------------------


def test_cli_dump_is_reproducible() -> None:
    first = runner.invoke(app, ["-r", "3", "-c", "4", "--seed", "3", "--dump"])
    second = runner.invoke(app, ["-r", "3", "-c", "4", "--seed", "3", "--dump"])
    assert first.exit_code == 0, first.output
    assert first.output == second.output
    assert "11" in first.output


def test_cli_rejects_single_cell_board() -> None:
    result = runner.invoke(app, ["-r", "1", "-c", "1", "--dump"])
    assert result.exit_code != 0


def test_cli_rejects_unknown_locale() -> None:
    result = runner.invoke(app, ["--locale", "xx", "--dump"])
    assert result.exit_code != 0


def test_cli_accepts_single_row_board() -> None:
    result = runner.invoke(app, ["-r", "1", "-c", "5", "--seed", "1", "--dump"])
    assert result.exit_code == 0, result.output
    for value in "1234":
        assert value in result.output
