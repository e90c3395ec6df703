"""Session state and the GamePlay orchestrator."""

from __future__ import annotations

import random

import pytest

from tileslide.engine.gameplay import GamePlay
from tileslide.engine.gamestate import GameState, GameStatus
from tileslide.models.board import Board, Direction


class FakeClock:
    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now


# -- helpers ------------------------------------------------------------------


def _one_move_from_solved() -> Board:
    return Board.from_flat(3, 3, [1, 2, 3, 4, 5, 6, 7, 0, 8])


def _game(board: Board, clock: FakeClock) -> GamePlay:
    return GamePlay.from_board(board, rng=random.Random(0), clock=clock)


# -- GameState ----------------------------------------------------------------


def test_new_state_has_no_clock() -> None:
    state = GameState.new(_one_move_from_solved())
    assert state.moves == 0
    assert state.started_at is None
    assert state.status is GameStatus.PLAYING
    assert state.elapsed_seconds(500.0) == 0


def test_first_move_starts_clock() -> None:
    board = Board.from_flat(3, 3, [1, 2, 3, 4, 5, 6, 0, 7, 8])
    state = GameState.new(board).record_move(_one_move_from_solved(), now=10.0)
    assert state.moves == 1
    assert state.started_at == 10.0
    assert state.elapsed_seconds(75.9) == 65

    later = state.record_move(board, now=20.0)
    assert later.started_at == 10.0
    assert later.moves == 2


def test_winning_move_freezes_state() -> None:
    state = GameState.new(_one_move_from_solved())
    won = state.record_move(Board.solved(3, 3), now=5.0)
    assert won.status is GameStatus.WON
    assert won.is_solved
    assert won.finished_at == 5.0
    assert won.elapsed_seconds(1000.0) == 0
    assert won.record_move(_one_move_from_solved(), now=9.0) is won


# -- GamePlay -----------------------------------------------------------------


def test_new_game_is_shuffled() -> None:
    game = GamePlay(3, 3, rng=random.Random(4), clock=FakeClock())
    assert not game.is_won
    assert game.moves == 0
    assert game.elapsed_seconds == 0


def test_same_seed_deals_same_board() -> None:
    a = GamePlay(4, 4, rng=random.Random(11), clock=FakeClock())
    b = GamePlay(4, 4, rng=random.Random(11), clock=FakeClock())
    assert a.board == b.board


def test_click_wins_and_tracks_time() -> None:
    clock = FakeClock()
    game = _game(Board.from_flat(3, 3, [1, 2, 3, 4, 5, 6, 0, 7, 8]), clock)

    assert game.click(2, 2)  # row slide of 7 and 8
    assert game.is_won
    assert game.moves == 1

    clock.now += 30
    assert game.elapsed_seconds == 0  # clock stopped on the winning move


def test_clock_runs_between_moves() -> None:
    clock = FakeClock()
    game = _game(Board.from_flat(3, 3, [1, 2, 3, 4, 5, 6, 0, 7, 8]), clock)
    assert game.click(2, 1)
    clock.now += 42
    assert game.elapsed_seconds == 42
    clock.now += 3
    assert game.click(2, 2)
    assert game.is_won
    assert game.elapsed_seconds == 45


def test_rejected_click_is_not_counted() -> None:
    game = _game(_one_move_from_solved(), FakeClock())
    before = game.board
    assert not game.click(0, 0)  # diagonal to the blank
    assert not game.click(2, 1)  # the blank itself
    assert game.board == before
    assert game.moves == 0
    assert game.state.started_at is None


def test_moves_after_win_are_ignored() -> None:
    game = _game(_one_move_from_solved(), FakeClock())
    assert game.move(Direction.LEFT)
    assert game.is_won
    assert not game.move(Direction.DOWN)
    assert not game.click(1, 2)
    assert game.moves == 1
    assert game.board.is_solved()


@pytest.mark.parametrize(
    ("direction", "blank_after"),
    [
        (Direction.DOWN, (0, 1)),
        (Direction.LEFT, (1, 2)),
        (Direction.RIGHT, (1, 0)),
        (Direction.UP, (2, 1)),
    ],
)
def test_move_direction(direction: Direction, blank_after: tuple[int, int]) -> None:
    board = Board.from_flat(3, 3, [1, 2, 3, 4, 0, 5, 6, 7, 8])
    game = _game(board, FakeClock())
    assert game.move(direction)
    assert game.board.blank_pos == blank_after


def test_move_off_edge_is_invalid() -> None:
    game = _game(Board.from_flat(2, 2, [0, 1, 2, 3]), FakeClock())
    assert not game.move(Direction.DOWN)
    assert not game.move(Direction.RIGHT)
    assert game.moves == 0


def test_click_outside_board_raises() -> None:
    game = _game(_one_move_from_solved(), FakeClock())
    with pytest.raises(ValueError):
        game.click(3, 0)


def test_reset_deals_fresh_state() -> None:
    game = _game(_one_move_from_solved(), FakeClock())
    game.move(Direction.LEFT)
    assert game.is_won

    game.reset()
    assert not game.is_won
    assert game.moves == 0
    assert game.board.rows == 3 and game.board.columns == 3
