"""Core gameplay logic: processes moves and checks win condition."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from tileslide.engine.gamegenerator import GameGenerator, RandomSource
from tileslide.engine.moves import (
    MoveResult,
    apply_click,
    target_for_direction,
)
from tileslide.engine.gamestate import GameState
from tileslide.models.board import Board, Direction

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class GamePlay:
    """Orchestrates a single game session.

    The session swaps in a new ``GameState`` after every accepted move. The
    random source and the clock are injected so a session can be replayed
    deterministically in tests.
    """

    def __init__(
        self,
        rows: int,
        columns: int,
        rng: RandomSource | None = None,
        clock: Clock = time.monotonic,
        shuffle_moves: int | None = None,
    ) -> None:
        self.rows = rows
        self.columns = columns
        self._rng = rng
        self._clock = clock
        self._shuffle_moves = shuffle_moves
        self.state = GameState.new(self._deal())

    @classmethod
    def from_board(
        cls,
        board: Board,
        rng: RandomSource | None = None,
        clock: Clock = time.monotonic,
    ) -> GamePlay:
        """Create a game session from an existing board."""
        obj = object.__new__(cls)
        obj.rows = board.rows
        obj.columns = board.columns
        obj._rng = rng
        obj._clock = clock
        obj._shuffle_moves = None
        obj.state = GameState.new(board)
        return obj

    def reset(self) -> None:
        """Deal a fresh shuffled board and zero the counters."""
        self.state = GameState.new(self._deal())

    # -- movement -------------------------------------------------------------

    def click(self, row: int, col: int) -> bool:
        """Apply a click on (row, col): swap or slide toward the blank.

        Returns True if a move was applied. Clicks after the puzzle is won,
        and clicks that match no move shape, are ignored.
        """
        board = self.state.board
        if not board.grid.contains(row, col):
            raise ValueError(f"({row}, {col}) is outside the board.")
        index = board.grid.to_index(row, col)
        return self._apply(apply_click(board.tiles, index, board.empty_index, self.columns))

    def move(self, direction: Direction) -> bool:
        """Slide the tile next to the blank in *direction*.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        board = self.state.board
        target = target_for_direction(board.grid, board.empty_index, direction)
        if target is None:
            return False
        return self._apply(apply_click(board.tiles, target, board.empty_index, self.columns))

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def moves(self) -> int:
        return self.state.moves

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

    @property
    def elapsed_seconds(self) -> int:
        return self.state.elapsed_seconds(self._clock())

    # -- helpers --------------------------------------------------------------

    def _deal(self) -> Board:
        return GameGenerator.generate(
            self.rows, self.columns, rng=self._rng, move_count=self._shuffle_moves
        )

    def _apply(self, result: MoveResult | None) -> bool:
        if result is None or self.is_won:
            return False
        board = self.state.board.with_tiles(result.tiles)
        self.state = self.state.record_move(board, self._clock())
        if self.is_won:
            logger.debug("Solved in %d moves", self.state.moves)
        return True
