"""Tracks the state of a game in progress.

``GameState`` is a value: every transition returns a new instance. Times are
passed in by the caller, so nothing here reads a clock.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum

from tileslide.models.board import Board


class GameStatus(StrEnum):
    PLAYING = "playing"
    WON = "won"


@dataclass(frozen=True)
class GameState:
    """Holds the current board, move counter, and start/finish timestamps."""

    board: Board
    moves: int = 0
    started_at: float | None = None
    finished_at: float | None = None
    status: GameStatus = GameStatus.PLAYING

    @classmethod
    def new(cls, board: Board) -> GameState:
        return cls(board=board)

    # -- transitions ----------------------------------------------------------

    def record_move(self, board: Board, now: float) -> GameState:
        """Return the state after a successful move that produced *board*.

        The clock starts on the first move and stops the instant the board
        is solved.
        """
        if self.status is GameStatus.WON:
            return self

        started_at = self.started_at if self.started_at is not None else now
        if board.is_solved():
            return replace(
                self,
                board=board,
                moves=self.moves + 1,
                started_at=started_at,
                finished_at=now,
                status=GameStatus.WON,
            )
        return replace(self, board=board, moves=self.moves + 1, started_at=started_at)

    # -- time tracking --------------------------------------------------------

    def elapsed_seconds(self, now: float) -> int:
        if self.started_at is None:
            return 0
        end = self.finished_at if self.finished_at is not None else now
        return max(0, int(end - self.started_at))

    @property
    def is_solved(self) -> bool:
        return self.status is GameStatus.WON
