"""Sliding-tile puzzle engine: boards, move rules, shuffling and timing."""

from tileslide.engine.gamegenerator import GameGenerator, create_shuffled, shuffle
from tileslide.engine.gameplay import GamePlay
from tileslide.engine.gamestate import GameState, GameStatus
from tileslide.engine.moves import (
    MoveResult,
    apply_click,
    slide_in_column,
    slide_in_row,
    swap_with_empty,
)
from tileslide.models import (
    EMPTY,
    Board,
    Direction,
    Grid,
    create_solved,
    is_solved,
    to_matrix,
)
from tileslide.utils.timefmt import format_clock, format_readable

__all__ = [
    "EMPTY",
    "Board",
    "Direction",
    "GameGenerator",
    "GamePlay",
    "GameState",
    "GameStatus",
    "Grid",
    "MoveResult",
    "apply_click",
    "create_shuffled",
    "create_solved",
    "format_clock",
    "format_readable",
    "is_solved",
    "shuffle",
    "slide_in_column",
    "slide_in_row",
    "swap_with_empty",
    "to_matrix",
]
