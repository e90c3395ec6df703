from tileslide.models.board import (
    EMPTY,
    Board,
    Direction,
    create_solved,
    is_solved,
    to_matrix,
    validate_tiles,
)
from tileslide.models.grid import Grid

__all__ = [
    "EMPTY",
    "Board",
    "Direction",
    "Grid",
    "create_solved",
    "is_solved",
    "to_matrix",
    "validate_tiles",
]
