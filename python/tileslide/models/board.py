"""Board model for the sliding puzzle engine."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum

from tileslide.models.grid import Grid

EMPTY = 0


class Direction(StrEnum):
    """Direction a *tile* travels when it slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# -- tile-array helpers --------------------------------------------------------


def create_solved(rows: int, columns: int) -> list[int]:
    """Return the goal layout: ``1..N-1`` in order, blank in the last cell."""
    total = rows * columns
    tiles = list(range(1, total + 1))
    tiles[-1] = EMPTY
    return tiles


def to_matrix(tiles: Sequence[int], columns: int) -> list[list[int]]:
    """Reshape a flat row-major tile array into a list of rows."""
    return [list(tiles[i : i + columns]) for i in range(0, len(tiles), columns)]


def is_solved(tiles: Sequence[int]) -> bool:
    """Check if every tile sits in its goal position."""
    last = len(tiles) - 1
    for i in range(last):
        if tiles[i] != i + 1:
            return False
    return tiles[last] == EMPTY


def validate_tiles(tiles: Sequence[int], grid: Grid) -> None:
    """Raise ``ValueError`` unless *tiles* is a permutation of ``0..N-1``."""
    if len(tiles) != grid.size:
        raise ValueError(
            f"Expected {grid.size} tiles for a {grid.rows}×{grid.columns} board, "
            f"got {len(tiles)}."
        )
    if sorted(tiles) != list(range(grid.size)):
        raise ValueError(
            f"Tiles must hold 1..{grid.size - 1} once each plus a single {EMPTY}."
        )


# -- board value ---------------------------------------------------------------


@dataclass(frozen=True)
class Board:
    """An immutable snapshot of the puzzle.

    Tiles are stored as a flat row-major tuple. ``EMPTY`` (0) marks the blank;
    its position is always derived from the tuple, never stored.
    """

    grid: Grid
    tiles: tuple[int, ...]

    def __post_init__(self) -> None:
        validate_tiles(self.tiles, self.grid)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, rows: int, columns: int) -> Board:
        return cls(grid=Grid(rows, columns), tiles=tuple(create_solved(rows, columns)))

    @classmethod
    def from_flat(cls, rows: int, columns: int, flat: Iterable[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, 3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        return cls(grid=Grid(rows, columns), tiles=tuple(flat))

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[int]]) -> Board:
        columns = len(matrix[0]) if matrix else 0
        if any(len(row) != columns for row in matrix):
            raise ValueError("All rows must have the same number of columns.")
        flat = [v for row in matrix for v in row]
        return cls.from_flat(len(matrix), columns, flat)

    def with_tiles(self, tiles: Iterable[int]) -> Board:
        return Board(grid=self.grid, tiles=tuple(tiles))

    # -- queries --------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def columns(self) -> int:
        return self.grid.columns

    @property
    def empty_index(self) -> int:
        return self.tiles.index(EMPTY)

    @property
    def blank_pos(self) -> tuple[int, int]:
        return self.grid.position(self.empty_index)

    def get_tile(self, row: int, col: int) -> int:
        if not self.grid.contains(row, col):
            raise ValueError(f"({row}, {col}) is outside the board.")
        return self.tiles[self.grid.to_index(row, col)]

    def to_matrix(self) -> list[list[int]]:
        return to_matrix(self.tiles, self.columns)

    def is_solved(self) -> bool:
        return is_solved(self.tiles)

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        index = self.grid.to_index(row, col)
        val = self.tiles[index]
        if val == EMPTY:
            return index == self.grid.size - 1
        return index == val - 1
