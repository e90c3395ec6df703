"""Index arithmetic for an R×C board stored in row-major order."""

from __future__ import annotations

from dataclasses import dataclass


def to_index(row: int, column: int, columns: int) -> int:
    return row * columns + column


def row_from_index(index: int, columns: int) -> int:
    return index // columns


def column_from_index(index: int, columns: int) -> int:
    return index % columns


@dataclass(frozen=True)
class Grid:
    """Board configuration: fixed row and column counts.

    Example::

        grid = Grid(3, 4)
        grid.to_index(1, 2)      # 6
        grid.position(6)         # (1, 2)
    """

    rows: int
    columns: int

    def __post_init__(self) -> None:
        if self.rows < 1 or self.columns < 1:
            raise ValueError(
                f"Grid dimensions must be positive, got {self.rows}×{self.columns}."
            )
        if self.rows * self.columns < 2:
            raise ValueError("A board needs at least two cells.")

    @property
    def size(self) -> int:
        return self.rows * self.columns

    # -- conversions ----------------------------------------------------------

    def to_index(self, row: int, column: int) -> int:
        return to_index(row, column, self.columns)

    def row_from_index(self, index: int) -> int:
        return row_from_index(index, self.columns)

    def column_from_index(self, index: int) -> int:
        return column_from_index(index, self.columns)

    def position(self, index: int) -> tuple[int, int]:
        return divmod(index, self.columns)

    def contains(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows and 0 <= column < self.columns
