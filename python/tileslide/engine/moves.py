"""Move rules: pure functions from one tile array to the next.

Every function takes the current tiles, the clicked index and the blank's
index, and returns a ``MoveResult`` or ``None`` when the move does not
apply. Inputs are never mutated.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

from tileslide.models.board import EMPTY, Direction
from tileslide.models.grid import Grid, column_from_index, row_from_index


class MoveResult(NamedTuple):
    tiles: tuple[int, ...]
    empty_index: int


def is_adjacent(first: int, second: int, columns: int) -> bool:
    """True when the two cells are one orthogonal step apart."""
    dr = abs(row_from_index(first, columns) - row_from_index(second, columns))
    dc = abs(column_from_index(first, columns) - column_from_index(second, columns))
    return dr + dc == 1


# -- single swap ---------------------------------------------------------------


def swap_with_empty(
    tiles: Sequence[int],
    clicked_index: int,
    empty_index: int,
    columns: int,
) -> MoveResult | None:
    """Move the clicked tile into the neighbouring blank."""
    if not is_adjacent(clicked_index, empty_index, columns):
        return None

    nxt = list(tiles)
    nxt[empty_index] = nxt[clicked_index]
    nxt[clicked_index] = EMPTY
    return MoveResult(tuple(nxt), clicked_index)


# -- multi-tile slides ---------------------------------------------------------


def _slide(
    tiles: Sequence[int],
    clicked_index: int,
    empty_index: int,
    step: int,
) -> MoveResult:
    # Walk from the blank toward the click, pulling each tile one step
    # toward the blank's old position.
    nxt = list(tiles)
    if clicked_index < empty_index:
        # e.g. row [A B _] → click A → [_ A B]
        for i in range(empty_index, clicked_index, -step):
            nxt[i] = nxt[i - step]
    else:
        # e.g. row [_ A B] → click B → [A B _]
        for i in range(empty_index, clicked_index, step):
            nxt[i] = nxt[i + step]
    nxt[clicked_index] = EMPTY
    return MoveResult(tuple(nxt), clicked_index)


def slide_in_row(
    tiles: Sequence[int],
    clicked_index: int,
    empty_index: int,
    columns: int,
) -> MoveResult | None:
    """Shift every tile between the click and the blank along their row.

    Applies to any click on the blank's row other than the blank itself; a
    click next to the blank therefore gives the same result as
    ``swap_with_empty``.
    """
    if clicked_index == empty_index:
        return None
    if row_from_index(clicked_index, columns) != row_from_index(empty_index, columns):
        return None
    return _slide(tiles, clicked_index, empty_index, 1)


def slide_in_column(
    tiles: Sequence[int],
    clicked_index: int,
    empty_index: int,
    columns: int,
) -> MoveResult | None:
    """Same as ``slide_in_row`` but along the blank's column.

    Example (before → click 5 → after)::

        [1 2 5]     [1 2 _]
        [8 3 4]  →  [8 3 5]
        [6 7 _]     [6 7 4]
    """
    if clicked_index == empty_index:
        return None
    if column_from_index(clicked_index, columns) != column_from_index(
        empty_index, columns
    ):
        return None
    return _slide(tiles, clicked_index, empty_index, columns)


def apply_click(
    tiles: Sequence[int],
    clicked_index: int,
    empty_index: int,
    columns: int,
) -> MoveResult | None:
    """Try a swap, then a row slide, then a column slide."""
    for rule in (swap_with_empty, slide_in_row, slide_in_column):
        result = rule(tiles, clicked_index, empty_index, columns)
        if result is not None:
            return result
    return None


# -- keyboard moves ------------------------------------------------------------

# The offset points from the blank to the tile that slides into it.
# UP   → tile below the blank moves up
# DOWN → tile above the blank moves down
# LEFT → tile right of the blank moves left
# RIGHT→ tile left of the blank moves right
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


def target_for_direction(
    grid: Grid, empty_index: int, direction: Direction
) -> int | None:
    """Index of the tile that would move in *direction*, or ``None`` at an edge."""
    br, bc = grid.position(empty_index)
    dr, dc = _OFFSETS[direction]
    tr, tc = br + dr, bc + dc
    if not grid.contains(tr, tc):
        return None
    return grid.to_index(tr, tc)
