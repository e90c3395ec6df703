"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from typing import Protocol

from tileslide.engine.moves import swap_with_empty
from tileslide.models.board import EMPTY, Board, create_solved
from tileslide.models.grid import Grid

logger = logging.getLogger(__name__)

# Random-walk length per tile; a mixing knob, not a correctness requirement.
SHUFFLE_FACTOR = 40


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def neighbor_indices(empty_index: int, grid: Grid) -> list[int]:
    """In-bounds orthogonal neighbours of the blank, as up/down/left/right."""
    br, bc = grid.position(empty_index)
    neighbors: list[int] = []
    for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        nr, nc = br + dr, bc + dc
        if grid.contains(nr, nc):
            neighbors.append(grid.to_index(nr, nc))
    return neighbors


def shuffle(
    tiles: Sequence[int],
    rows: int,
    columns: int,
    move_count: int | None = None,
    rng: RandomSource | None = None,
) -> list[int]:
    """Scramble *tiles* with ``move_count`` random legal blank moves.

    Only states reachable from the input are ever visited, so starting from
    the solved layout always yields a solvable board.
    """
    grid = Grid(rows, columns)
    if move_count is None:
        move_count = grid.size * SHUFFLE_FACTOR
    source = rng if rng is not None else random

    current = tuple(tiles)
    empty_index = current.index(EMPTY)
    for _ in range(move_count):
        neighbors = neighbor_indices(empty_index, grid)
        target = neighbors[source.randrange(len(neighbors))]
        # Neighbours are always adjacent, so the swap always applies.
        current, empty_index = swap_with_empty(current, target, empty_index, columns)

    logger.debug("Shuffled %d×%d board with %d moves", rows, columns, move_count)
    return list(current)


def create_shuffled(
    rows: int, columns: int, rng: RandomSource | None = None
) -> list[int]:
    return shuffle(create_solved(rows, columns), rows, columns, rng=rng)


class GameGenerator:
    """Creates solvable ``Board`` values by shuffling from the solved state."""

    @staticmethod
    def solved(rows: int, columns: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.solved(rows, columns)

    @staticmethod
    def generate(
        rows: int,
        columns: int,
        rng: RandomSource | None = None,
        move_count: int | None = None,
    ) -> Board:
        """Return a random *solvable* board that is not already solved."""
        board = Board.solved(rows, columns)
        tiles = shuffle(board.tiles, rows, columns, move_count, rng)

        # An even-length walk can land back on the goal (always, on a 1×2
        # board); one more step from the goal never does.
        if board.with_tiles(tiles).is_solved():
            logger.debug("Shuffle returned the solved board, taking one more step")
            tiles = shuffle(tiles, rows, columns, 1, rng)

        return board.with_tiles(tiles)
