# -*- coding: utf-8 -*-
"""Constraint checks over a 9x9 grid: row, column and 3x3 box peers of a cell."""
from typing import List, Sequence

from sudokit.common.constants import BOX_SIZE, EMPTY, GRID_SIZE
from sudokit.common.grid import Cell


def box_origin(row: int, col: int) -> Cell:
    """Top-left coordinate of the 3x3 box containing (row, col)."""
    return (row // BOX_SIZE) * BOX_SIZE, (col // BOX_SIZE) * BOX_SIZE


def box_index(row: int, col: int) -> int:
    return (row // BOX_SIZE) * BOX_SIZE + col // BOX_SIZE


def row_values(grid: Sequence[Sequence[int]], row: int, col: int) -> List[int]:
    return list(grid[row])


def col_values(grid: Sequence[Sequence[int]], row: int, col: int) -> List[int]:
    return [grid[r][col] for r in range(GRID_SIZE)]


def box_values(grid: Sequence[Sequence[int]], row: int, col: int) -> List[int]:
    br, bc = box_origin(row, col)
    return [grid[r][c] for r in range(br, br + BOX_SIZE) for c in range(bc, bc + BOX_SIZE)]


def peers(row: int, col: int) -> List[Cell]:
    """Return the 20 coordinates sharing a row, column or box with (row, col), row-major."""
    br, bc = box_origin(row, col)
    result = []
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            if (r, c) == (row, col):
                continue
            if r == row or c == col or (br <= r < br + BOX_SIZE and bc <= c < bc + BOX_SIZE):
                result.append((r, c))
    return result


def is_valid_placement(grid: Sequence[Sequence[int]], row: int, col: int, value: int) -> bool:
    """
    Check whether `value` may sit at (row, col) without repeating in its row,
    column or box. The cell itself is ignored, and 0 is always valid.

    Args:
        grid: Current grid state.
        row (int): Row index.
        col (int): Column index.
        value (int): Digit to test.

    Returns:
        bool: True if no other peer holds `value`.
    """
    if value == EMPTY:
        return True

    for c in range(GRID_SIZE):
        if c != col and grid[row][c] == value:
            return False

    for r in range(GRID_SIZE):
        if r != row and grid[r][col] == value:
            return False

    br, bc = box_origin(row, col)
    for r in range(br, br + BOX_SIZE):
        for c in range(bc, bc + BOX_SIZE):
            if (r, c) != (row, col) and grid[r][c] == value:
                return False

    return True
