# -*- coding: utf-8 -*-
"""Grid types and copy helpers shared by the solver, generator and board."""
import numbers
from typing import List, Sequence, Tuple

from sudokit.common.constants import EMPTY, GRID_SIZE

Grid = List[List[int]]
"""A mutable 9x9 grid as rows of integers (0 = empty)."""

FrozenGrid = Tuple[Tuple[int, ...], ...]
"""An immutable 9x9 grid snapshot (puzzle givens or a solution)."""

Cell = Tuple[int, int]
"""A (row, col) coordinate, both 0-based."""


def empty_grid() -> Grid:
    return [[EMPTY] * GRID_SIZE for _ in range(GRID_SIZE)]


def clone_grid(grid: Sequence[Sequence[int]]) -> Grid:
    """Return a fresh mutable copy of `grid` holding plain ints; never shares rows with the input."""
    return [[int(v) for v in row] for row in grid]


def freeze_grid(grid: Sequence[Sequence[int]]) -> FrozenGrid:
    return tuple(tuple(int(v) for v in row) for row in grid)


def count_blanks(grid: Sequence[Sequence[int]]) -> int:
    return sum(1 for row in grid for v in row if v == EMPTY)


def check_grid(grid, name: str = "grid") -> None:
    """Raise `ValueError` unless `grid` is 9 rows of 9 integers in 0..9."""
    if grid is None or len(grid) != GRID_SIZE:
        raise ValueError(f"{name} must have {GRID_SIZE} rows")
    for r, row in enumerate(grid):
        if len(row) != GRID_SIZE:
            raise ValueError(f"{name} row {r} must have {GRID_SIZE} columns, got {len(row)}")
        for c, v in enumerate(row):
            if isinstance(v, bool) or not isinstance(v, numbers.Integral) or not 0 <= v <= GRID_SIZE:
                raise ValueError(f"{name}[{r}][{c}] must be an integer in 0..{GRID_SIZE}, got {v!r}")


def parse_grid(text: str) -> Grid:
    """Parse an 81-character grid string; `0` or `.` mark blanks, whitespace is ignored."""
    chars = [ch for ch in text if not ch.isspace()]
    if len(chars) != GRID_SIZE * GRID_SIZE:
        raise ValueError(f"Expected {GRID_SIZE * GRID_SIZE} cells, got {len(chars)}")
    values = []
    for ch in chars:
        if ch == ".":
            values.append(EMPTY)
        elif ch in "0123456789":
            values.append(int(ch))
        else:
            raise ValueError(f"Invalid cell character: {ch!r}")
    return [values[r * GRID_SIZE : (r + 1) * GRID_SIZE] for r in range(GRID_SIZE)]


def format_grid(grid: Sequence[Sequence[int]]) -> str:
    """Render the grid as nine lines of space-separated digits."""
    return "\n".join(" ".join(str(v) for v in row) for row in grid)
