# -*- coding: utf-8 -*-
"""Backtracking Sudoku solver.

The solver fills the first empty cell in row-major order, trying digits in
ascending order (or a per-cell uniform shuffle when `randomize` is set) and
backtracking on dead ends. An optional `on_solution` callback turns it into a
solution enumerator: the callback sees every completed grid and answers with a
`SearchSignal`, `STOP` to unwind the search at once or `CONTINUE` to keep going.
"""
from typing import Callable, List, Optional, Sequence

import numpy as np

from sudokit.common.constants import DIGITS, EMPTY, GRID_SIZE, SOLUTION_COUNT_LIMIT, SearchSignal
from sudokit.common.grid import Cell, Grid, clone_grid
from sudokit.core.checker import box_index

OnSolution = Callable[[Grid], SearchSignal]


class _SearchState:
    """Bitmasks of the digits used per row, column and box, plus the cells left to fill.

    Bit `v` of a mask is set iff some cell of that unit holds `v`, which is
    exactly the condition `is_valid_placement` tests for an empty cell.
    """

    def __init__(self, grid: Grid):
        self.grid = grid
        self.rows = [0] * GRID_SIZE
        self.cols = [0] * GRID_SIZE
        self.boxes = [0] * GRID_SIZE
        self.empties: List[Cell] = []
        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                v = grid[r][c]
                if v == EMPTY:
                    self.empties.append((r, c))
                else:
                    self._mark(r, c, v)

    def _mark(self, row: int, col: int, value: int) -> None:
        bit = 1 << value
        self.rows[row] |= bit
        self.cols[col] |= bit
        self.boxes[box_index(row, col)] |= bit

    def used(self, row: int, col: int) -> int:
        return self.rows[row] | self.cols[col] | self.boxes[box_index(row, col)]

    def place(self, row: int, col: int, value: int) -> None:
        self.grid[row][col] = value
        self._mark(row, col, value)

    def unplace(self, row: int, col: int, value: int) -> None:
        self.grid[row][col] = EMPTY
        mask = ~(1 << value)
        self.rows[row] &= mask
        self.cols[col] &= mask
        self.boxes[box_index(row, col)] &= mask


def find_empty(grid: Sequence[Sequence[int]]) -> Optional[Cell]:
    """
    Find the next empty cell in the grid.

    Returns:
        tuple | None: (row, col) of the first empty cell in row-major order, or None if full.
    """
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            if grid[r][c] == EMPTY:
                return r, c
    return None


def _search(
    state: _SearchState,
    index: int,
    rng: Optional[np.random.Generator],
    on_solution: Optional[OnSolution],
) -> SearchSignal:
    if index == len(state.empties):
        if on_solution is None:
            return SearchSignal.STOP
        if on_solution(state.grid) is SearchSignal.STOP:
            return SearchSignal.STOP
        return SearchSignal.CONTINUE

    row, col = state.empties[index]
    candidates = rng.permutation(DIGITS).tolist() if rng is not None else DIGITS
    used = state.used(row, col)
    for value in candidates:
        if used & (1 << value):
            continue
        state.place(row, col, value)
        if _search(state, index + 1, rng, on_solution) is SearchSignal.STOP:
            return SearchSignal.STOP
        state.unplace(row, col, value)

    state.grid[row][col] = EMPTY
    return SearchSignal.CONTINUE


def solve(
    grid: Grid,
    randomize: bool = False,
    on_solution: Optional[OnSolution] = None,
    rng: Optional[np.random.Generator] = None,
) -> bool:
    """
    Solve `grid` in place by backtracking.

    Args:
        grid (Grid): Grid to fill; mutated in place.
        randomize (bool): Shuffle the digit order of every cell instead of
            trying 1..9 ascending. Use for producing varied grids, never for
            counting.
        on_solution (Callable): Called with the completed grid each time the
            search fills it. The grid keeps changing afterwards, so copy it to
            keep it. Return `SearchSignal.STOP` to end the search, anything
            else to keep enumerating.
        rng (np.random.Generator): Source of the shuffles when `randomize` is
            set. Defaults to a freshly seeded generator.

    Returns:
        bool: Without `on_solution`, True iff a solution was found (the grid
            then holds it). With `on_solution`, True iff the callback asked to
            stop. When False, every originally empty cell is empty again.
    """
    if randomize and rng is None:
        rng = np.random.default_rng()
    state = _SearchState(grid)
    signal = _search(state, 0, rng if randomize else None, on_solution)
    return signal is SearchSignal.STOP


def count_solutions(grid: Sequence[Sequence[int]], limit: Optional[int] = SOLUTION_COUNT_LIMIT) -> int:
    """
    Count the completions of `grid`, stopping once `limit` are found.

    The grid itself is left untouched; the search runs on a copy in
    deterministic order. Pass `limit=None` to count exhaustively.
    """
    if limit is not None and limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")
    count = 0

    def _on_solution(_: Grid) -> SearchSignal:
        nonlocal count
        count += 1
        if limit is not None and count >= limit:
            return SearchSignal.STOP
        return SearchSignal.CONTINUE

    solve(clone_grid(grid), on_solution=_on_solution)
    return count
