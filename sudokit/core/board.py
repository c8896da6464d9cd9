# -*- coding: utf-8 -*-
"""Live play state: the player's grid, the givens, per-cell notes, and the feedback derived from them."""
import numbers
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Sequence, Set, Tuple

from sudokit.common.constants import DIGITS, EMPTY, GRID_SIZE
from sudokit.common.grid import Cell, FrozenGrid, Grid, check_grid, clone_grid, freeze_grid
from sudokit.core import checker
from sudokit.core.judge import SudokuJudge
from sudokit.utils.log import get_logger

logger = get_logger(__name__)

ALL_NOTES = sum(1 << (v - 1) for v in DIGITS)


class Hint(NamedTuple):
    row: int
    col: int
    value: int


@dataclass(frozen=True)
class BoardSnapshot:
    """Value copy of the mutable part of a board (live grid and notes), for undo/redo."""

    grid: FrozenGrid
    notes: Tuple[Tuple[int, ...], ...]


def _note_bit(value: int) -> int:
    return 1 << (value - 1)


def _is_digit(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool) and value in DIGITS


class SudokuBoard:
    """
    SudokuBoard tracks the current puzzle state, givens, notes and conflicts.

    The puzzle and solution are read-only snapshots; the live grid and the notes
    are owned by the board. Notes are stored as a 9-bit mask per cell, bit `v-1`
    standing for candidate `v`.

    Mutations that make no sense (writing a given, digits outside 1..9, notes on
    a filled cell) are ignored and logged at debug level.
    """

    def __init__(self, puzzle: Sequence[Sequence[int]], solution: Sequence[Sequence[int]]):
        check_grid(puzzle, "puzzle")
        check_grid(solution, "solution")
        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                if solution[r][c] == EMPTY:
                    raise ValueError(f"solution[{r}][{c}] is empty")
                if puzzle[r][c] != EMPTY and puzzle[r][c] != solution[r][c]:
                    raise ValueError(f"puzzle[{r}][{c}] disagrees with the solution")

        self._puzzle: FrozenGrid = freeze_grid(puzzle)
        self._solution: FrozenGrid = freeze_grid(solution)
        self._givens = tuple(tuple(v != EMPTY for v in row) for row in self._puzzle)
        self._grid: Grid = clone_grid(self._puzzle)
        self._notes: List[List[int]] = self._empty_notes()

    @staticmethod
    def _empty_notes() -> List[List[int]]:
        return [[0] * GRID_SIZE for _ in range(GRID_SIZE)]

    @property
    def puzzle(self) -> FrozenGrid:
        return self._puzzle

    @property
    def solution(self) -> FrozenGrid:
        return self._solution

    @property
    def grid(self) -> Grid:
        """A copy of the live grid."""
        return clone_grid(self._grid)

    def is_given(self, row: int, col: int) -> bool:
        return self._givens[row][col]

    def get_value(self, row: int, col: int) -> int:
        return self._grid[row][col]

    # mutations

    def set_value(self, row: int, col: int, value: int) -> None:
        """Write `value` into an editable cell and drop that cell's notes. 0 clears the cell."""
        if value == EMPTY:
            self.clear_value(row, col)
            return
        if self.is_given(row, col) or not _is_digit(value):
            logger.debug(f"Ignoring set_value({row}, {col}, {value!r})")
            return
        self._grid[row][col] = int(value)
        self._notes[row][col] = 0

    def clear_value(self, row: int, col: int) -> None:
        if self.is_given(row, col):
            logger.debug(f"Ignoring clear_value on given cell ({row}, {col})")
            return
        self._grid[row][col] = EMPTY
        self._notes[row][col] = 0

    def toggle_note(self, row: int, col: int, value: int) -> None:
        if self._grid[row][col] != EMPTY or not _is_digit(value):
            logger.debug(f"Ignoring toggle_note({row}, {col}, {value!r})")
            return
        self._notes[row][col] ^= _note_bit(int(value))

    def get_notes(self, row: int, col: int) -> List[int]:
        mask = self._notes[row][col]
        return [v for v in DIGITS if mask & _note_bit(v)]

    def has_note(self, row: int, col: int, value: int) -> bool:
        return _is_digit(value) and bool(self._notes[row][col] & _note_bit(value))

    def clear_notes(self, row: int, col: int) -> None:
        self._notes[row][col] = 0

    def clear_notes_in_peers(self, row: int, col: int, value: int) -> None:
        """Remove `value` from the notes of every empty cell sharing a row, column or box with (row, col)."""
        if not _is_digit(value):
            return
        mask = ALL_NOTES & ~_note_bit(value)
        for r, c in checker.peers(row, col):
            if self._grid[r][c] == EMPTY:
                self._notes[r][c] &= mask

    def reset_to_puzzle(self) -> None:
        self._grid = clone_grid(self._puzzle)
        self._notes = self._empty_notes()

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(
            grid=freeze_grid(self._grid),
            notes=tuple(tuple(row) for row in self._notes),
        )

    def restore(self, snapshot: BoardSnapshot) -> None:
        """Replace the live grid and notes with `snapshot`; givens are kept as they are."""
        grid = clone_grid(snapshot.grid)
        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                if self._givens[r][c] and grid[r][c] != self._puzzle[r][c]:
                    raise ValueError(f"Snapshot overwrites given cell ({r}, {c})")
        self._grid = grid
        self._notes = [list(row) for row in snapshot.notes]

    # checker primitives over the live grid

    def row_values(self, row: int, col: int) -> List[int]:
        return checker.row_values(self._grid, row, col)

    def col_values(self, row: int, col: int) -> List[int]:
        return checker.col_values(self._grid, row, col)

    def box_values(self, row: int, col: int) -> List[int]:
        return checker.box_values(self._grid, row, col)

    def is_valid_placement(self, row: int, col: int, value: int) -> bool:
        return checker.is_valid_placement(self._grid, row, col, value)

    # derived feedback

    def compute_conflicts(self) -> Set[Cell]:
        """Cells whose value repeats in their row, column or box. Independent of the solution."""
        conflicts = set()
        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                value = self._grid[r][c]
                if value != EMPTY and not self.is_valid_placement(r, c, value):
                    conflicts.add((r, c))
        return conflicts

    def mismatched_cells(self) -> Set[Cell]:
        """Filled cells whose value differs from the solution."""
        return {
            (r, c)
            for r in range(GRID_SIZE)
            for c in range(GRID_SIZE)
            if self._grid[r][c] != EMPTY and self._grid[r][c] != self._solution[r][c]
        }

    def available_candidates(self, row: int, col: int) -> List[int]:
        if self._grid[row][col] != EMPTY:
            return []
        used = set(self.row_values(row, col))
        used.update(self.col_values(row, col))
        used.update(self.box_values(row, col))
        return [v for v in DIGITS if v not in used]

    def find_hint(self) -> Optional[Hint]:
        """First empty cell, row-major, with exactly one candidate (a naked single)."""
        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                if self._grid[r][c] != EMPTY:
                    continue
                candidates = self.available_candidates(r, c)
                if len(candidates) == 1:
                    return Hint(r, c, candidates[0])
        return None

    def completed_digits(self) -> Set[int]:
        """Digits whose nine solution cells all hold the correct value."""
        counts = dict.fromkeys(DIGITS, 0)
        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                value = self._grid[r][c]
                if value != EMPTY and value == self._solution[r][c]:
                    counts[value] += 1
        return {v for v, n in counts.items() if n == GRID_SIZE}

    def is_solved(self) -> bool:
        return SudokuJudge.is_solved(self._grid, self._solution)
