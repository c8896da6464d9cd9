from sudokit.common.constants import BOX_SIZE, DIGITS, EMPTY, GRID_SIZE


class SudokuJudge:
    """
    Judge Sudoku grid state.

    - Allows incomplete grids (zeros are treated as empty cells)
    - Checks:
        * Row validity
        * Column validity
        * 3x3 box validity
    """

    @staticmethod
    def _units(grid):
        for row in grid:
            yield list(row)
        for c in range(GRID_SIZE):
            yield [grid[r][c] for r in range(GRID_SIZE)]
        for br in range(0, GRID_SIZE, BOX_SIZE):
            for bc in range(0, GRID_SIZE, BOX_SIZE):
                yield [
                    grid[r][c]
                    for r in range(br, br + BOX_SIZE)
                    for c in range(bc, bc + BOX_SIZE)
                ]

    @staticmethod
    def is_valid(grid) -> bool:
        for unit in SudokuJudge._units(grid):
            nums = [v for v in unit if v != EMPTY]
            if len(nums) != len(set(nums)):
                return False
        return True

    @staticmethod
    def is_complete(grid) -> bool:
        """True iff every row, column and box is a permutation of 1..9."""
        return all(sorted(unit) == list(DIGITS) for unit in SudokuJudge._units(grid))

    @staticmethod
    def is_solved(grid, solution) -> bool:
        return all(
            list(row) == list(expected) for row, expected in zip(grid, solution)
        ) and len(grid) == len(solution)
