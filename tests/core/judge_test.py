from tests.tools import CANONICAL_SOLUTION, canonical_grid, classic_puzzle
from sudokit.core.judge import SudokuJudge

# ---------- Validity ----------


def test_judge_allows_incomplete_board():
    assert SudokuJudge.is_valid(classic_puzzle())


def test_judge_detects_row_violation():
    board = [
        [1, 1, 0, 0, 0, 0, 0, 0, 0],
    ] + [[0] * 9 for _ in range(8)]

    assert not SudokuJudge.is_valid(board)


def test_judge_detects_column_violation():
    board = [
        [5, 0, 0, 0, 0, 0, 0, 0, 0],
        [5, 0, 0, 0, 0, 0, 0, 0, 0],
    ] + [[0] * 9 for _ in range(7)]

    assert not SudokuJudge.is_valid(board)


def test_judge_detects_block_violation():
    board = [
        [1, 2, 3, 0, 0, 0, 0, 0, 0],
        [4, 1, 0, 0, 0, 0, 0, 0, 0],
    ] + [[0] * 9 for _ in range(7)]

    assert not SudokuJudge.is_valid(board)


# ---------- Completeness ----------


def test_judge_complete_grid():
    assert SudokuJudge.is_complete(CANONICAL_SOLUTION)


def test_judge_incomplete_grid_is_not_complete():
    assert not SudokuJudge.is_complete(classic_puzzle())


def test_judge_swapped_cells_are_not_complete():
    grid = canonical_grid()
    grid[0][0], grid[0][1] = grid[0][1], grid[0][0]
    assert SudokuJudge.is_valid(grid) is False
    assert not SudokuJudge.is_complete(grid)


# ---------- Solved ----------


def test_judge_is_solved():
    assert SudokuJudge.is_solved(canonical_grid(), CANONICAL_SOLUTION)
    grid = canonical_grid()
    grid[8][8] = 0
    assert not SudokuJudge.is_solved(grid, CANONICAL_SOLUTION)
