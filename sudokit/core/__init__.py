# -*- coding: utf-8 -*-
"""Solver, generator and board state."""
from sudokit.core.board import BoardSnapshot, Hint, SudokuBoard
from sudokit.core.checker import (
    box_values,
    col_values,
    is_valid_placement,
    peers,
    row_values,
)
from sudokit.core.generator import (
    GeneratedPuzzle,
    GenerationError,
    PuzzleGenerator,
    generate_puzzle,
)
from sudokit.core.judge import SudokuJudge
from sudokit.core.solver import count_solutions, find_empty, solve

__all__ = [
    "BoardSnapshot",
    "GeneratedPuzzle",
    "GenerationError",
    "Hint",
    "PuzzleGenerator",
    "SudokuBoard",
    "SudokuJudge",
    "box_values",
    "col_values",
    "count_solutions",
    "find_empty",
    "generate_puzzle",
    "is_valid_placement",
    "peers",
    "row_values",
    "solve",
]
