# -*- coding: utf-8 -*-
"""Launch the command line interface."""
import argparse
import json
import sys
from typing import List, Optional

import numpy as np

from sudokit.common.config import Config, load_config
from sudokit.common.constants import Difficulty
from sudokit.common.grid import Grid, check_grid, format_grid, parse_grid
from sudokit.core.board import SudokuBoard
from sudokit.core.generator import GenerationError, PuzzleGenerator
from sudokit.core.judge import SudokuJudge
from sudokit.core.solver import count_solutions, solve
from sudokit.utils.log import get_logger

logger = get_logger(__name__)


def _read_grid(text: str) -> Grid:
    """Accept either an 81-character string or a JSON 9x9 matrix."""
    text = text.strip()
    if text.startswith("["):
        try:
            grid = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON grid: {e}") from e
    else:
        grid = parse_grid(text)
    check_grid(grid)
    return grid


def _load(args: argparse.Namespace) -> Config:
    config = load_config(args.config) if args.config else Config()
    if args.difficulty is not None:
        config.generator.difficulty = args.difficulty
    if args.seed is not None:
        config.generator.seed = args.seed
    return config.check_and_update()


def generate(args: argparse.Namespace) -> int:
    config = _load(args)
    get_logger(level=config.log_level)
    generator = PuzzleGenerator(
        config=config.generator, rng=np.random.default_rng(config.generator.seed)
    )
    out = open(args.output, "w", encoding="utf-8") if args.output else sys.stdout
    try:
        for i in range(args.num):
            result = generator.generate()
            logger.info(
                f"Puzzle {i + 1}/{args.num}: {result.blanks} blanks, {result.attempts} attempt(s)"
            )
            out.write(json.dumps(result.to_dict()) + "\n")
    except GenerationError as e:
        logger.error(str(e))
        return 1
    finally:
        if out is not sys.stdout:
            out.close()
    return 0


def solve_grid(args: argparse.Namespace) -> int:
    grid = _read_grid(args.grid)
    if not SudokuJudge.is_valid(grid):
        print("Invalid puzzle: repeated digits in a row, column or box.")
        return 1
    solutions = count_solutions(grid)
    if solutions == 0 or not solve(grid):
        print("No solution.")
        return 1
    print(format_grid(grid))
    if solutions > 1:
        print("Warning: the puzzle has more than one solution.")
    return 0


def hint(args: argparse.Namespace) -> int:
    puzzle = _read_grid(args.grid)
    if not SudokuJudge.is_valid(puzzle):
        print("Invalid puzzle: repeated digits in a row, column or box.")
        return 1
    solution = [row[:] for row in puzzle]
    if not solve(solution):
        print("No solution.")
        return 1
    board = SudokuBoard(puzzle, solution)
    found = board.find_hint()
    if found is None:
        print("No hint.")
    else:
        print(f"row {found.row + 1}, col {found.col + 1}: {found.value}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sudokit", description="Sudoku puzzle generator and solver.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    gen_parser = subparsers.add_parser("generate", help="Generate puzzles as JSON lines.")
    gen_parser.add_argument("--config", type=str, default=None, help="Path to a YAML config file.")
    gen_parser.add_argument(
        "--difficulty",
        type=str.lower,
        default=None,
        choices=[difficulty.value for difficulty in Difficulty],
    )
    gen_parser.add_argument("--num", type=int, default=1, help="Number of puzzles to generate.")
    gen_parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible puzzles.")
    gen_parser.add_argument(
        "--output", type=str, default=None, help="Output file, stdout if omitted."
    )
    gen_parser.set_defaults(func=generate)

    solve_parser = subparsers.add_parser("solve", help="Solve a puzzle.")
    solve_parser.add_argument(
        "grid", type=str, help="81 characters (0 or . for blanks) or a JSON 9x9 matrix."
    )
    solve_parser.set_defaults(func=solve_grid)

    hint_parser = subparsers.add_parser("hint", help="Show the next naked single of a puzzle.")
    hint_parser.add_argument(
        "grid", type=str, help="81 characters (0 or . for blanks) or a JSON 9x9 matrix."
    )
    hint_parser.set_defaults(func=hint)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "num", 1) < 1:
        parser.error("--num must be >= 1")
    try:
        return args.func(args)
    except ValueError as e:
        logger.error(str(e))
        return 2


if __name__ == "__main__":
    sys.exit(main())
