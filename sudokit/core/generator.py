from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from sudokit.common.config import GeneratorConfig
from sudokit.common.constants import CELL_COUNT, EMPTY, GRID_SIZE, Difficulty
from sudokit.common.grid import FrozenGrid, Grid, clone_grid, count_blanks, empty_grid, freeze_grid
from sudokit.core.judge import SudokuJudge
from sudokit.core.solver import count_solutions, solve
from sudokit.utils.log import get_logger

logger = get_logger(__name__)


class GenerationError(RuntimeError):
    """Raised when no valid unique-solution puzzle was produced within the attempt budget."""


@dataclass(frozen=True)
class GeneratedPuzzle:
    """A puzzle and its unique solution, both immutable."""

    puzzle: FrozenGrid
    solution: FrozenGrid
    difficulty: Difficulty
    attempts: int = 1

    @property
    def blanks(self) -> int:
        return count_blanks(self.puzzle)

    def to_dict(self) -> dict:
        return {
            "puzzle": clone_grid(self.puzzle),
            "solution": clone_grid(self.solution),
            "difficulty": self.difficulty.value,
        }


class PuzzleGenerator:
    """
    Sudoku puzzle generator using randomized backtracking.

    Features:
    - Generates a fully solved grid first
    - Removes cells in random order, keeping only removals that leave
      exactly one solution
    - Re-validates the carved puzzle from scratch and retries a bounded
      number of times before giving up
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        """
        Initialize the generator.

        Args:
            config (GeneratorConfig): Attempt budget, removal targets and seed.
            rng (np.random.Generator): Random source. When omitted, one is
                created from `config.seed` (fresh entropy if that is None).
        """
        self.config = config or GeneratorConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

    def generate(self, difficulty: Union[Difficulty, str, None] = None) -> GeneratedPuzzle:
        """
        Generate a Sudoku puzzle and its solution.

        Args:
            difficulty: "easy", "medium", "hard" or "expert". Unrecognized
                values fall back to "medium"; None uses `config.difficulty`.

        Returns:
            GeneratedPuzzle: puzzle (zeros for blanks) and its unique solution.

        Raises:
            GenerationError: every attempt failed validation.
        """
        if difficulty is None:
            difficulty = self.config.difficulty
        level = Difficulty.parse(difficulty)
        target = self.config.removal_target(level)

        for attempt in range(1, self.config.max_attempts + 1):
            logger.debug(f"Generating {level.value} puzzle, attempt {attempt}, target {target}")
            result = self._attempt(target)
            if result is None:
                logger.warning(f"Attempt {attempt} produced no valid puzzle, retrying.")
                continue
            puzzle, solution = result
            return GeneratedPuzzle(
                puzzle=freeze_grid(puzzle),
                solution=freeze_grid(solution),
                difficulty=level,
                attempts=attempt,
            )

        logger.error(f"Failed to generate a {level.value} puzzle in {self.config.max_attempts} attempts.")
        raise GenerationError(
            f"Could not generate a valid {level.value} puzzle after {self.config.max_attempts} attempts"
        )

    def _attempt(self, target: int):
        solution = empty_grid()
        if not solve(solution, randomize=True, rng=self.rng):
            logger.warning("Randomized solve of an empty grid failed.")
            return None

        puzzle = clone_grid(solution)
        removed = self._remove_cells(puzzle, target)
        if removed < target:
            logger.debug(f"Carved {removed}/{target} cells before uniqueness blocked further removals.")
        return self._validate(puzzle, solution)

    def _remove_cells(self, puzzle: Grid, target: int) -> int:
        """
        Blank cells of a solved grid in random order while the solution stays unique.

        Args:
            puzzle (Grid): Solved grid, carved in place.
            target (int): Number of cells to try to blank.

        Returns:
            int: Number of cells actually blanked.
        """
        positions = self.rng.permutation(CELL_COUNT).tolist()
        removed = 0
        for pos in positions:
            if removed >= target:
                break
            r, c = divmod(pos, GRID_SIZE)
            backup = puzzle[r][c]
            puzzle[r][c] = EMPTY
            if count_solutions(puzzle) == 1:
                removed += 1
            else:
                puzzle[r][c] = backup
        return removed

    def _validate(self, puzzle: Grid, solution: Grid):
        fresh = clone_grid(puzzle)
        if not solve(fresh):
            logger.warning("Carved puzzle has no solution.")
            return None
        if not SudokuJudge.is_complete(fresh):
            logger.warning("Carved puzzle solves to an invalid grid.")
            return None
        if count_solutions(puzzle) != 1:
            logger.warning("Carved puzzle does not have a unique solution.")
            return None
        if fresh != solution:
            logger.warning("Re-solved puzzle differs from the generated solution, using the re-solved one.")
            solution = fresh
        return puzzle, solution


def generate_puzzle(
    difficulty: Union[Difficulty, str, None] = Difficulty.MEDIUM,
    rng: Optional[np.random.Generator] = None,
    config: Optional[GeneratorConfig] = None,
) -> GeneratedPuzzle:
    """Generate one puzzle; see `PuzzleGenerator.generate`."""
    return PuzzleGenerator(config=config, rng=rng).generate(difficulty)
