# -*- coding: utf-8 -*-
"""Player-facing game session: turns player actions into board mutations, with undo/redo and stats."""
import time
from dataclasses import dataclass
from typing import Callable, Optional, Set, Union

import numpy as np

from sudokit.common.config import BoardConfig, GeneratorConfig
from sudokit.common.constants import EMPTY, Difficulty
from sudokit.common.grid import Cell, count_blanks
from sudokit.core.board import BoardSnapshot, Hint, SudokuBoard
from sudokit.core.generator import PuzzleGenerator
from sudokit.game.history import MoveHistory
from sudokit.game.stats import PlayerStats
from sudokit.utils.log import get_logger

logger = get_logger(__name__)

Clock = Callable[[], float]


@dataclass
class GameStats:
    moves: int = 0
    errors: int = 0


class GameSession:
    """
    One game in progress.

    The session:
    - Places or toggles notes depending on `notes_mode`
    - Entering the value a cell already holds clears it
    - Refuses digits whose nine cells are already solved
    - Auto-cleans peer notes and highlights conflicts according to `BoardConfig`
    - Counts moves, and errors (values differing from the solution)
    - Records a snapshot before every effective action for undo/redo
    - Times the game and reports a win to `player_stats` once solved
    """

    def __init__(
        self,
        board: SudokuBoard,
        config: Optional[BoardConfig] = None,
        difficulty: Union[Difficulty, str] = Difficulty.MEDIUM,
        player_stats: Optional[PlayerStats] = None,
        clock: Clock = time.monotonic,
    ):
        self.board = board
        self.config = config or BoardConfig()
        self.difficulty = Difficulty.parse(difficulty)
        self.history = MoveHistory(max_size=self.config.max_history)
        self.stats = GameStats()
        self.notes_mode = False
        self.player_stats = player_stats
        self._clock = clock
        self._started_at = clock()
        self._finished_at: Optional[float] = None
        if self.player_stats is not None:
            self.player_stats.record_game_start(self.difficulty)

    @classmethod
    def new_game(
        cls,
        difficulty: Union[Difficulty, str, None] = Difficulty.MEDIUM,
        config: Optional[BoardConfig] = None,
        generator_config: Optional[GeneratorConfig] = None,
        rng: Optional[np.random.Generator] = None,
        player_stats: Optional[PlayerStats] = None,
        clock: Clock = time.monotonic,
    ) -> "GameSession":
        """Generate a fresh puzzle and start a session on it. Propagates `GenerationError`."""
        generated = PuzzleGenerator(config=generator_config, rng=rng).generate(difficulty)
        logger.info(
            f"New {generated.difficulty.value} game with {generated.blanks} blanks "
            f"({generated.attempts} attempt(s))."
        )
        board = SudokuBoard(generated.puzzle, generated.solution)
        return cls(
            board,
            config=config,
            difficulty=generated.difficulty,
            player_stats=player_stats,
            clock=clock,
        )

    @property
    def finished(self) -> bool:
        return self._finished_at is not None

    def elapsed(self) -> float:
        """Seconds since the game started, frozen once it is solved."""
        end = self._finished_at if self._finished_at is not None else self._clock()
        return end - self._started_at

    def enter(self, row: int, col: int, value: int) -> bool:
        """
        Apply the player's digit to a cell.

        Args:
            row (int): Row index.
            col (int): Column index.
            value (int): Digit 1..9, or 0 to clear the cell.

        Returns:
            bool: Whether the board changed.
        """
        if self.finished or self.board.is_given(row, col):
            return False
        if value == EMPTY:
            return self.clear_cell(row, col)
        if value in self.board.completed_digits():
            logger.debug(f"Digit {value} is already complete")
            return False
        before = self.board.snapshot()
        if self.notes_mode:
            self.board.toggle_note(row, col, value)
        elif self.board.get_value(row, col) == value:
            self.board.clear_value(row, col)
        else:
            self.board.set_value(row, col, value)
            if self.board.get_value(row, col) == value:
                if self.config.auto_clean_notes:
                    self.board.clear_notes_in_peers(row, col, value)
                if value != self.board.solution[row][col]:
                    self.stats.errors += 1
        changed = self._commit(before, count_move=not self.notes_mode)
        if changed and self.board.is_solved():
            self._finish()
        return changed

    def clear_cell(self, row: int, col: int) -> bool:
        if self.finished or self.board.is_given(row, col):
            return False
        before = self.board.snapshot()
        self.board.clear_value(row, col)
        return self._commit(before)

    def _commit(self, before: BoardSnapshot, count_move: bool = True) -> bool:
        if self.board.snapshot() == before:
            return False
        if count_move:
            self.stats.moves += 1
        self.history.push(before)
        return True

    def _finish(self) -> None:
        self._finished_at = self._clock()
        elapsed = self.elapsed()
        logger.info(
            f"Solved {self.difficulty.value} game in {elapsed:.0f}s, "
            f"{self.stats.moves} move(s), {self.stats.errors} error(s)."
        )
        if self.player_stats is not None:
            self.player_stats.record_game_end(self.difficulty, elapsed, self.stats.errors)

    def undo(self) -> bool:
        if self.finished:
            return False
        previous = self.history.undo(self.board.snapshot())
        if previous is None:
            logger.debug("Nothing to undo")
            return False
        self.board.restore(previous)
        return True

    def redo(self) -> bool:
        if self.finished:
            return False
        following = self.history.redo(self.board.snapshot())
        if following is None:
            logger.debug("Nothing to redo")
            return False
        self.board.restore(following)
        return True

    def restart(self) -> None:
        """Back to the puzzle with a fresh timer; does not count as a new game."""
        self.board.reset_to_puzzle()
        self.history.clear()
        self.stats = GameStats()
        self.notes_mode = False
        self._started_at = self._clock()
        self._finished_at = None

    def hint(self) -> Optional[Hint]:
        return self.board.find_hint()

    def conflicts(self) -> Set[Cell]:
        if not self.config.conflict_highlight:
            return set()
        return self.board.compute_conflicts()

    def completed_digits(self) -> Set[int]:
        return self.board.completed_digits()

    def is_solved(self) -> bool:
        return self.board.is_solved()

    def blanks_left(self) -> int:
        return count_blanks(self.board.grid)
