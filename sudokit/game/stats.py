# -*- coding: utf-8 -*-
"""Player statistics kept across games, per difficulty and overall."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from omegaconf import OmegaConf

from sudokit.common.constants import Difficulty
from sudokit.utils.log import get_logger

logger = get_logger(__name__)


@dataclass
class DifficultyRecord:
    played: int = 0
    wins: int = 0
    # seconds, summed over won games only
    total_time: float = 0.0
    best_time: Optional[float] = None
    errors: int = 0

    @property
    def average_time(self) -> Optional[float]:
        return self.total_time / self.wins if self.wins else None

    def record_win(self, elapsed: float, errors: int) -> None:
        self.wins += 1
        self.total_time += elapsed
        self.best_time = elapsed if self.best_time is None else min(self.best_time, elapsed)
        self.errors += errors


def _default_difficulties() -> Dict[str, DifficultyRecord]:
    return {difficulty.value: DifficultyRecord() for difficulty in Difficulty}


@dataclass
class PlayerStats:
    """Started and won games, play time and errors, per difficulty and overall."""

    overall: DifficultyRecord = field(default_factory=DifficultyRecord)
    difficulties: Dict[str, DifficultyRecord] = field(default_factory=_default_difficulties)

    def record(self, difficulty: Union[Difficulty, str, None]) -> DifficultyRecord:
        """The record of `difficulty`; unrecognized names map to medium."""
        key = Difficulty.parse(difficulty).value
        if key not in self.difficulties:
            self.difficulties[key] = DifficultyRecord()
        return self.difficulties[key]

    @property
    def solved(self) -> int:
        return self.overall.wins

    @property
    def total_time(self) -> float:
        return self.overall.total_time

    def record_game_start(self, difficulty: Union[Difficulty, str, None]) -> None:
        self.record(difficulty).played += 1
        self.overall.played += 1

    def record_game_end(
        self, difficulty: Union[Difficulty, str, None], elapsed: float, errors: int
    ) -> None:
        """Count a won game that took `elapsed` seconds with `errors` wrong entries."""
        self.record(difficulty).record_win(elapsed, errors)
        self.overall.record_win(elapsed, errors)
        logger.debug(
            f"Recorded {Difficulty.parse(difficulty).value} win in {elapsed:.1f}s "
            f"with {errors} error(s)."
        )

    def save(self, path: str) -> None:
        """Save stats to a YAML file."""
        with open(path, "w", encoding="utf-8") as f:
            OmegaConf.save(self, f)


def load_stats(path: str) -> PlayerStats:
    """
    Load stats saved by `PlayerStats.save`.

    Missing files give empty stats; fields absent from the file keep their
    defaults, so files written before a difficulty existed still load.
    """
    if not os.path.exists(path):
        return PlayerStats()
    try:
        loaded = OmegaConf.load(path)
        stats = OmegaConf.merge(OmegaConf.structured(PlayerStats), loaded)
        return OmegaConf.to_object(stats)
    except Exception as e:
        raise ValueError(f"Invalid stats file {path}: {e}") from e
