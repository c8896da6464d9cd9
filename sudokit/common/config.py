# -*- coding: utf-8 -*-
"""Configs for puzzle generation and play."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from omegaconf import OmegaConf

from sudokit.common.constants import (
    CELL_COUNT,
    DEFAULT_REMOVAL_TARGETS,
    MAX_GENERATION_ATTEMPTS,
    MAX_HISTORY_SIZE,
    Difficulty,
)
from sudokit.utils.log import get_logger

logger = get_logger(__name__)


@dataclass
class GeneratorConfig:
    """Configuration for puzzle generation"""

    # unrecognized names fall back to "medium"
    difficulty: str = Difficulty.MEDIUM.value
    max_attempts: int = MAX_GENERATION_ATTEMPTS
    # if None, every run draws fresh entropy
    seed: Optional[int] = None
    # number of cells the carver tries to blank, per difficulty
    removal_targets: Dict[str, int] = field(
        default_factory=lambda: dict(DEFAULT_REMOVAL_TARGETS)
    )

    def removal_target(self, difficulty: Difficulty) -> int:
        target = self.removal_targets.get(
            difficulty.value, DEFAULT_REMOVAL_TARGETS[difficulty.value]
        )
        return max(0, min(int(target), CELL_COUNT))


@dataclass
class BoardConfig:
    """Player-facing behavior of a game session."""

    # drop a placed digit from the notes of its peers
    auto_clean_notes: bool = True
    # when False, sessions report no conflicts
    conflict_highlight: bool = True
    max_history: int = MAX_HISTORY_SIZE


@dataclass
class Config:
    """Global Configuration"""

    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    board: BoardConfig = field(default_factory=BoardConfig)
    log_level: str = "INFO"

    def _check_generator(self) -> None:
        gen = self.generator
        if gen.max_attempts < 1:
            raise ValueError(f"generator.max_attempts must be >= 1, got {gen.max_attempts}")
        # keys may use any case or an alias; later entries win
        targets = {}
        for name, target in gen.removal_targets.items():
            try:
                key = Difficulty[str(name).strip()].value
            except KeyError:
                raise ValueError(f"Unknown difficulty in generator.removal_targets: {name}")
            if not 0 <= target <= CELL_COUNT:
                raise ValueError(
                    f"generator.removal_targets.{name} must be in [0, {CELL_COUNT}], got {target}"
                )
            targets[key] = target
        gen.removal_targets = targets
        parsed = Difficulty.parse(gen.difficulty)
        if parsed.value != str(gen.difficulty).lower():
            logger.warning(
                f"Unrecognized difficulty `{gen.difficulty}`, falling back to `{parsed.value}`."
            )
        gen.difficulty = parsed.value

    def check_and_update(self) -> Config:
        """Check and update the config."""
        self._check_generator()

        if self.board.max_history < 0:
            raise ValueError(f"board.max_history must be >= 0, got {self.board.max_history}")

        self.log_level = self.log_level.upper()
        if self.log_level not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError(f"Invalid log_level: {self.log_level}")
        return self


def load_config(config_path: str) -> Config:
    """Load the configuration from the given path."""
    schema = OmegaConf.structured(Config)
    try:
        yaml_config = OmegaConf.load(config_path)
        config = OmegaConf.merge(schema, yaml_config)
        return OmegaConf.to_object(config)
    except Exception as e:
        raise ValueError(f"Invalid configuration: {e}") from e
