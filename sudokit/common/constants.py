# -*- coding: utf-8 -*-
"""Constants."""
from enum import Enum, EnumMeta

# grid geometry

GRID_SIZE = 9
BOX_SIZE = 3
CELL_COUNT = GRID_SIZE * GRID_SIZE
EMPTY = 0
DIGITS = tuple(range(1, GRID_SIZE + 1))

# generation / play limits

MAX_GENERATION_ATTEMPTS = 8
MAX_HISTORY_SIZE = 200
SOLUTION_COUNT_LIMIT = 2  # uniqueness only needs to tell 1 from "more than 1"

# sudokit env var names
LOG_LEVEL_ENV_VAR = "SUDOKIT_LOG_LEVEL"  # global log level


# enumerate types


class CaseInsensitiveEnumMeta(EnumMeta):
    name_aliases = {}

    def __getitem__(cls, name):
        name = cls.name_aliases.get(name.lower(), name)
        return super().__getitem__(name.upper())

    def __getattr__(cls, name):
        if not name.startswith("_"):
            return cls[name.upper()]
        return super().__getattr__(name)

    def __call__(cls, value, *args, **kwargs):
        value = cls.name_aliases.get(value.lower(), value)
        return super().__call__(value.lower(), *args, **kwargs)


class CaseInsensitiveEnum(Enum, metaclass=CaseInsensitiveEnumMeta):
    pass


class DifficultyEnumMeta(CaseInsensitiveEnumMeta):
    name_aliases = {
        "normal": "medium",
        "evil": "expert",
    }


class Difficulty(CaseInsensitiveEnum, metaclass=DifficultyEnumMeta):
    """Puzzle difficulty. Only controls how many cells the generator tries to blank."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"

    @classmethod
    def parse(cls, value) -> "Difficulty":
        """Parse `value` leniently; anything unrecognized falls back to `MEDIUM`."""
        if isinstance(value, Difficulty):
            return value
        if not isinstance(value, str):
            return cls.MEDIUM
        try:
            return cls(value.strip())
        except ValueError:
            return cls.MEDIUM


DEFAULT_REMOVAL_TARGETS = {
    Difficulty.EASY.value: 45,
    Difficulty.MEDIUM.value: 55,
    Difficulty.HARD.value: 62,
    Difficulty.EXPERT.value: 70,
}


class SearchSignal(Enum):
    """Termination signal threaded through the backtracking search."""

    CONTINUE = "continue"  # keep looking for further completions
    STOP = "stop"  # unwind the whole search immediately
