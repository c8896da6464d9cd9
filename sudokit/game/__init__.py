# -*- coding: utf-8 -*-
"""Game session module"""
from sudokit.game.history import MoveHistory
from sudokit.game.session import GameSession, GameStats
from sudokit.game.stats import DifficultyRecord, PlayerStats, load_stats

__all__ = [
    "DifficultyRecord",
    "GameSession",
    "GameStats",
    "MoveHistory",
    "PlayerStats",
    "load_stats",
]
