"""
Sample originator: a game whose progress can be saved into named slots.
"""

from .models import Game, GameState
from .system import GameSystem

__all__ = ["Game", "GameState", "GameSystem"]
