"""
Gameplay module.

Provides a game session built on the generator, the reveal propagator
and the hint finder.
"""
from .game import Game, GameStatus

__all__ = [
    "Game",
    "GameStatus",
]
