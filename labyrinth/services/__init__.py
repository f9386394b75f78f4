# Services module
from .game_service import GameSession

__all__ = ["GameSession"]
