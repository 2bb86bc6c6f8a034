from .selection import BaseChooser, REGISTRY, register, create_chooser, get_chooser_ids
from .session import GameConfig, GameSession, MAX_TURNS, normalise_dictionary

__all__ = [
    "GameConfig", "GameSession", "MAX_TURNS", "normalise_dictionary",
    "BaseChooser", "REGISTRY", "register", "create_chooser", "get_chooser_ids",
]
