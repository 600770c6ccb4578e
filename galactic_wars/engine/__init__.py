"""Game engine components."""

from .game_engine import GameEngine
from .resource_generator import generate_resource_map
from .victory import alive_players, check_game_over

__all__ = [
    "GameEngine",
    "alive_players",
    "check_game_over",
    "generate_resource_map",
]
