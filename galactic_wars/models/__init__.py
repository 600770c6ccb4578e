"""Data models for Galactic Wars."""

from .game import Game
from .outcome import ErrorType, Outcome
from .player import Player, Resources
from .resource_location import ResourceLocation
from .ship import SHIP_TYPES, Ship, ShipStats

__all__ = [
    "SHIP_TYPES",
    "ErrorType",
    "Game",
    "Outcome",
    "Player",
    "ResourceLocation",
    "Resources",
    "Ship",
    "ShipStats",
]
