"""Utility functions and constants for Galactic Wars."""

from .constants import (
    GRID_SIZE,
    HIT_PROBABILITY,
    MAX_PLAYERS,
    MIN_PLAYERS,
    SHIP_STATS,
    START_POSITIONS,
)
from .distance import chebyshev_distance
from .rng import GameRNG

__all__ = [
    "GRID_SIZE",
    "HIT_PROBABILITY",
    "MAX_PLAYERS",
    "MIN_PLAYERS",
    "SHIP_STATS",
    "START_POSITIONS",
    "chebyshev_distance",
    "GameRNG",
]
