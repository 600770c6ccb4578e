"""Game-over detection.

The engine never ends a game by itself. Callers check these helpers after
an attack and apply their own policy (scoreboard, broadcast).
"""

from typing import List, Optional, Tuple

from ..models.game import Game
from ..models.player import Player


def alive_players(game: Game) -> List[Player]:
    """Return players that still have ships, in join order."""
    return [p for p in game.players if p.alive]


def check_game_over(game: Game) -> Tuple[bool, Optional[str]]:
    """Check whether at most one player remains alive.

    Args:
        game: Current game state

    Returns:
        Tuple of (game is over, winner name or None when nobody survived)
    """
    if not game.game_started:
        return False, None

    survivors = alive_players(game)
    if len(survivors) > 1:
        return False, None
    if survivors:
        return True, survivors[0].name
    return True, None
