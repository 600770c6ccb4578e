"""Authoritative game engine for one lobby.

GameEngine is the only owner of mutable game truth. Each public operation
validates, mutates and returns an Outcome; none of them raise for rule
violations and none of them perform I/O. Callers must serialize access to
a single engine (one command at a time per lobby).
"""

import logging
from typing import List, Optional

from ..models.game import Game
from ..models.outcome import Outcome
from ..models.player import Player
from ..models.resource_location import ResourceLocation
from ..utils import GameRNG
from ..utils.serialization import serialize_state
from . import combat, movement, production, turns, victory
from .resource_generator import generate_resource_map

logger = logging.getLogger(__name__)


class GameEngine:
    """Facade over the rule modules for a single game."""

    def __init__(
        self,
        rng: Optional[GameRNG] = None,
        resource_map: Optional[List[ResourceLocation]] = None,
    ):
        """Create a game with a freshly generated resource map.

        Args:
            rng: Random source for map generation and combat (OS entropy if None)
            resource_map: Explicit map to use instead of generating one
        """
        rng = rng or GameRNG()
        if resource_map is None:
            resource_map = generate_resource_map(rng)
        self.game = Game(resource_map=resource_map, rng=rng)
        logger.debug(f"Created game with {len(resource_map)} resource locations")

    def join(self, player_name: str) -> Outcome:
        return turns.join_player(self.game, player_name)

    def start(self) -> Outcome:
        return turns.start_game(self.game)

    def move_ship(self, ship_id, target_x: int, target_y: int) -> Outcome:
        return movement.move_ship(self.game, ship_id, target_x, target_y)

    def attack_ship(self, ship_id, target_ship_id) -> Outcome:
        return combat.attack_ship(self.game, ship_id, target_ship_id)

    def build_ship(self, ship_type: str) -> Outcome:
        return production.build_ship(self.game, ship_type)

    def end_turn(self) -> Outcome:
        return turns.end_turn(self.game)

    def current_player(self) -> Optional[Player]:
        return self.game.current_player

    def alive_players(self) -> List[Player]:
        return victory.alive_players(self.game)

    def get_state(self) -> dict:
        """Return a read-only snapshot for rendering."""
        return serialize_state(self.game)
