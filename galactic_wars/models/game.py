"""Game state container."""

from dataclasses import dataclass, field
from typing import List, Optional

from ..utils import GameRNG
from ..utils.constants import MAX_PLAYERS
from .player import Player
from .resource_location import ResourceLocation


@dataclass
class Game:
    """Aggregate root for one lobby's game.

    Holds the roster, the turn pointer, the resource map and the ship id
    counter. All rule functions operate on this state; it is only mutated
    through the engine's public operations.
    """

    resource_map: List[ResourceLocation] = field(default_factory=list)  # Fixed for the game
    players: List[Player] = field(default_factory=list)  # Join order
    current_player_index: int = 0
    game_started: bool = False
    next_ship_id: int = 1  # Monotonic, ids are never reused
    rng: Optional[GameRNG] = None

    def __post_init__(self):
        """Initialize RNG if not provided."""
        if self.rng is None:
            self.rng = GameRNG()
        if len(self.players) > MAX_PLAYERS:
            raise ValueError(f"Too many players: {len(self.players)} (max {MAX_PLAYERS})")

    def allocate_ship_id(self) -> int:
        ship_id = self.next_ship_id
        self.next_ship_id += 1
        return ship_id

    @property
    def current_player(self) -> Optional[Player]:
        if not self.players:
            return None
        return self.players[self.current_player_index]
