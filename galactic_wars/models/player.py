"""Player data model."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..utils.constants import MAX_PLAYERS
from .ship import Ship


@dataclass
class Resources:
    """A stockpile or bundle of materials, ammo and fuel."""

    materials: int = 0
    ammo: int = 0
    fuel: int = 0

    def add(self, other: "Resources") -> None:
        """Add another bundle into this one in place."""
        self.materials += other.materials
        self.ammo += other.ammo
        self.fuel += other.fuel


@dataclass
class Player:
    """A participant in a lobby.

    Players are never removed from the roster. When the last ship is
    destroyed, alive flips to False and turn rotation skips them.
    """

    id: int  # 1-based join order
    name: str
    start_position: Tuple[int, int]  # Where built ships spawn
    resources: Resources = field(default_factory=Resources)
    ships: List[Ship] = field(default_factory=list)
    alive: bool = True

    def __post_init__(self):
        """Validate player data after initialization."""
        if not (1 <= self.id <= MAX_PLAYERS):
            raise ValueError(f"Invalid player id: {self.id} (must be 1-{MAX_PLAYERS})")

    def find_ship(self, ship_id) -> Optional[Ship]:
        """Return this player's ship with the given id, or None."""
        for ship in self.ships:
            if ship.id == ship_id:
                return ship
        return None

    def remove_ship(self, ship_id: int) -> None:
        self.ships = [s for s in self.ships if s.id != ship_id]
