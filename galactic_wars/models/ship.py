"""Ship catalog and ship data model."""

from dataclasses import dataclass

from ..utils.constants import SHIP_STATS


@dataclass(frozen=True)
class ShipStats:
    """Static stats for one ship type.

    Entries are immutable and shared by every ship of that type.
    """

    name: str
    health: int
    attack: int
    range: int
    speed: int
    cost: int
    ammo: int
    fuel: int


SHIP_TYPES: dict[str, ShipStats] = {
    name: ShipStats(name=name, **stats) for name, stats in SHIP_STATS.items()
}


@dataclass
class Ship:
    """A single ship on the grid.

    Ships are owned by exactly one player. Health, ammo and fuel start at
    the type's values and are spent during play; position may lie outside
    the grid because moves are not bounds-checked.
    """

    id: int  # Unique within a game, never reused
    type: str  # Key into SHIP_TYPES
    x: int
    y: int
    owner_id: int  # Player id (1-based)
    health: int
    ammo: int
    fuel: int

    def __post_init__(self):
        """Validate ship data after initialization."""
        if self.type not in SHIP_TYPES:
            raise ValueError(f"Invalid ship type: {self.type}")
        if self.id <= 0:
            raise ValueError(f"Invalid ship id: {self.id} (must be > 0)")

    @property
    def stats(self) -> ShipStats:
        return SHIP_TYPES[self.type]

    @classmethod
    def spawn(cls, ship_id: int, ship_type: str, x: int, y: int, owner_id: int) -> "Ship":
        """Create a ship with full health, ammo and fuel for its type."""
        stats = SHIP_TYPES[ship_type]
        return cls(
            id=ship_id,
            type=ship_type,
            x=x,
            y=y,
            owner_id=owner_id,
            health=stats.health,
            ammo=stats.ammo,
            fuel=stats.fuel,
        )
