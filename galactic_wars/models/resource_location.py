"""Resource and recruit locations on the map."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .player import Resources
from .ship import SHIP_TYPES


@dataclass
class ResourceLocation:
    """A named set of squares with an effect on ships that reach them.

    Three kinds exist:
    - Pickup: single square with resources, paid out on arrival.
    - Territory: multi-square with resources, paid out at turn start to
      every player occupying any of its squares.
    - Recruit site: recruit_as set, grants a free ship to a player whose
      ship ends a move next to it.
    """

    name: str
    squares: List[Tuple[int, int]]
    resources: Optional[Resources] = None
    recruit_as: Optional[str] = None
    multi_square: bool = False

    def __post_init__(self):
        """Validate location data after initialization."""
        if not self.squares:
            raise ValueError(f"Location {self.name} has no squares")
        if self.recruit_as is not None and self.recruit_as not in SHIP_TYPES:
            raise ValueError(f"Invalid recruit type: {self.recruit_as}")

    @property
    def is_recruit_site(self) -> bool:
        return self.recruit_as is not None

    @property
    def is_territory(self) -> bool:
        return self.multi_square and self.resources is not None

    @property
    def is_pickup(self) -> bool:
        return not self.multi_square and self.resources is not None and not self.is_recruit_site

    def covers(self, x: int, y: int) -> bool:
        """Check whether (x, y) is one of this location's squares."""
        return (x, y) in self.squares
