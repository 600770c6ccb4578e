"""Resource map generation: central planet plus randomized sites."""

from typing import List, Tuple

from ..models.player import Resources
from ..models.resource_location import ResourceLocation
from ..utils import GRID_SIZE, GameRNG
from ..utils.constants import (
    NUM_PICKUP_SITES,
    NUM_RECRUIT_SITES,
    PICKUP_RESOURCES,
    PLANET_NAME,
    PLANET_RANGE,
    PLANET_RESOURCES,
    RECRUIT_SHIP_TYPE,
)


def generate_resource_map(rng: GameRNG) -> List[ResourceLocation]:
    """Generate a fresh resource map for one game.

    Layout:
    1. One fixed 4x4 planet covering rows/cols 9-12, paying
       5 materials, 5 ammo and 5 fuel per controlling turn start
    2. Five single-square recruit sites ("Lost Warrior 1".."5") placed
       uniformly on [1, 20] x [1, 20]
    3. Five single-square pickups ("Random Spot #1".."#5") granting
       2 materials each, placed the same way

    Random squares may collide with each other or with the planet; stacked
    sites simply stack their effects.

    Args:
        rng: Random source for site placement

    Returns:
        New list of ResourceLocation objects, not shared with any other game
    """
    locations: List[ResourceLocation] = [_central_planet()]

    for i in range(1, NUM_RECRUIT_SITES + 1):
        locations.append(
            ResourceLocation(
                name=f"Lost Warrior {i}",
                squares=[_random_square(rng)],
                recruit_as=RECRUIT_SHIP_TYPE,
            )
        )

    for i in range(1, NUM_PICKUP_SITES + 1):
        locations.append(
            ResourceLocation(
                name=f"Random Spot #{i}",
                squares=[_random_square(rng)],
                resources=Resources(**PICKUP_RESOURCES),
                multi_square=False,
            )
        )

    return locations


def _central_planet() -> ResourceLocation:
    low, high = PLANET_RANGE
    squares = [(x, y) for x in range(low, high + 1) for y in range(low, high + 1)]
    return ResourceLocation(
        name=PLANET_NAME,
        squares=squares,
        resources=Resources(**PLANET_RESOURCES),
        multi_square=True,
    )


def _random_square(rng: GameRNG) -> Tuple[int, int]:
    return (rng.randint(1, GRID_SIZE), rng.randint(1, GRID_SIZE))
