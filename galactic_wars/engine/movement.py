"""Ship movement, resource pickup and recruitment.

A move is validated completely before any state changes:
1. Game must be started
2. Ship must belong to the current player
3. Chebyshev distance must not exceed the ship's speed
4. Non-Scout ships must carry at least `distance` fuel

After the ship is relocated, pickups on the destination square are paid
out first, then every recruit site within one square grants a free ship.
"""

import logging
from typing import List

from ..models.game import Game
from ..models.outcome import ErrorType, Outcome
from ..models.player import Player
from ..models.ship import Ship
from ..utils.constants import FUEL_EXEMPT_TYPE, RECRUIT_RADIUS
from ..utils.distance import chebyshev_distance

logger = logging.getLogger(__name__)


def move_ship(game: Game, ship_id, target_x: int, target_y: int) -> Outcome:
    """Move one of the current player's ships.

    Args:
        game: Current game state
        ship_id: Id of the ship to move
        target_x: Destination x coordinate
        target_y: Destination y coordinate

    Returns:
        Outcome with the move message (plus pickup/recruit notes), or a failure
    """
    if not game.game_started:
        return Outcome.failure(ErrorType.NOT_STARTED, "Game not started yet.")

    player = game.current_player
    ship = player.find_ship(ship_id)
    if ship is None:
        return Outcome.failure(
            ErrorType.SHIP_NOT_FOUND, f"No ship with id {ship_id} for current player."
        )

    stats = ship.stats
    distance = chebyshev_distance(ship.x, ship.y, target_x, target_y)

    if distance > stats.speed:
        return Outcome.failure(
            ErrorType.SPEED_EXCEEDED,
            f"Cannot move ship {ship_id} {distance} squares (speed {stats.speed}).",
        )

    if ship.type != FUEL_EXEMPT_TYPE:
        if ship.fuel < distance:
            return Outcome.failure(
                ErrorType.INSUFFICIENT_FUEL,
                f"Not enough fuel ({ship.fuel}) to move ship {ship_id} {distance} squares.",
            )
        ship.fuel -= distance

    ship.x = target_x
    ship.y = target_y

    fragments = [f"Ship {ship_id} moved to ({target_x},{target_y})."]
    fragments.extend(_collect_pickups(game, ship, player))
    recruits = _recruit_nearby(game, ship, player)
    fragments.extend(recruits)

    logger.debug(
        f"Player {player.id} moved ship {ship_id} to ({target_x},{target_y}), "
        f"distance {distance}, {len(recruits)} recruit(s)"
    )

    return Outcome.success(" ".join(fragments))


def _collect_pickups(game: Game, ship: Ship, player: Player) -> List[str]:
    """Pay out every single-square pickup on the ship's square.

    Pickups are not consumed; returning to the square pays again.
    """
    notes = []
    for location in game.resource_map:
        if not location.is_pickup:
            continue
        if location.covers(ship.x, ship.y):
            player.resources.add(location.resources)
            notes.append(f"Picked up resources from {location.name}.")
    return notes


def _recruit_nearby(game: Game, ship: Ship, player: Player) -> List[str]:
    """Grant a free ship for each recruit site within reach of the ship.

    Recruited ships appear on the mover's square and cost no materials.
    """
    notes = []
    for location in game.resource_map:
        if not location.is_recruit_site:
            continue
        for lx, ly in location.squares:
            if chebyshev_distance(ship.x, ship.y, lx, ly) > RECRUIT_RADIUS:
                continue
            recruit = Ship.spawn(
                game.allocate_ship_id(), location.recruit_as, ship.x, ship.y, player.id
            )
            player.ships.append(recruit)
            notes.append(
                f"{location.name} at ({lx},{ly}) recruited as "
                f"{location.recruit_as} (id={recruit.id})!"
            )
            logger.info(f"Player {player.id} recruited {location.recruit_as} {recruit.id}")
    return notes
