"""Ship construction and turn-start territory income.

Income is paid once each time a player becomes the current player: every
multi-square territory with at least one of that player's ships on any of
its squares adds its full bundle. Territories are not exclusive, so two
players holding different squares of the same planet both collect.
"""

import logging

from ..models.game import Game
from ..models.outcome import ErrorType, Outcome
from ..models.player import Player, Resources
from ..models.ship import SHIP_TYPES, Ship
from ..utils.serialization import serialize_ship

logger = logging.getLogger(__name__)


def build_ship(game: Game, ship_type: str) -> Outcome:
    """Spend materials to build a ship at the current player's start position.

    Args:
        game: Current game state
        ship_type: Catalog name of the ship to build

    Returns:
        Outcome with the new ship in the "ship" payload, or a failure
    """
    stats = SHIP_TYPES.get(ship_type)
    if stats is None:
        return Outcome.failure(ErrorType.UNKNOWN_SHIP_TYPE, f"Unknown ship type {ship_type}.")

    player = game.current_player
    if player is None:
        return Outcome.failure(ErrorType.NOT_STARTED, "Game not started yet.")

    if player.resources.materials < stats.cost:
        return Outcome.failure(
            ErrorType.INSUFFICIENT_MATERIALS,
            f"Not enough materials to build {ship_type} "
            f"(have {player.resources.materials}, need {stats.cost}).",
        )

    player.resources.materials -= stats.cost
    x, y = player.start_position
    ship = Ship.spawn(game.allocate_ship_id(), ship_type, x, y, player.id)
    player.ships.append(ship)

    logger.info(f"Player {player.id} built {ship_type} {ship.id} for {stats.cost} materials")

    return Outcome.success(f"Building {ship_type} (id={ship.id}).", ship=serialize_ship(ship))


def grant_turn_income(game: Game, player: Player) -> Resources:
    """Pay territory income to a player at the start of their turn.

    Args:
        game: Current game state
        player: Player whose turn is starting

    Returns:
        Total resources granted (all zero if no territory is held)
    """
    income = Resources()

    for location in game.resource_map:
        if not location.is_territory:
            continue
        if _occupies(player, location.squares):
            income.add(location.resources)

    player.resources.add(income)

    if income.materials or income.ammo or income.fuel:
        logger.debug(f"Player {player.id} income: {income}")

    return income


def _occupies(player: Player, squares) -> bool:
    occupied = {(ship.x, ship.y) for ship in player.ships}
    return any(square in occupied for square in squares)
