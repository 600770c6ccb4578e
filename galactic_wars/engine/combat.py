"""Ship-to-ship combat.

Attack resolution:
1. Attacker must belong to the current player and carry ammo
2. Target is looked up across every fleet, including the attacker's own
3. Target's owner must still be alive
4. Chebyshev distance must be within the attacker's range
5. One ammo is spent, then a coin flip decides hit or miss
6. A hit subtracts the attacker's attack stat from target health; at
   zero or below the ship is removed, and an emptied fleet eliminates
   its owner
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..models.game import Game
from ..models.outcome import ErrorType, Outcome
from ..models.player import Player
from ..models.ship import Ship
from ..utils.constants import HIT_PROBABILITY
from ..utils.distance import chebyshev_distance

logger = logging.getLogger(__name__)


@dataclass
class AttackResult:
    """Record of a resolved attack.

    Attributes:
        attacker_id: Id of the firing ship
        target_id: Id of the target ship
        hit: Whether the shot landed
        damage: Health removed from the target (0 on a miss)
        destroyed: Whether the target ship was removed
        eliminated: Name of the player eliminated by this attack, if any
    """

    attacker_id: int
    target_id: int
    hit: bool
    damage: int
    destroyed: bool
    eliminated: Optional[str]

    def to_dict(self) -> dict:
        return {
            "attackerId": self.attacker_id,
            "targetId": self.target_id,
            "hit": self.hit,
            "damage": self.damage,
            "destroyed": self.destroyed,
            "eliminated": self.eliminated,
        }


def attack_ship(game: Game, ship_id, target_id) -> Outcome:
    """Fire one of the current player's ships at any ship on the board.

    Args:
        game: Current game state
        ship_id: Id of the attacking ship
        target_id: Id of the target ship

    Returns:
        Outcome with the hit/miss message and an "attack" payload, or a failure
    """
    if not game.game_started:
        return Outcome.failure(ErrorType.NOT_STARTED, "Game not started yet.")

    player = game.current_player
    ship = player.find_ship(ship_id)
    if ship is None:
        return Outcome.failure(
            ErrorType.SHIP_NOT_FOUND, f"No ship with id {ship_id} for current player."
        )
    if ship.ammo <= 0:
        return Outcome.failure(ErrorType.NO_AMMO, f"No ammo left on ship {ship_id}.")

    target, target_owner = _find_target(game, target_id)
    if target is None:
        return Outcome.failure(ErrorType.TARGET_NOT_FOUND, f"No target with id {target_id}.")
    if not target_owner.alive:
        return Outcome.failure(
            ErrorType.TARGET_ELIMINATED,
            f"Target {target_id} belongs to eliminated player {target_owner.name}.",
        )

    stats = ship.stats
    distance = chebyshev_distance(ship.x, ship.y, target.x, target.y)
    if distance > stats.range:
        return Outcome.failure(
            ErrorType.OUT_OF_RANGE,
            f"Target {target_id} is out of range (distance {distance}, range {stats.range}).",
        )

    # Ammo is spent on every range-valid attempt, hit or miss
    ship.ammo -= 1

    if not game.rng.coin_flip(HIT_PROBABILITY):
        result = AttackResult(ship_id, target_id, hit=False, damage=0, destroyed=False, eliminated=None)
        return Outcome.success(
            f"Attack from ship {ship_id} on {target_id} MISSED!", attack=result.to_dict()
        )

    target.health -= stats.attack
    message = f"Attack from ship {ship_id} on {target_id} HIT for {stats.attack} damage."
    destroyed = False
    eliminated = None

    if target.health <= 0:
        destroyed = True
        message += f" Ship {target_id} destroyed!"
        target_owner.remove_ship(target.id)
        logger.info(f"Ship {target_id} of player {target_owner.id} destroyed by ship {ship_id}")

        if not target_owner.ships:
            target_owner.alive = False
            eliminated = target_owner.name
            message += f" Player {target_owner.name} has no ships left and is eliminated!"
            logger.info(f"Player {target_owner.id} ({target_owner.name}) eliminated")

    result = AttackResult(
        ship_id, target_id, hit=True, damage=stats.attack, destroyed=destroyed, eliminated=eliminated
    )
    return Outcome.success(message, attack=result.to_dict())


def _find_target(game: Game, target_id) -> Tuple[Optional[Ship], Optional[Player]]:
    for player in game.players:
        ship = player.find_ship(target_id)
        if ship is not None:
            return ship, player
    return None, None
