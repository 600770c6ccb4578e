"""Roster and turn order: join, start and end turn."""

import logging

from ..models.game import Game
from ..models.outcome import ErrorType, Outcome
from ..models.player import Player
from ..models.ship import Ship
from ..utils.constants import (
    FALLBACK_START_POSITION,
    MAX_PLAYERS,
    MIN_PLAYERS,
    START_POSITIONS,
)
from ..utils.serialization import serialize_player
from .production import grant_turn_income

logger = logging.getLogger(__name__)


def join_player(game: Game, player_name: str) -> Outcome:
    """Add a player to the roster with a single Scout at their corner.

    Args:
        game: Current game state
        player_name: Display name for the new player

    Returns:
        Outcome with the created player in the "player" payload, or a failure
    """
    if len(game.players) >= MAX_PLAYERS:
        return Outcome.failure(
            ErrorType.CAPACITY_EXCEEDED, f"Max players reached ({MAX_PLAYERS})."
        )

    player_id = len(game.players) + 1
    if player_id <= len(START_POSITIONS):
        start = START_POSITIONS[player_id - 1]
    else:
        start = FALLBACK_START_POSITION

    player = Player(id=player_id, name=player_name, start_position=start)
    player.ships.append(Ship.spawn(game.allocate_ship_id(), "Scout", start[0], start[1], player_id))
    game.players.append(player)

    logger.info(f"Player {player_id} ({player_name}) joined at {start}")

    return Outcome.success(
        f"Player {player_name} joined the game!", player=serialize_player(player)
    )


def start_game(game: Game) -> Outcome:
    """Start the game and pay turn-start income to the first player."""
    if len(game.players) < MIN_PLAYERS:
        return Outcome.failure(
            ErrorType.INSUFFICIENT_PLAYERS,
            f"Need at least {MIN_PLAYERS} players to start (have {len(game.players)}).",
        )

    game.game_started = True
    grant_turn_income(game, game.current_player)

    logger.info(f"Game started with {len(game.players)} players")

    return Outcome.success(f"Game started. Player {game.current_player.id} goes first!")


def end_turn(game: Game) -> Outcome:
    """Pass the turn to the next alive player.

    Rotation wraps around the roster and skips eliminated players. The
    current player is a valid candidate after a full lap, so a lone
    survivor keeps the turn. State is left unchanged when nobody is alive.

    Args:
        game: Current game state

    Returns:
        Outcome naming the new current player, or a failure
    """
    if not game.game_started:
        return Outcome.failure(ErrorType.NOT_STARTED, "Game not started yet.")

    count = len(game.players)
    index = game.current_player_index
    for _ in range(count):
        index = (index + 1) % count
        if game.players[index].alive:
            break
    else:
        return Outcome.failure(ErrorType.NO_ALIVE_PLAYERS, "No alive players left, game ends!")

    game.current_player_index = index
    player = game.players[index]
    grant_turn_income(game, player)

    logger.debug(f"Turn passed to player {player.id}")

    return Outcome.success(f"It's now Player {player.id} ({player.name})'s turn.")
