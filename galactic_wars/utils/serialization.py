"""Game state projection to JSON-compatible dictionaries.

The snapshot is what viewers render. It is built fresh on every call and
shares no mutable structure with the live game, so it cannot be used to
modify state.
"""

from typing import Any

from ..models.game import Game
from ..models.player import Player, Resources
from ..models.resource_location import ResourceLocation
from ..models.ship import Ship


def serialize_state(game: Game) -> dict[str, Any]:
    """Build the read-only snapshot of a game.

    Args:
        game: Game to project

    Returns:
        Dictionary with players, resourceMap, currentPlayerIndex, gameStarted
    """
    return {
        "players": [serialize_player(p) for p in game.players],
        "resourceMap": [_serialize_location(loc) for loc in game.resource_map],
        "currentPlayerIndex": game.current_player_index,
        "gameStarted": game.game_started,
    }


def serialize_player(player: Player) -> dict[str, Any]:
    """Convert Player to dict."""
    return {
        "id": player.id,
        "name": player.name,
        "resources": _serialize_resources(player.resources),
        "ships": [serialize_ship(s) for s in player.ships],
        "alive": player.alive,
        "startPosition": {"x": player.start_position[0], "y": player.start_position[1]},
    }


def serialize_ship(ship: Ship) -> dict[str, Any]:
    """Convert Ship to dict."""
    return {
        "id": ship.id,
        "type": ship.type,
        "x": ship.x,
        "y": ship.y,
        "ownerId": ship.owner_id,
        "health": ship.health,
        "ammo": ship.ammo,
        "fuel": ship.fuel,
    }


def _serialize_resources(resources: Resources) -> dict[str, int]:
    return {
        "materials": resources.materials,
        "ammo": resources.ammo,
        "fuel": resources.fuel,
    }


def _serialize_location(location: ResourceLocation) -> dict[str, Any]:
    """Convert ResourceLocation to dict, omitting unset optional fields."""
    data: dict[str, Any] = {
        "name": location.name,
        "squares": [[x, y] for x, y in location.squares],
        "multiSquare": location.multi_square,
    }
    if location.resources is not None:
        data["resources"] = _serialize_resources(location.resources)
    if location.recruit_as is not None:
        data["recruitAs"] = location.recruit_as
    return data
