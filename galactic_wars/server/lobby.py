"""Lobby directory: one engine plus its viewers per lobby."""

import asyncio
import logging
import uuid
from dataclasses import dataclass, field
from typing import Optional

from fastapi import WebSocket

from ..engine import GameEngine
from ..utils import GameRNG

logger = logging.getLogger(__name__)


@dataclass
class Lobby:
    """One independent game session.

    The lock serializes every command for this lobby so two connections can
    never mutate the same engine at once. Different lobbies share nothing.
    """

    id: str
    engine: GameEngine
    viewers: set[WebSocket] = field(default_factory=set)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    finished: bool = False
    winner: Optional[str] = None

    def get_state(self) -> dict:
        return self.engine.get_state()

    async def broadcast(self, message: dict):
        """Send message to every viewer of this lobby.

        Viewers whose send fails are dropped.

        Args:
            message: Dictionary to send as JSON
        """
        disconnected = []
        for ws in list(self.viewers):
            try:
                await ws.send_json(message)
            except Exception as e:
                logger.warning(f"Failed to send to WebSocket in lobby {self.id}: {e}")
                disconnected.append(ws)

        for ws in disconnected:
            self.viewers.discard(ws)

    def add_viewer(self, websocket: WebSocket):
        self.viewers.add(websocket)
        logger.info(f"WebSocket connected to lobby {self.id}, total: {len(self.viewers)}")

    def remove_viewer(self, websocket: WebSocket):
        if websocket in self.viewers:
            self.viewers.discard(websocket)
            logger.info(
                f"WebSocket disconnected from lobby {self.id}, remaining: {len(self.viewers)}"
            )


class LobbyDirectory:
    """Maps lobby ids to lobbies.

    In-memory storage. Lobbies are created on demand and kept for the life
    of the process.
    """

    def __init__(self):
        self.lobbies: dict[str, Lobby] = {}

    def create(self, seed: int | None = None) -> Lobby:
        """Create a lobby with a fresh engine and resource map.

        Args:
            seed: Optional RNG seed for a reproducible map and combat rolls

        Returns:
            Newly created Lobby
        """
        lobby_id = str(uuid.uuid4())
        lobby = Lobby(id=lobby_id, engine=GameEngine(rng=GameRNG(seed)))
        self.lobbies[lobby_id] = lobby
        logger.info(f"Created lobby {lobby_id}")
        return lobby

    def get(self, lobby_id: str) -> Lobby | None:
        return self.lobbies.get(lobby_id)

    def list_ids(self) -> list[str]:
        return list(self.lobbies)

    def delete(self, lobby_id: str) -> bool:
        """Delete a lobby.

        Returns:
            True if deleted, False if not found
        """
        if lobby_id in self.lobbies:
            del self.lobbies[lobby_id]
            logger.info(f"Deleted lobby {lobby_id}")
            return True
        return False

    def __len__(self) -> int:
        return len(self.lobbies)
