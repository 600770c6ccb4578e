"""In-memory record of finished games."""

import logging
import time
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)

NO_WINNER = "nobody"


@dataclass
class ScoreEntry:
    """One finished game."""

    lobby_id: str
    winner: str
    date: int  # Epoch milliseconds


class Scoreboard:
    """Append-only list of finished games.

    In-memory storage; entries are lost on restart.
    """

    def __init__(self):
        self._entries: List[ScoreEntry] = []

    def record(self, lobby_id: str, winner: Optional[str]) -> ScoreEntry:
        """Append a finished game.

        Args:
            lobby_id: Lobby the game was played in
            winner: Winning player's name, or None if nobody survived

        Returns:
            The stored entry
        """
        entry = ScoreEntry(
            lobby_id=lobby_id,
            winner=winner if winner is not None else NO_WINNER,
            date=int(time.time() * 1000),
        )
        self._entries.append(entry)
        logger.info(f"Recorded result for lobby {lobby_id}: winner = {entry.winner}")
        return entry

    def entries(self) -> List[ScoreEntry]:
        return list(self._entries)

    def to_list(self) -> List[dict]:
        return [
            {"lobbyId": e.lobby_id, "winner": e.winner, "date": e.date}
            for e in self._entries
        ]

    def __len__(self) -> int:
        return len(self._entries)
