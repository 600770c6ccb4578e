"""Pydantic response schemas for API endpoints."""

from pydantic import BaseModel


class CreateLobbyResponse(BaseModel):
    """Response after creating a new lobby."""

    lobbyId: str  # noqa: N815


class JoinLobbyResponse(BaseModel):
    """Response after joining a lobby over HTTP."""

    ok: bool
    message: str
    player: dict


class LobbyListResponse(BaseModel):
    """Ids of all active lobbies."""

    lobbies: list[str]


class GameStateResponse(BaseModel):
    """Read-only snapshot of a lobby's game."""

    players: list[dict]
    resourceMap: list[dict]  # noqa: N815
    currentPlayerIndex: int  # noqa: N815
    gameStarted: bool  # noqa: N815


class ScoreEntryResponse(BaseModel):
    """One finished game."""

    lobbyId: str  # noqa: N815
    winner: str
    date: int
