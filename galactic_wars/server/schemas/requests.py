"""Pydantic request schemas for API endpoints."""

from pydantic import BaseModel, Field


class JoinLobbyRequest(BaseModel):
    """Request to join a lobby over HTTP."""

    playerName: str = Field(  # noqa: N815
        min_length=1, description="Display name for the new player"
    )
