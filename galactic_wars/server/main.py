"""FastAPI server for Galactic Wars.

Provides HTTP endpoints for lobby management and the scoreboard, and a
WebSocket endpoint per lobby through which players send text commands and
receive broadcast results.
"""

import html
import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from .dispatcher import CommandDispatcher
from .lobby import LobbyDirectory
from .schemas.requests import JoinLobbyRequest
from .schemas.responses import (
    CreateLobbyResponse,
    GameStateResponse,
    JoinLobbyResponse,
    LobbyListResponse,
    ScoreEntryResponse,
)
from .scoreboard import Scoreboard

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

WELCOME_MESSAGE = 'Welcome to Galactic Wars! Type "help" for command info.'


def create_app(
    lobbies: LobbyDirectory | None = None, scoreboard: Scoreboard | None = None
) -> FastAPI:
    """Build the application around a lobby directory and scoreboard.

    Args:
        lobbies: Lobby directory to serve (new empty one if None)
        scoreboard: Scoreboard for finished games (new empty one if None)

    Returns:
        Configured FastAPI application
    """
    lobbies = lobbies if lobbies is not None else LobbyDirectory()
    scoreboard = scoreboard if scoreboard is not None else Scoreboard()
    dispatcher = CommandDispatcher(scoreboard)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager for startup/shutdown."""
        logger.info("Galactic Wars server starting...")
        yield
        logger.info(f"Galactic Wars server shutting down with {len(lobbies)} lobbies")

    app = FastAPI(
        title="Galactic Wars API",
        description="Lobbies, commands and scoreboard for Galactic Wars",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.lobbies = lobbies
    app.state.scoreboard = scoreboard
    app.state.dispatcher = dispatcher

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ============================================
    # LOBBY ENDPOINTS
    # ============================================

    @app.get("/api")
    async def api_root():
        """API root endpoint - server health check."""
        return {
            "service": "Galactic Wars",
            "status": "operational",
            "activeLobbies": len(lobbies),
        }

    @app.post("/api/lobby/new", response_model=CreateLobbyResponse)
    async def create_lobby():
        """Create a new lobby with a fresh game.

        Example:
            POST /api/lobby/new
        """
        lobby = lobbies.create()
        return CreateLobbyResponse(lobbyId=lobby.id)

    @app.post("/api/lobby/{lobby_id}/join", response_model=JoinLobbyResponse)
    async def join_lobby(lobby_id: str, request: JoinLobbyRequest):
        """Join a lobby by name over HTTP.

        Example:
            POST /api/lobby/<id>/join
            {"playerName": "Alice"}
        """
        lobby = lobbies.get(lobby_id)
        if not lobby:
            raise HTTPException(status_code=404, detail="Lobby not found")

        async with lobby.lock:
            outcome = lobby.engine.join(request.playerName)
            if outcome.error:
                raise HTTPException(status_code=400, detail=outcome.error)

            await lobby.broadcast(
                {"broadcast": True, "message": f"Player {request.playerName} joined (via HTTP)."}
            )
        return JoinLobbyResponse(
            ok=True,
            message=f"Joined lobby {lobby_id} as {request.playerName}",
            player=outcome.payload["player"],
        )

    @app.get("/api/lobby/list", response_model=LobbyListResponse)
    async def list_lobbies():
        """List ids of all active lobbies."""
        return LobbyListResponse(lobbies=lobbies.list_ids())

    @app.get("/api/lobby/{lobby_id}/state", response_model=GameStateResponse)
    async def get_lobby_state(lobby_id: str):
        """Get the read-only game snapshot for rendering."""
        lobby = lobbies.get(lobby_id)
        if not lobby:
            raise HTTPException(status_code=404, detail="Lobby not found")
        return GameStateResponse(**lobby.get_state())

    # ============================================
    # SCOREBOARD ENDPOINTS
    # ============================================

    @app.get("/api/highscores", response_model=list[ScoreEntryResponse])
    async def get_highscores():
        """Return every finished game as JSON."""
        return scoreboard.to_list()

    @app.get("/api/highscores/view", response_class=HTMLResponse)
    async def view_highscores():
        """Render the scoreboard as a simple HTML table."""
        rows = "".join(
            "<tr>"
            f"<td>{datetime.fromtimestamp(e.date / 1000).strftime('%Y-%m-%d %H:%M:%S')}</td>"
            f"<td>{html.escape(e.winner)}</td>"
            f"<td>{html.escape(e.lobby_id)}</td>"
            "</tr>"
            for e in scoreboard.entries()
        )
        return (
            "<html><head><title>Galactic Wars - Highscores</title></head><body>"
            "<h1>Highscores</h1>"
            '<table border="1" cellpadding="5" cellspacing="0">'
            "<tr><th>Date</th><th>Winner</th><th>Lobby ID</th></tr>"
            f"{rows}</table></body></html>"
        )

    # ============================================
    # WEBSOCKET ENDPOINT
    # ============================================

    @app.websocket("/ws/lobby/{lobby_id}")
    async def websocket_endpoint(websocket: WebSocket, lobby_id: str):
        """WebSocket connection for one lobby.

        Each text frame is a command (e.g. "move 1 4 1"). Errors and help
        go back to the sender only; successful state changes are broadcast
        to every viewer of the lobby.
        """
        lobby = lobbies.get(lobby_id)
        if not lobby:
            await websocket.close(code=1008, reason="Lobby not found")
            return

        await websocket.accept()
        lobby.add_viewer(websocket)

        try:
            await websocket.send_json({"broadcast": False, "message": WELCOME_MESSAGE})

            while True:
                text = (await websocket.receive_text()).strip()
                if not text:
                    continue
                await dispatcher.dispatch(lobby, text, websocket)

        except WebSocketDisconnect:
            logger.info(f"WebSocket disconnected from lobby {lobby_id}")
        except Exception as e:
            logger.error(f"WebSocket error in lobby {lobby_id}: {e}", exc_info=True)
        finally:
            lobby.remove_viewer(websocket)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=3000, log_level="info")
