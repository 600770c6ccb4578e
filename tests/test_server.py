"""Tests for the HTTP and WebSocket endpoints."""

import pytest
from fastapi import WebSocketDisconnect
from fastapi.testclient import TestClient

from galactic_wars.server import lobby as lobby_module
from galactic_wars.server.lobby import Lobby, LobbyDirectory
from galactic_wars.server.main import WELCOME_MESSAGE, create_app
from galactic_wars.server.scoreboard import Scoreboard


@pytest.fixture
def lobbies():
    return LobbyDirectory()


@pytest.fixture
def scoreboard():
    return Scoreboard()


@pytest.fixture
def client(lobbies, scoreboard):
    return TestClient(create_app(lobbies=lobbies, scoreboard=scoreboard))


@pytest.fixture
def lobby(lobbies, make_engine):
    """Lobby with an empty map so moves have no side effects."""
    lobby = Lobby(id="test-lobby", engine=make_engine())
    lobbies.lobbies[lobby.id] = lobby
    return lobby


class TestLobbyEndpoints:
    """Test HTTP lobby management."""

    def test_health(self, client):
        response = client.get("/api")
        assert response.status_code == 200
        assert response.json()["service"] == "Galactic Wars"
        assert response.json()["activeLobbies"] == 0

    def test_create_and_list(self, client, lobbies):
        response = client.post("/api/lobby/new")
        assert response.status_code == 200
        lobby_id = response.json()["lobbyId"]

        assert lobbies.get(lobby_id) is not None
        assert client.get("/api/lobby/list").json() == {"lobbies": [lobby_id]}

    def test_create_ignores_client_seed(self, client, lobbies, monkeypatch):
        seeds = []
        real_rng = lobby_module.GameRNG

        def recording_rng(seed=None):
            seeds.append(seed)
            return real_rng(seed)

        monkeypatch.setattr(lobby_module, "GameRNG", recording_rng)

        response = client.post("/api/lobby/new", json={"seed": 11})

        assert response.status_code == 200
        assert lobbies.get(response.json()["lobbyId"]) is not None
        assert seeds == [None]

    def test_state(self, client):
        lobby_id = client.post("/api/lobby/new").json()["lobbyId"]

        state = client.get(f"/api/lobby/{lobby_id}/state").json()

        assert state["players"] == []
        assert state["gameStarted"] is False
        assert state["currentPlayerIndex"] == 0
        assert len(state["resourceMap"]) == 11

    def test_state_unknown_lobby(self, client):
        assert client.get("/api/lobby/missing/state").status_code == 404

    def test_join_over_http(self, client, lobby):
        response = client.post(f"/api/lobby/{lobby.id}/join", json={"playerName": "Alice"})

        assert response.status_code == 200
        body = response.json()
        assert body["ok"] is True
        assert body["message"] == f"Joined lobby {lobby.id} as Alice"
        assert body["player"]["id"] == 1
        assert lobby.engine.game.players[0].name == "Alice"

    def test_join_missing_name(self, client, lobby):
        assert client.post(f"/api/lobby/{lobby.id}/join", json={}).status_code == 422

    def test_join_unknown_lobby(self, client):
        response = client.post("/api/lobby/missing/join", json={"playerName": "Alice"})
        assert response.status_code == 404

    def test_join_full_lobby(self, client, lobby):
        for name in ("A", "B", "C", "D"):
            client.post(f"/api/lobby/{lobby.id}/join", json={"playerName": name})

        response = client.post(f"/api/lobby/{lobby.id}/join", json={"playerName": "E"})

        assert response.status_code == 400
        assert "Max players" in response.json()["detail"]
        assert len(lobby.engine.game.players) == 4


class TestHighscoreEndpoints:
    """Test scoreboard endpoints."""

    def test_json(self, client, scoreboard):
        scoreboard.record("lobby-1", "Alice")

        body = client.get("/api/highscores").json()

        assert len(body) == 1
        assert body[0]["lobbyId"] == "lobby-1"
        assert body[0]["winner"] == "Alice"

    def test_html_view(self, client, scoreboard):
        scoreboard.record("lobby-1", "<Alice>")

        response = client.get("/api/highscores/view")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "<h1>Highscores</h1>" in response.text
        assert "&lt;Alice&gt;" in response.text
        assert "lobby-1" in response.text


class TestWebSocket:
    """Test the command WebSocket."""

    def test_unknown_lobby_is_closed(self, client):
        with pytest.raises(WebSocketDisconnect):
            with client.websocket_connect("/ws/lobby/missing") as ws:
                ws.receive_json()

    def test_game_flow(self, client, lobby):
        with client.websocket_connect(f"/ws/lobby/{lobby.id}") as alice:
            assert alice.receive_json() == {"broadcast": False, "message": WELCOME_MESSAGE}

            with client.websocket_connect(f"/ws/lobby/{lobby.id}") as bob:
                bob.receive_json()

                alice.send_text("joinGame Alice")
                assert alice.receive_json()["message"] == "Joined as Alice (player 1)."
                assert alice.receive_json() == {
                    "broadcast": True,
                    "message": "Player Alice joined the game!",
                }
                assert bob.receive_json()["message"] == "Player Alice joined the game!"

                bob.send_text("joinGame Bob")
                assert bob.receive_json()["message"] == "Joined as Bob (player 2)."
                bob.receive_json()
                alice.receive_json()

                alice.send_text("startGame")
                assert alice.receive_json()["message"] == "Game started. Player 1 goes first!"
                assert bob.receive_json()["message"] == "Game started. Player 1 goes first!"

                bob.send_text("move 2 19 19")
                assert "No ship with id 2" in bob.receive_json()["error"]

                alice.send_text("help")
                assert "Available Commands" in alice.receive_json()["message"]

                alice.send_text("move 1 4 1")
                assert alice.receive_json()["message"] == "Ship 1 moved to (4,1)."
                assert bob.receive_json()["message"] == "Ship 1 moved to (4,1)."

        state = client.get(f"/api/lobby/{lobby.id}/state").json()
        assert state["players"][0]["ships"][0]["x"] == 4
        assert lobby.viewers == set()
