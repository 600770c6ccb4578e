"""Command dispatch: text command -> engine call -> delivery plan.

The dispatcher owns the game-over policy. The engine only reports who is
alive; after each successful attack the dispatcher checks for a last
survivor, records the result on the scoreboard once and closes the lobby
to further turn-changing commands.
"""

import logging
from dataclasses import dataclass, field

from fastapi import WebSocket

from ..engine import check_game_over
from ..interface import HELP_TEXT, CommandParseError, CommandParser
from ..models.outcome import ErrorType, Outcome
from .lobby import Lobby
from .scoreboard import Scoreboard

logger = logging.getLogger(__name__)

# Commands refused once a lobby's game is over
TURN_COMMANDS = {"startGame", "move", "attack", "build", "endTurn"}


@dataclass
class DispatchResult:
    """Messages produced by one command.

    unicast goes only to the issuing connection; broadcast goes to every
    viewer of the lobby.
    """

    unicast: list[dict] = field(default_factory=list)
    broadcast: list[dict] = field(default_factory=list)


def _info(message: str) -> dict:
    return {"broadcast": False, "message": message}


def _announce(message: str) -> dict:
    return {"broadcast": True, "message": message}


class CommandDispatcher:
    """Routes text commands for a lobby onto its engine."""

    def __init__(self, scoreboard: Scoreboard):
        self.scoreboard = scoreboard
        self.parser = CommandParser()

    async def dispatch(self, lobby: Lobby, text: str, sender: WebSocket) -> DispatchResult:
        """Handle a command and deliver its messages.

        Delivery happens under the lobby lock so viewers receive results in
        the order the engine applied them.

        Args:
            lobby: Lobby the sender is connected to
            text: Raw command text
            sender: Issuing connection (receives unicast messages)

        Returns:
            The delivered DispatchResult
        """
        async with lobby.lock:
            result = self._handle_locked(lobby, text)
            for message in result.unicast:
                await sender.send_json(message)
            for message in result.broadcast:
                await lobby.broadcast(message)
        return result

    async def handle(self, lobby: Lobby, text: str) -> DispatchResult:
        """Run one command against the lobby's engine under its lock.

        Args:
            lobby: Target lobby
            text: Raw command text

        Returns:
            DispatchResult describing who should receive what
        """
        async with lobby.lock:
            return self._handle_locked(lobby, text)

    def _handle_locked(self, lobby: Lobby, text: str) -> DispatchResult:
        result = DispatchResult()

        try:
            command = self.parser.parse(text)
        except CommandParseError as e:
            result.unicast.append({"error": e.message})
            return result

        if command.verb == "help":
            result.unicast.append(_info(HELP_TEXT))
            return result

        if lobby.finished and command.verb in TURN_COMMANDS:
            result.unicast.append({"error": "Game is over"})
            return result

        outcome = self._call_engine(lobby, command.verb, command.args)

        if outcome.error:
            result.unicast.append({"error": outcome.error})
            if outcome.error_type == ErrorType.NO_ALIVE_PLAYERS:
                self._finish(lobby, None, result)
            return result

        if command.verb == "joinGame":
            player = outcome.payload["player"]
            result.unicast.append(_info(f"Joined as {player['name']} (player {player['id']})."))
        result.broadcast.append(_announce(outcome.message))

        if command.verb == "attack":
            over, winner = check_game_over(lobby.engine.game)
            if over:
                self._finish(lobby, winner, result)

        return result

    def _call_engine(self, lobby: Lobby, verb: str, args: list) -> Outcome:
        engine = lobby.engine
        if verb == "joinGame":
            return engine.join(args[0])
        if verb == "startGame":
            return engine.start()
        if verb == "move":
            return engine.move_ship(*args)
        if verb == "attack":
            return engine.attack_ship(*args)
        if verb == "build":
            return engine.build_ship(args[0])
        if verb == "endTurn":
            return engine.end_turn()
        raise ValueError(f"Unhandled command: {verb}")

    def _finish(self, lobby: Lobby, winner: str | None, result: DispatchResult):
        if lobby.finished:
            return
        lobby.finished = True
        lobby.winner = winner
        self.scoreboard.record(lobby.id, winner)
        logger.info(f"Lobby {lobby.id} game over: winner = {winner}")
        if winner is not None:
            result.broadcast.append(_announce(f"Game over! Winner: {winner}"))
        else:
            result.broadcast.append(_announce("Game over! No players survived."))
