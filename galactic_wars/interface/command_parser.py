"""Text command parser for lobby connections.

Commands are whitespace-delimited; the verb is matched case-insensitively.
Parsing never touches the engine, it only turns text into a Command that
the dispatcher maps onto one engine call.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class ErrorType(Enum):
    """Classification of command input errors."""

    UNKNOWN_COMMAND = "unknown_command"
    USAGE = "usage"
    EMPTY = "empty"


class CommandParseError(Exception):
    """Raised when command parsing fails with classification."""

    def __init__(self, error_type: ErrorType, message: str):
        """Initialize parse error.

        Args:
            error_type: Classification of the error
            message: Human-readable error message
        """
        self.error_type = error_type
        self.message = message
        super().__init__(message)


@dataclass
class Command:
    """A parsed command: canonical verb plus converted arguments."""

    verb: str
    args: List[Any] = field(default_factory=list)


# Canonical verb name, keyed by lowercase spelling
VERBS = {
    "help": "help",
    "joingame": "joinGame",
    "startgame": "startGame",
    "move": "move",
    "attack": "attack",
    "build": "build",
    "endturn": "endTurn",
}

USAGE = {
    "joinGame": "Usage: joinGame <playerName>",
    "move": "Usage: move <shipId> <x> <y>",
    "attack": "Usage: attack <shipId> <targetShipId>",
    "build": "Usage: build <shipType>",
}

# Minimum argument counts
ARITY = {
    "joinGame": 1,
    "move": 3,
    "attack": 2,
    "build": 1,
}

HELP_TEXT = """Available Commands:
- joinGame <playerName>
- startGame
- move <shipId> <x> <y>
- attack <shipId> <targetShipId>
- build <shipType>
- endTurn"""


class CommandParser:
    """Parse text commands into Command objects."""

    def parse(self, text: str) -> Command:
        """Parse a command string.

        Supported formats:
        - "joinGame <playerName>"
        - "startGame"
        - "move <shipId> <x> <y>"
        - "attack <shipId> <targetShipId>"
        - "build <shipType>"
        - "endTurn"
        - "help"

        Ship ids that are not integers are passed on as None so the engine
        reports them as unknown ships. Coordinates must be integers.

        Args:
            text: Raw command text

        Returns:
            Parsed Command

        Raises:
            CommandParseError: If the text is empty, the verb is unknown or
                arguments are missing
        """
        tokens = text.split()
        if not tokens:
            raise CommandParseError(ErrorType.EMPTY, "Empty command")

        raw_verb, args = tokens[0], tokens[1:]
        verb = VERBS.get(raw_verb.lower())
        if verb is None:
            raise CommandParseError(
                ErrorType.UNKNOWN_COMMAND, f"Unrecognized command: {raw_verb}"
            )

        if len(args) < ARITY.get(verb, 0):
            raise CommandParseError(ErrorType.USAGE, USAGE[verb])

        if verb == "move":
            x, y = _to_int(args[1]), _to_int(args[2])
            if x is None or y is None:
                raise CommandParseError(ErrorType.USAGE, USAGE[verb])
            return Command(verb, [_to_int(args[0]), x, y])

        if verb == "attack":
            return Command(verb, [_to_int(args[0]), _to_int(args[1])])

        if verb in ("joinGame", "build"):
            return Command(verb, [args[0]])

        return Command(verb)


def _to_int(token: str) -> Optional[int]:
    try:
        return int(token)
    except ValueError:
        return None
