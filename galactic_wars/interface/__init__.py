"""Text command interface."""

from .command_parser import HELP_TEXT, Command, CommandParseError, CommandParser, ErrorType

__all__ = [
    "HELP_TEXT",
    "Command",
    "CommandParseError",
    "CommandParser",
    "ErrorType",
]
