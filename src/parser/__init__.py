"""Command parser module for the Spike chatbot.

This module classifies one line of user input into an action and
validates its arguments, producing a command value from src.commands.

Public API:
    CommandParser: Main class for parsing input lines.
    ActionKind: Enum of recognized command keywords.
    parse_date_time: Parse the fixed yyyy-MM-dd HHmm pattern or return None.
    parse_int: Parse a signed integer or return None.
    ParserError: Base exception for module errors.
    CommandParseError: Raised internally when a line fails validation.
"""

from .command_parser import CommandParser
from .exceptions import CommandParseError, ParserError
from .helpers import DATE_TIME_PATTERN, parse_date_time, parse_int
from .models import ActionKind, lookup_action

__all__ = [
    "CommandParser",
    "ActionKind",
    "lookup_action",
    "DATE_TIME_PATTERN",
    "parse_date_time",
    "parse_int",
    "ParserError",
    "CommandParseError",
]
