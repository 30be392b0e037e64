"""Exceptions for the parser module."""


class ParserError(Exception):
    """Base exception for command parser errors."""

    pass


class CommandParseError(ParserError):
    """Raised when an input line cannot be parsed into a valid command.

    The reason is user-facing and becomes the IncorrectCommand message.
    """

    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"Failed to parse '{line}': {reason}")
