"""Exceptions for the commands module."""


class CommandError(Exception):
    """Base exception for command execution errors."""

    pass


class CommandExecutionError(CommandError):
    """Raised when a command cannot be applied to the task list."""

    def __init__(self, command_type: str, reason: str):
        self.command_type = command_type
        self.reason = reason
        super().__init__(f"Failed to execute '{command_type}': {reason}")
