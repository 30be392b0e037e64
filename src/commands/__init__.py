"""Command values and the executor that applies them to a TaskList.

Public API:
    CommandExecutor: Applies a command to a TaskList and renders the reply.
    Command: Base class of every parsed command value.
    AddCommand, DeleteCommand, ToggleMarkCommand, ListCommand,
    FindCommand, ExitCommand, IncorrectCommand: Command variants.
    MarkTarget: Direction of a ToggleMarkCommand.
    CommandResult: Reply produced by executing one command.
    CommandError: Base exception for module errors.
    CommandExecutionError: Raised on execution failures.
"""

from .exceptions import CommandError, CommandExecutionError
from .executor import CommandExecutor
from .models import (
    AddCommand,
    Command,
    CommandResult,
    DeleteCommand,
    ExitCommand,
    FindCommand,
    IncorrectCommand,
    ListCommand,
    MarkTarget,
    ToggleMarkCommand,
)

__all__ = [
    "CommandExecutor",
    "Command",
    "AddCommand",
    "DeleteCommand",
    "ToggleMarkCommand",
    "ListCommand",
    "FindCommand",
    "ExitCommand",
    "IncorrectCommand",
    "MarkTarget",
    "CommandResult",
    "CommandError",
    "CommandExecutionError",
]
