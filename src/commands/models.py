"""Data models for the commands module."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from src.tasks.models import Task


class MarkTarget(Enum):
    """Which way a toggle-mark command flips a task."""

    MARK = "mark"
    UNMARK = "unmark"


@dataclass
class Command:
    """Base class for every value the parser can produce."""


@dataclass
class AddCommand(Command):
    """Append a fully built task to the list."""

    task: Task


@dataclass
class DeleteCommand(Command):
    """Remove the referenced task from the list."""

    task: Task


@dataclass
class ToggleMarkCommand(Command):
    """Mark or unmark the referenced task as done."""

    target: MarkTarget
    task: Task


@dataclass
class ListCommand(Command):
    """List tasks.

    Attributes:
        cutoff: None lists everything; otherwise only deadlines and events
            scheduled at or before this date-time are listed.
    """

    cutoff: Optional[datetime] = None

    @property
    def by_date(self) -> bool:
        return self.cutoff is not None


@dataclass
class FindCommand(Command):
    """Search task descriptions for a keyword."""

    keyword: str


@dataclass
class ExitCommand(Command):
    """End the chat session."""


@dataclass
class IncorrectCommand(Command):
    """Input that could not be turned into an actionable command.

    Attributes:
        reason: Human-readable explanation shown back to the user.
    """

    reason: str


@dataclass
class CommandResult:
    """Outcome of executing one command.

    Attributes:
        message: Reply to show the user.
        is_exit: Whether the session should end after this reply.
    """

    message: str
    is_exit: bool = False
