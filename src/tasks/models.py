"""Data models for the tasks module."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class TaskType(Enum):
    """One-letter tags shown in front of each kind of task."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


# Display format for deadline and event date-times, e.g. "Oct 15 2019 18:00"
DISPLAY_FORMAT = "%b %d %Y %H:%M"


@dataclass
class Task:
    """Base class for anything the user tracks.

    Attributes:
        description: Free text entered by the user.
        done: Whether the task has been marked as completed.
    """

    description: str
    done: bool = field(default=False, init=False)

    TASK_TYPE = TaskType.TODO

    def mark_done(self) -> None:
        """Mark the task as completed."""
        self.done = True

    def mark_not_done(self) -> None:
        """Clear the completed flag."""
        self.done = False

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    @property
    def scheduled_at(self) -> Optional[datetime]:
        """The date-time the task is tied to, if any."""
        return None

    def __str__(self) -> str:
        return f"[{self.TASK_TYPE.value}][{self.status_icon}] {self.description}"


@dataclass
class ToDo(Task):
    """A task without any date attached."""

    TASK_TYPE = TaskType.TODO


@dataclass
class Deadline(Task):
    """A task that has to be done by a given date-time.

    Attributes:
        by: When the task is due.
    """

    by: datetime

    TASK_TYPE = TaskType.DEADLINE

    @property
    def scheduled_at(self) -> Optional[datetime]:
        return self.by

    def __str__(self) -> str:
        return f"{super().__str__()} (by: {self.by.strftime(DISPLAY_FORMAT)})"


@dataclass
class Event(Task):
    """A task that happens at a given date-time.

    Attributes:
        at: When the event takes place.
    """

    at: datetime

    TASK_TYPE = TaskType.EVENT

    @property
    def scheduled_at(self) -> Optional[datetime]:
        return self.at

    def __str__(self) -> str:
        return f"{super().__str__()} (at: {self.at.strftime(DISPLAY_FORMAT)})"
