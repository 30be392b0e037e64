"""In-memory task tracking module.

This module provides the task entities (to-dos, deadlines and events)
and the ordered TaskList that commands are executed against.
"""

from .exceptions import TaskNotFoundError, TasksError
from .models import Deadline, Event, Task, TaskType, ToDo
from .task_list import TaskList

__all__ = [
    # Main classes
    "TaskList",
    # Models
    "Task",
    "TaskType",
    "ToDo",
    "Deadline",
    "Event",
    # Exceptions
    "TasksError",
    "TaskNotFoundError",
]
