"""TaskList - ordered in-memory collection of the user's tasks."""

import logging
from datetime import datetime
from typing import Iterable, Iterator, Optional

from .exceptions import TaskNotFoundError
from .models import Task

logger = logging.getLogger(__name__)


class TaskList:
    """Ordered collection of tasks for a single chat session.

    Positions are 0-based here; converting from the 1-based numbers the
    user sees is the caller's job.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: list[Task] = list(tasks) if tasks else []

    def size(self) -> int:
        return len(self._tasks)

    def get(self, index: int) -> Task:
        """Return the task at a 0-based position.

        Raises:
            TaskNotFoundError: If the position is outside the list.
        """
        if index < 0 or index >= len(self._tasks):
            raise TaskNotFoundError(f"at position {index}")
        return self._tasks[index]

    def add(self, task: Task) -> None:
        self._tasks.append(task)
        logger.debug("Added task '%s' (size=%d)", task.description, len(self._tasks))

    def remove(self, task: Task) -> None:
        """Remove a task by identity.

        Two tasks with equal fields are still different entries, so the
        exact object resolved by the parser is the one removed.

        Raises:
            TaskNotFoundError: If the task is not in the list.
        """
        for i, existing in enumerate(self._tasks):
            if existing is task:
                del self._tasks[i]
                logger.debug("Removed task '%s' (size=%d)", task.description, len(self._tasks))
                return
        raise TaskNotFoundError(f"'{task.description}'")

    def find(self, keyword: str) -> list[Task]:
        """Return tasks whose description contains the keyword (case-sensitive)."""
        return [task for task in self._tasks if keyword in task.description]

    def due_by(self, cutoff: datetime) -> list[Task]:
        """Return dated tasks scheduled at or before the cutoff.

        To-dos have no date and are never included.
        """
        return [
            task
            for task in self._tasks
            if task.scheduled_at is not None and task.scheduled_at <= cutoff
        ]

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)
