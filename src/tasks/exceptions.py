"""Exceptions for the tasks module."""


class TasksError(Exception):
    """Base exception for all task list errors."""

    pass


class TaskNotFoundError(TasksError):
    """Raised when a task is not present in the task list."""

    def __init__(self, reference: str):
        self.reference = reference
        super().__init__(f"Task {reference} not found")
