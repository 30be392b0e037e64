"""CommandExecutor for applying parsed commands to the task list."""

import logging
from typing import Iterable

from src.tasks.models import DISPLAY_FORMAT, Task
from src.tasks.task_list import TaskList

from .exceptions import CommandExecutionError
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

logger = logging.getLogger(__name__)

GOODBYE_MESSAGE = "Bye. Hope to see you again soon!"


def _count_line(tasks: TaskList) -> str:
    size = tasks.size()
    noun = "task" if size == 1 else "tasks"
    return f"Now you have {size} {noun} in the list."


def _numbered(header: str, tasks: Iterable[Task]) -> str:
    lines = [header]
    lines.extend(f"{i}.{task}" for i, task in enumerate(tasks, start=1))
    return "\n".join(lines)


class CommandExecutor:
    """Applies commands produced by the parser to a TaskList.

    The executor is the only component that mutates the task list. Every
    command yields a CommandResult holding the reply for the user.

    Example:
        result = CommandExecutor().execute(command, tasks)
        print(result.message)
    """

    def _execute_add(self, command: AddCommand, tasks: TaskList) -> CommandResult:
        tasks.add(command.task)
        logger.info("Added %s task '%s'", command.task.TASK_TYPE.name, command.task.description)
        return CommandResult(
            f"Got it. I've added this task:\n  {command.task}\n{_count_line(tasks)}"
        )

    def _execute_delete(self, command: DeleteCommand, tasks: TaskList) -> CommandResult:
        tasks.remove(command.task)
        logger.info("Deleted task '%s'", command.task.description)
        return CommandResult(
            f"Noted. I've removed this task:\n  {command.task}\n{_count_line(tasks)}"
        )

    def _execute_toggle_mark(
        self, command: ToggleMarkCommand, tasks: TaskList
    ) -> CommandResult:
        task = command.task
        if command.target is MarkTarget.MARK:
            task.mark_done()
            logger.info("Marked task '%s' as done", task.description)
            return CommandResult(f"Nice! I've marked this task as done:\n  {task}")

        task.mark_not_done()
        logger.info("Marked task '%s' as not done", task.description)
        return CommandResult(f"OK, I've marked this task as not done yet:\n  {task}")

    def _execute_list(self, command: ListCommand, tasks: TaskList) -> CommandResult:
        if command.cutoff is None:
            if tasks.size() == 0:
                return CommandResult("Your task list is empty.")
            return CommandResult(_numbered("Here are the tasks in your list:", tasks))

        cutoff = command.cutoff.strftime(DISPLAY_FORMAT)
        due = tasks.due_by(command.cutoff)
        if not due:
            return CommandResult(f"No tasks due by {cutoff}.")
        return CommandResult(_numbered(f"Here are the tasks due by {cutoff}:", due))

    def _execute_find(self, command: FindCommand, tasks: TaskList) -> CommandResult:
        matches = tasks.find(command.keyword)
        if not matches:
            return CommandResult("No matching tasks found.")
        return CommandResult(
            _numbered("Here are the matching tasks in your list:", matches)
        )

    def _execute_exit(self, command: ExitCommand, tasks: TaskList) -> CommandResult:
        return CommandResult(GOODBYE_MESSAGE, is_exit=True)

    def _execute_incorrect(
        self, command: IncorrectCommand, tasks: TaskList
    ) -> CommandResult:
        return CommandResult(command.reason)

    _HANDLERS = {
        AddCommand: _execute_add,
        DeleteCommand: _execute_delete,
        ToggleMarkCommand: _execute_toggle_mark,
        ListCommand: _execute_list,
        FindCommand: _execute_find,
        ExitCommand: _execute_exit,
        IncorrectCommand: _execute_incorrect,
    }

    def execute(self, command: Command, tasks: TaskList) -> CommandResult:
        """Apply a command to the task list.

        Args:
            command: A command produced by CommandParser.
            tasks: The session's task list.

        Returns:
            CommandResult with the reply text.

        Raises:
            CommandExecutionError: If no handler exists for the command.
        """
        handler = self._HANDLERS.get(type(command))
        if handler is None:
            raise CommandExecutionError(
                type(command).__name__, "No handler registered for this command"
            )
        return handler(self, command, tasks)
