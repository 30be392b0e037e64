"""CommandParser for turning one line of user input into a command."""

import logging
from typing import Optional

from src.commands.models import (
    AddCommand,
    Command,
    DeleteCommand,
    ExitCommand,
    FindCommand,
    IncorrectCommand,
    ListCommand,
    MarkTarget,
    ToggleMarkCommand,
)
from src.tasks.models import Deadline, Event, Task, ToDo
from src.tasks.task_list import TaskList

from .exceptions import CommandParseError
from .helpers import DATE_TIME_PATTERN, parse_date_time, parse_int
from .models import ActionKind, lookup_action

logger = logging.getLogger(__name__)

UNRECOGNIZED_MESSAGE = "Sorry, I am not programmed to do this yet :("
LIST_DATE_MESSAGE = "Kindly enter the date in the format yyyy-MM-dd 0000 to filter by date"
FIND_MISSING_MESSAGE = "Kindly enter the keyword for finding task"
TODO_MISSING_MESSAGE = "Hmmmm what to do? Think again?"
DEADLINE_MISSING_MESSAGE = "Deadline or task description missing."
EVENT_MISSING_MESSAGE = "Event time or event description missing."
INVALID_DATE_MESSAGE = f"Please enter a valid date in the format {DATE_TIME_PATTERN}"
DELETE_INVALID_MESSAGE = "Invalid arguments for deletion. Please check again!"
MARK_INVALID_MESSAGE = "Invalid arguments for marking. Please check again!"
UNMARK_INVALID_MESSAGE = "Invalid arguments for unmarking. Please check again!"


class CommandParser:
    """Classifies a raw input line and validates its arguments.

    Input is split on single spaces; the first token must exactly match
    one of the ActionKind keywords. Each action then has its own
    validator that either builds a command or raises CommandParseError,
    which parse_command turns into an IncorrectCommand. The task list is
    only read, for index bounds checks and to resolve task references.
    """

    # marker, missing-field message, task class
    DATED_TASKS: dict[ActionKind, tuple[str, str, type[Task]]] = {
        ActionKind.DEADLINE: ("/by", DEADLINE_MISSING_MESSAGE, Deadline),
        ActionKind.EVENT: ("/at", EVENT_MISSING_MESSAGE, Event),
    }

    TOGGLE_TARGETS: dict[ActionKind, tuple[MarkTarget, str]] = {
        ActionKind.MARK: (MarkTarget.MARK, MARK_INVALID_MESSAGE),
        ActionKind.UNMARK: (MarkTarget.UNMARK, UNMARK_INVALID_MESSAGE),
    }

    # -------------------- Tokenizing --------------------

    @staticmethod
    def tokenize(line: str) -> list[str]:
        """Split on single spaces, dropping trailing empty tokens.

        Runs of spaces inside the line still yield empty tokens, which
        shifts the position of later arguments.
        """
        words = line.split(" ")
        while words and words[-1] == "":
            words.pop()
        return words

    @staticmethod
    def _argument(kind: ActionKind, line: str) -> str:
        """Text following the keyword and one separator character."""
        return line[len(kind.keyword) + 1:]

    # -------------------- Validators --------------------

    def _parse_list(
        self, kind: ActionKind, line: str, words: list[str], tasks: TaskList
    ) -> Command:
        if len(line) == len(kind.keyword):
            return ListCommand()

        cutoff = parse_date_time(self._argument(kind, line))
        if cutoff is None:
            raise CommandParseError(line, LIST_DATE_MESSAGE)
        return ListCommand(cutoff=cutoff)

    def _parse_find(
        self, kind: ActionKind, line: str, words: list[str], tasks: TaskList
    ) -> Command:
        keyword = self._argument(kind, line)
        if not keyword:
            raise CommandParseError(line, FIND_MISSING_MESSAGE)
        return FindCommand(keyword)

    def _parse_todo(
        self, kind: ActionKind, line: str, words: list[str], tasks: TaskList
    ) -> Command:
        description = self._argument(kind, line)
        if not description:
            raise CommandParseError(line, TODO_MISSING_MESSAGE)
        return AddCommand(ToDo(description))

    def _parse_dated(
        self, kind: ActionKind, line: str, words: list[str], tasks: TaskList
    ) -> Command:
        """Validate a deadline or event line.

        The description is the text between the keyword and the character
        before the first occurrence of the marker; the date-time is the
        text after the marker and one separator. A description that
        itself contains the marker text is therefore split too early.
        """
        marker, missing_message, task_class = self.DATED_TASKS[kind]
        marker_at = line.find(marker)
        if (
            len(words) <= 2
            or marker_at == -1
            or words[1] == marker
            or marker_at + len(marker) == len(line)
        ):
            raise CommandParseError(line, missing_message)

        when = parse_date_time(line[marker_at + len(marker) + 1:])
        if when is None:
            raise CommandParseError(line, INVALID_DATE_MESSAGE)

        description = line[len(kind.keyword) + 1:marker_at - 1]
        if not description:
            raise CommandParseError(line, missing_message)
        return AddCommand(task_class(description, when))

    def _resolve_index(
        self, line: str, words: list[str], tasks: TaskList, message: str
    ) -> Task:
        """Resolve the single 1-based index argument to a task."""
        index: Optional[int] = parse_int(words[1]) if len(words) == 2 else None
        if index is None or index < 1 or index > tasks.size():
            raise CommandParseError(line, message)
        return tasks.get(index - 1)

    def _parse_delete(
        self, kind: ActionKind, line: str, words: list[str], tasks: TaskList
    ) -> Command:
        return DeleteCommand(
            self._resolve_index(line, words, tasks, DELETE_INVALID_MESSAGE)
        )

    def _parse_toggle_mark(
        self, kind: ActionKind, line: str, words: list[str], tasks: TaskList
    ) -> Command:
        target, message = self.TOGGLE_TARGETS[kind]
        return ToggleMarkCommand(target, self._resolve_index(line, words, tasks, message))

    def _parse_exit(
        self, kind: ActionKind, line: str, words: list[str], tasks: TaskList
    ) -> Command:
        return ExitCommand()

    _HANDLERS = {
        ActionKind.LIST: _parse_list,
        ActionKind.MARK: _parse_toggle_mark,
        ActionKind.UNMARK: _parse_toggle_mark,
        ActionKind.DELETE: _parse_delete,
        ActionKind.TODO: _parse_todo,
        ActionKind.DEADLINE: _parse_dated,
        ActionKind.EVENT: _parse_dated,
        ActionKind.FIND: _parse_find,
        ActionKind.EXIT: _parse_exit,
    }

    # -------------------- Main Entry Point --------------------

    def parse_command(self, line: str, tasks: TaskList) -> Command:
        """Parse one line of user input into a command.

        Never raises: every validation failure comes back as an
        IncorrectCommand carrying a message for the user.

        Args:
            line: Raw input line, without the trailing newline.
            tasks: Current task list, used read-only.

        Returns:
            The command to execute.
        """
        words = self.tokenize(line)
        kind = lookup_action(words[0] if words else "")
        if kind is None:
            logger.debug("Unrecognized command %r", line)
            return IncorrectCommand(UNRECOGNIZED_MESSAGE)

        handler = self._HANDLERS[kind]
        try:
            command = handler(self, kind, line, words, tasks)
        except CommandParseError as e:
            logger.debug("Rejected %s input %r: %s", kind.name, line, e.reason)
            return IncorrectCommand(e.reason)

        logger.debug("Parsed %r as %s", line, type(command).__name__)
        return command
