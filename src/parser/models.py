"""Data models for the parser module."""

from enum import Enum
from typing import Optional


class ActionKind(Enum):
    """Actions the parser understands, keyed by their command keyword."""

    LIST = "list"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    FIND = "find"
    EXIT = "bye"

    @property
    def keyword(self) -> str:
        return self.value


KEYWORD_MAP: dict[str, ActionKind] = {kind.keyword: kind for kind in ActionKind}


def lookup_action(keyword: str) -> Optional[ActionKind]:
    """Return the action for an exact, case-sensitive keyword match."""
    return KEYWORD_MAP.get(keyword)
