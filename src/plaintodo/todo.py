"""Task data model for the plaintodo application."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from .errors import InvalidInputError


COMPLETED_PREFIX = "[X] "
PENDING_PREFIX = "[ ] "
DUE_SUFFIX = " (due: {})"


class TaskKind(Enum):
    """Task variants."""
    PLAIN = "plain"
    DATED = "dated"


@dataclass
class Task:
    """A to-do item, either plain or carrying a due date.

    The ``kind`` tag decides the variant: ``due_date`` is set exactly when
    ``kind`` is ``TaskKind.DATED``.
    """

    description: str
    kind: TaskKind = TaskKind.PLAIN
    due_date: Optional[date] = None
    completed: bool = False

    def __post_init__(self):
        """Validate the variant invariants."""
        if not self.description:
            raise InvalidInputError("Task description cannot be empty")
        if "\n" in self.description or "\r" in self.description:
            raise InvalidInputError("Task description cannot contain line breaks")

        if self.kind == TaskKind.DATED and self.due_date is None:
            raise InvalidInputError("Dated task requires a due date")
        if self.kind == TaskKind.PLAIN and self.due_date is not None:
            raise InvalidInputError("Plain task cannot have a due date")

    @classmethod
    def plain(cls, description: str) -> "Task":
        """Create a task without a due date."""
        return cls(description=description)

    @classmethod
    def dated(cls, description: str, due_date: date) -> "Task":
        """Create a task due on ``due_date``."""
        return cls(description=description, kind=TaskKind.DATED, due_date=due_date)

    @property
    def is_dated(self) -> bool:
        return self.kind == TaskKind.DATED

    def complete(self):
        """Mark the task as completed."""
        self.completed = True

    def is_overdue(self, today: Optional[date] = None) -> bool:
        """Check if the task is past its due date and still open."""
        if not self.is_dated or self.completed:
            return False
        if today is None:
            today = date.today()
        return self.due_date < today

    def render(self) -> str:
        """Render the task as its persisted line of text.

        ``date.isoformat`` always yields a four-digit year and zero-padded
        month and day, which is what the parser expects back.
        """
        prefix = COMPLETED_PREFIX if self.completed else PENDING_PREFIX
        line = f"{prefix}{self.description}"
        if self.kind == TaskKind.DATED:
            line += DUE_SUFFIX.format(self.due_date.isoformat())
        return line
