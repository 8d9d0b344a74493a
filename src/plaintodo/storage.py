"""Storage layer for plaintodo using a flat, line-oriented text file."""

import logging
import re
from datetime import date
from pathlib import Path
from typing import List, Optional, Union

from .errors import InvalidInputError, StorageError, TaskParseError
from .todo import Task, COMPLETED_PREFIX


logger = logging.getLogger(__name__)

PREFIX_WIDTH = len(COMPLETED_PREFIX)
DUE_SUFFIX_RE = re.compile(r"(.+?) \(due: ([0-9]{4}-[0-9]{2}-[0-9]{2})\)")


class TaskLineFormat:
    """Handles conversion between Task objects and lines of the task file."""

    @staticmethod
    def to_line(task: Task) -> str:
        """Convert a Task to its persisted line."""
        return task.render()

    @staticmethod
    def from_line(line: str, line_number: Optional[int] = None) -> Task:
        """Parse one line of the task file back to a Task.

        The first four characters hold the completion prefix. Anything other
        than ``[X]`` there reads as an open task.
        """
        if len(line) < PREFIX_WIDTH:
            raise TaskParseError("line is too short to hold a task", line_number)

        completed = line.startswith(COMPLETED_PREFIX.rstrip())
        content = line[PREFIX_WIDTH:]

        description, due_date = content, None
        m = DUE_SUFFIX_RE.fullmatch(content)
        if m:
            description, due_text = m.groups()
            try:
                due_date = date.fromisoformat(due_text)
            except ValueError as e:
                raise TaskParseError(f"invalid due date '{due_text}'", line_number) from e

        try:
            if due_date is not None:
                task = Task.dated(description, due_date)
            else:
                task = Task.plain(description)
        except InvalidInputError as e:
            raise TaskParseError(str(e), line_number) from e

        if completed:
            task.complete()
        return task


class TaskFileStore:
    """File-based storage that keeps every task on its own line."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def load(self) -> List[Task]:
        """Load all tasks from the task file.

        A missing or unreadable file is an empty task list. A file that is
        not UTF-8 or holds a malformed line raises TaskParseError.
        """
        if not self.path.exists():
            logger.debug(f"Task file {self.path} does not exist, starting empty")
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                lines = f.readlines()
        except UnicodeDecodeError as e:
            raise TaskParseError(f"task file {self.path} is not valid UTF-8: {e}") from e
        except OSError as e:
            logger.warning(f"Could not read task file {self.path}: {e}")
            return []

        tasks = []
        for line_number, raw_line in enumerate(lines, start=1):
            line = raw_line.rstrip("\r\n")
            if not line.strip():
                continue
            tasks.append(TaskLineFormat.from_line(line, line_number))

        logger.debug(f"Loaded {len(tasks)} tasks from {self.path}")
        return tasks

    def save(self, tasks: List[Task]) -> None:
        """Rewrite the whole task file from ``tasks``."""
        content = "".join(f"{TaskLineFormat.to_line(task)}\n" for task in tasks)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)
        except OSError as e:
            raise StorageError(
                f"Failed to save tasks to {self.path}: {e}", self.path
            ) from e

        logger.debug(f"Saved {len(tasks)} tasks to {self.path}")
