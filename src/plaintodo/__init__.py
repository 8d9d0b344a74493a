"""plaintodo - a command-line to-do list kept in a plain text file."""

__version__ = "0.1.0"

from .todo import Task, TaskKind
from .errors import (
    TodoError,
    InvalidInputError,
    InvalidTaskNumberError,
    TaskParseError,
    StorageError,
)
from .storage import TaskFileStore, TaskLineFormat
from .manager import TaskManager

__all__ = [
    "Task",
    "TaskKind",
    "TodoError",
    "InvalidInputError",
    "InvalidTaskNumberError",
    "TaskParseError",
    "StorageError",
    "TaskFileStore",
    "TaskLineFormat",
    "TaskManager",
    "__version__",
]
