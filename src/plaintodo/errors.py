"""Exceptions raised by the plaintodo model, storage and manager layers."""

from typing import Optional


class TodoError(Exception):
    """Base class for all plaintodo errors."""


class InvalidInputError(TodoError):
    """Exception raised when user-supplied or persisted input is not valid."""


class InvalidTaskNumberError(InvalidInputError):
    """Exception raised when a task number does not address an existing task."""

    def __init__(self, number, count: Optional[int] = None):
        self.number = number
        self.count = count
        super().__init__(f"Invalid task number: {number}")


class TaskParseError(InvalidInputError):
    """Exception raised when a line of the task file cannot be parsed."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class StorageError(TodoError):
    """Exception raised when the task file cannot be written."""

    def __init__(self, message: str, path=None):
        self.path = path
        super().__init__(message)
