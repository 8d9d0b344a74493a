"""In-memory task list backed by a TaskFileStore."""

import logging
from datetime import date
from typing import List

from .errors import InvalidTaskNumberError
from .storage import TaskFileStore
from .todo import Task


logger = logging.getLogger(__name__)


class TaskManager:
    """Task list operations addressed by 1-based task numbers.

    The list is loaded once from the store when the manager is created and
    the whole file is rewritten after every mutation.
    """

    def __init__(self, store: TaskFileStore):
        self.store = store
        self.tasks: List[Task] = store.load()

    def __len__(self) -> int:
        return len(self.tasks)

    @property
    def count(self) -> int:
        return len(self.tasks)

    def add(self, description: str) -> Task:
        """Append a plain task and save."""
        return self._append(Task.plain(description))

    def add_dated(self, description: str, due_date: date) -> Task:
        """Append a task with a due date and save."""
        return self._append(Task.dated(description, due_date))

    def list_tasks(self) -> List[Task]:
        """Return the tasks in display order."""
        return list(self.tasks)

    def complete(self, number: int) -> Task:
        """Mark task ``number`` as completed and save.

        Completing a task that is already completed is not an error.
        """
        task = self.get(number)
        task.complete()
        logger.debug(f"Completed task {number}: {task.description}")
        self.store.save(self.tasks)
        return task

    def delete(self, number: int) -> Task:
        """Remove task ``number`` and save. Later tasks shift down by one."""
        self.get(number)
        task = self.tasks.pop(number - 1)
        logger.debug(f"Deleted task {number}: {task.description}")
        self.store.save(self.tasks)
        return task

    def get(self, number: int) -> Task:
        """Get a task by its 1-based number."""
        if not 1 <= number <= len(self.tasks):
            raise InvalidTaskNumberError(number, len(self.tasks))
        return self.tasks[number - 1]

    def _append(self, task: Task) -> Task:
        self.tasks.append(task)
        logger.debug(f"Added task {len(self.tasks)}: {task.description}")
        self.store.save(self.tasks)
        return task
