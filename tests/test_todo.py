"""Tests for Task model."""

import pytest
from datetime import date

from plaintodo.errors import InvalidInputError
from plaintodo.todo import Task, TaskKind


class TestTask:
    """Test Task model functionality."""

    def test_plain_task_creation(self):
        """Test basic task creation."""
        task = Task.plain("Buy milk")

        assert task.description == "Buy milk"
        assert task.kind == TaskKind.PLAIN
        assert task.due_date is None
        assert task.completed is False
        assert not task.is_dated

    def test_dated_task_creation(self):
        task = Task.dated("Finish report", date(2024, 3, 15))

        assert task.kind == TaskKind.DATED
        assert task.due_date == date(2024, 3, 15)
        assert task.completed is False
        assert task.is_dated

    def test_task_completion(self):
        """Test task completion."""
        task = Task.plain("Buy milk")
        task.complete()
        assert task.completed is True

    def test_complete_is_idempotent(self):
        task = Task.dated("Finish report", date(2024, 3, 15))
        task.complete()
        task.complete()

        assert task.completed is True
        assert task == Task(
            "Finish report", TaskKind.DATED, date(2024, 3, 15), completed=True
        )

    @pytest.mark.parametrize("description", ["", "two\nlines", "carriage\rreturn"])
    def test_invalid_description_rejected(self, description):
        with pytest.raises(InvalidInputError):
            Task.plain(description)

    def test_variant_invariants(self):
        """The kind tag and the due date must agree."""
        with pytest.raises(InvalidInputError):
            Task("No date", kind=TaskKind.DATED)

        with pytest.raises(InvalidInputError):
            Task("Has date", kind=TaskKind.PLAIN, due_date=date(2024, 1, 1))


class TestTaskRender:
    """Test rendering tasks to persisted lines."""

    def test_render_plain(self):
        task = Task.plain("Buy milk")
        assert task.render() == "[ ] Buy milk"

        task.complete()
        assert task.render() == "[X] Buy milk"

    def test_render_dated(self):
        task = Task.dated("Finish report", date(2024, 3, 15))
        assert task.render() == "[ ] Finish report (due: 2024-03-15)"

        task.complete()
        assert task.render() == "[X] Finish report (due: 2024-03-15)"

    def test_render_pads_date_fields(self):
        task = Task.dated("Ancient task", date(5, 3, 7))
        assert task.render() == "[ ] Ancient task (due: 0005-03-07)"


class TestTaskOverdue:
    """Test overdue detection."""

    def test_overdue(self):
        task = Task.dated("Pay rent", date(2024, 3, 1))

        assert task.is_overdue(today=date(2024, 3, 2))
        assert not task.is_overdue(today=date(2024, 3, 1))
        assert not task.is_overdue(today=date(2024, 2, 28))

    def test_completed_task_not_overdue(self):
        task = Task.dated("Pay rent", date(2024, 3, 1))
        task.complete()
        assert not task.is_overdue(today=date(2024, 3, 2))

    def test_plain_task_never_overdue(self):
        assert not Task.plain("Someday").is_overdue(today=date(2999, 1, 1))
