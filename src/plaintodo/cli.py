"""Command-line interface for plaintodo."""

import logging
import sys
from datetime import datetime
from functools import wraps
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import get_config, load_config
from .errors import InvalidInputError, InvalidTaskNumberError, StorageError
from .logging_setup import resolve_level, setup_logging
from .manager import TaskManager
from .storage import TaskFileStore
from .todo import Task


logger = logging.getLogger(__name__)

USAGE = (
    "Usage: todo <command> [arguments]\n"
    'Commands: list, add "task", done <number>, delete <number>'
)


def make_console() -> Console:
    """Create the console used for command output."""
    config = get_config()
    return Console(no_color=config.no_color, emoji=False, highlight=False, soft_wrap=True)


def get_console() -> Console:
    """Get the console of the running command."""
    ctx = click.get_current_context()
    return ctx.obj["console"]


def get_manager() -> TaskManager:
    """Get a task manager loaded from the configured task file."""
    ctx = click.get_current_context()
    task_file = ctx.obj["task_file"] or get_config().get_task_path()
    return TaskManager(TaskFileStore(task_file))


def parse_task_number(value: str) -> int:
    """Parse a task number typed by the user."""
    try:
        return int(value)
    except ValueError:
        raise InvalidTaskNumberError(value) from None


def format_task_for_display(number: int, task: Task) -> str:
    """Format a numbered task line for the console."""
    text = escape(f"{number}. {task.render()}")
    if task.is_overdue():
        return f"[red]{text}[/red]"
    if task.completed:
        return f"[dim]{text}[/dim]"
    return text


def handle_errors(func):
    """Report plaintodo errors on the console instead of crashing."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        console = get_console()
        try:
            return func(*args, **kwargs)
        except InvalidTaskNumberError as e:
            console.print(f"[yellow]{escape(str(e))}[/yellow]")
        except InvalidInputError as e:
            console.print(f"[yellow]Invalid input: {escape(str(e))}[/yellow]")
        except StorageError as e:
            logger.debug(f"Save failed: {e!r}")
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            sys.exit(1)

    return wrapper


class TodoGroup(click.Group):
    """Command group that reports unknown commands instead of failing."""

    def resolve_command(self, ctx, args):
        cmd_name = args[0] if args else None
        if cmd_name and not cmd_name.startswith("-") and self.get_command(ctx, cmd_name) is None:
            return cmd_name, unknown_command, args[1:]
        return super().resolve_command(ctx, args)


@click.command(context_settings={"ignore_unknown_options": True}, hidden=True)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def unknown_command(ctx, args):
    """Report an unknown command."""
    get_console().print(f"[yellow]Unknown command: {escape(ctx.info_name)}[/yellow]")


@click.group(cls=TodoGroup, invoke_without_command=True)
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Path to config file")
@click.option("--file", "-f", "task_file", type=click.Path(dir_okay=False, path_type=Path),
              help="Task file to use instead of the configured one")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.version_option(__version__, prog_name="plaintodo")
@click.pass_context
def main(ctx, config_path, task_file, verbose):
    """plaintodo - a to-do list kept in a plain text file."""
    ctx.ensure_object(dict)

    setup_logging(logging.DEBUG if verbose else logging.WARNING)
    config = load_config(config_path)
    if not verbose:
        logging.getLogger("plaintodo").setLevel(resolve_level(config.log_level))

    ctx.obj["console"] = make_console()
    ctx.obj["task_file"] = task_file
    logger.debug(f"Using task file {task_file or config.get_task_path()}")

    if ctx.invoked_subcommand is None:
        ctx.obj["console"].print(USAGE, markup=False)


@main.command(name="list")
@click.option("--pending", is_flag=True, help="Hide completed tasks")
@handle_errors
def list_tasks(pending):
    """List tasks."""
    console = get_console()
    tasks = get_manager().list_tasks()

    console.print("[bold]To-Do List[/bold]")
    if not tasks:
        console.print("No tasks.")
        return

    shown = [(n, task) for n, task in enumerate(tasks, start=1)
             if not (pending and task.completed)]
    if not shown:
        console.print("No pending tasks.")
        return

    for number, task in shown:
        console.print(format_task_for_display(number, task))


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("description", nargs=-1, type=click.UNPROCESSED)
@click.option("--due", help="Due date (YYYY-MM-DD)")
@handle_errors
def add(description, due):
    """Add a task."""
    console = get_console()
    text = " ".join(description)
    if not text.strip():
        console.print("Please enter a description for the task to add.")
        return

    due_date = None
    if due:
        try:
            due_date = datetime.strptime(due, "%Y-%m-%d").date()
        except ValueError:
            raise InvalidInputError(f"invalid due date '{due}', use YYYY-MM-DD") from None

    manager = get_manager()
    if due_date is None:
        task = manager.add(text)
        console.print(f"[green]Added task '{escape(task.description)}'.[/green]")
    else:
        task = manager.add_dated(text, due_date)
        console.print(
            f"[green]Added task '{escape(task.description)}' "
            f"(due: {task.due_date.isoformat()}).[/green]"
        )


@main.command(context_settings={"ignore_unknown_options": True, "allow_extra_args": True})
@click.argument("number", required=False)
@handle_errors
def done(number):
    """Mark a task as completed."""
    console = get_console()
    if number is None:
        console.print("Please enter the number of the task to complete.")
        return

    task_number = parse_task_number(number)
    get_manager().complete(task_number)
    console.print(f"[green]Marked task {task_number} as complete.[/green]")


@main.command(context_settings={"ignore_unknown_options": True, "allow_extra_args": True})
@click.argument("number", required=False)
@handle_errors
def delete(number):
    """Delete a task."""
    console = get_console()
    if number is None:
        console.print("Please enter the number of the task to delete.")
        return

    task = get_manager().delete(parse_task_number(number))
    console.print(f"[green]Deleted task '{escape(task.description)}'.[/green]")


if __name__ == "__main__":
    main()
