"""Interactive console menu for tasker.

The menu is the only layer that talks to the user. It turns raw input into
store calls, times and logs each one, and renders either the result or the
reported error before returning to the menu.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tasker.config import DisplayConfig
from tasker.errors import TaskerError, ValidationError
from tasker.instrumentation import OperationTimer
from tasker.models import CompletionOutcome, Task
from tasker.resources import ResourceUsage, sample_usage
from tasker.store import TaskStore

MENU_OPTIONS: list[tuple[str, str]] = [
    ("1", "Add task"),
    ("2", "List tasks"),
    ("3", "Delete task"),
    ("4", "Mark task as completed"),
    ("5", "Exit"),
]

EXIT_CHOICE = "5"


def format_task(task: Task) -> str:
    """Render a task as ``[id] title - description (status)``."""
    return str(task)


def parse_task_id(raw: str) -> int | None:
    """Parse user input as a task id, or return None if it is not an integer."""
    try:
        return int(raw.strip())
    except ValueError:
        return None


class TaskMenu:
    """Console menu driving a TaskStore.

    Args:
        store: Store the menu operates on.
        logger: Session logger, as returned by ``setup_logging``.
        display: Display settings.
        console: Rich Console instance (creates default if None).
        sampler: Resource sampler, called with the configured interval.
    """

    def __init__(
        self,
        store: TaskStore,
        logger: logging.Logger,
        display: DisplayConfig | None = None,
        console: Console | None = None,
        sampler: Callable[[float], ResourceUsage] = sample_usage,
    ) -> None:
        self.store = store
        self.log = logger
        self.display = display or DisplayConfig()
        self.console = console or Console()
        self._sampler = sampler
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.add_task,
            "2": self.list_tasks,
            "3": self.delete_task,
            "4": self.complete_task,
        }

    def run(self) -> None:
        """Run the menu until the user exits or input ends."""
        self.log.info("Application started")

        while True:
            try:
                if not self._step():
                    return
            except click.Abort:
                self.log.info("Input closed, leaving menu")
                self.console.print()
                return

    def _step(self) -> bool:
        """Show the menu once and handle one choice. Returns False on exit."""
        if self.display.clear_screen:
            self.console.clear()
        if self.display.show_resources:
            self.show_resources()

        self._print_menu()
        choice = click.prompt("\nYour choice", default="", show_default=False).strip()
        self.log.info("User selected: %s", choice)

        if choice == EXIT_CHOICE:
            self.log.info("Application shutting down")
            self.console.print("\nGoodbye!")
            return False

        action = self._actions.get(choice)
        if action is None:
            self.log.warning("Unknown command: %s", choice)
            self.console.print("\n[yellow]Unknown command[/yellow]")
        else:
            try:
                action()
            except TaskerError as e:
                self.log.error("Operation failed: %s", e)
                self.console.print(f"\n[red]Error:[/red] {escape(str(e))}")

        self._pause()
        return True

    def _print_menu(self) -> None:
        self.console.print("\n[bold]Task Manager[/bold]")
        self.console.print("------------\n")
        self.console.print("Choose an action:\n")
        for key, label in MENU_OPTIONS:
            self.console.print(f"  {key} - {label}")

    def _pause(self) -> None:
        if self.display.pause_after_action:
            click.pause("\nPress any key to continue...")

    def show_resources(self) -> ResourceUsage:
        """Sample and print process memory and CPU usage."""
        usage = self._sampler(self.display.cpu_sample_seconds)
        self.console.print(f"[cyan]{usage.describe()}[/cyan]")
        self.log.info(
            "Resource usage: %s",
            usage.describe(),
            extra={"memory_mb": usage.memory_mb, "cpu_percent": round(usage.cpu_percent, 2)},
        )
        return usage

    def _prompt_task_id(self, action: str) -> int | None:
        raw = click.prompt(f"\nTask ID to {action}", default="", show_default=False)
        task_id = parse_task_id(raw)
        if task_id is None:
            self.log.warning("Invalid task id input for %s: %r", action, raw)
            self.console.print("\n[yellow]Invalid id[/yellow]")
        return task_id

    def add_task(self) -> None:
        """Prompt for a title and description and add a task."""
        title = click.prompt("\nTask title", default="", show_default=False)
        description = click.prompt("Task description", default="", show_default=False)

        with OperationTimer(self.log, "add_task") as timer:
            timer.log.info("Adding task: %s", title)
            try:
                task = self.store.add(title, description)
            except ValidationError:
                timer.log.warning("Rejected empty task title")
                raise
            timer.log.info(
                "Task added: %s", format_task(task), extra={"task": task.model_dump(mode="json")}
            )
            timer.log.debug("Task details: id=%d created_at=%s", task.id, task.created_at)
            timer.complete()

        self.console.print(f"\n[green]Task added[/green] (id {task.id})")

    def list_tasks(self) -> None:
        """Print every task in creation order."""
        with OperationTimer(self.log, "list_tasks") as timer:
            tasks = self.store.list()
            if not tasks:
                timer.log.info("Task list is empty")
                self.console.print("\n[dim]Task list is empty[/dim]")
            else:
                self.console.print(self._build_table(tasks))
                for task in tasks:
                    timer.log.debug("Displayed task: %s", format_task(task))
                timer.log.info("Listed %d tasks", len(tasks), extra={"task_count": len(tasks)})
            timer.complete()

    def _build_table(self, tasks: list[Task]) -> Table:
        table = Table(title="Tasks", show_header=True)
        table.add_column("ID", style="cyan", justify="right")
        table.add_column("Title", style="white")
        table.add_column("Description", style="white")
        table.add_column("Status")

        for task in tasks:
            status = f"[green]{task.status}[/green]" if task.is_completed else task.status
            table.add_row(str(task.id), escape(task.title), escape(task.description), status)

        return table

    def delete_task(self) -> None:
        """Prompt for an id and delete that task."""
        task_id = self._prompt_task_id("delete")
        if task_id is None:
            return

        with OperationTimer(self.log, "delete_task") as timer:
            timer.log.info("Deleting task %d", task_id, extra={"task_id": task_id})
            self.store.delete(task_id)
            timer.log.info("Task %d deleted", task_id, extra={"task_id": task_id})
            timer.complete()

        self.console.print("\n[green]Task deleted[/green]")

    def complete_task(self) -> None:
        """Prompt for an id and mark that task as completed."""
        task_id = self._prompt_task_id("complete")
        if task_id is None:
            return

        with OperationTimer(self.log, "complete_task") as timer:
            timer.log.info("Completing task %d", task_id, extra={"task_id": task_id})
            outcome = self.store.complete(task_id)
            if outcome is CompletionOutcome.ALREADY_COMPLETED:
                timer.log.warning("Task %d was already completed", task_id, extra={"task_id": task_id})
            else:
                timer.log.info("Task %d marked as completed", task_id, extra={"task_id": task_id})
                timer.complete()

        if outcome is CompletionOutcome.ALREADY_COMPLETED:
            self.console.print(f"\n[yellow]{outcome.value}[/yellow]")
        else:
            self.console.print(f"\n[green]{outcome.value}[/green]")
