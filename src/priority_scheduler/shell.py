"""Interactive menu shell over a :class:`TaskWorkspace`.

Every menu entry reads a few answers, calls one workspace operation and
renders the result with rich.  Prompting goes through an injectable ``ask``
callable so the shell can be scripted.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from .errors import CycleDetected, SchedulerError
from .task_engine import Task, TaskWorkspace

MENU_ITEMS: tuple[tuple[str, str], ...] = (
    ("1", "Add Task"),
    ("2", "Show Tasks"),
    ("3", "Show Next Task"),
    ("4", "Show Task Details"),
    ("5", "Sort Tasks"),
    ("6", "Show Task History"),
    ("7", "Change Task Status"),
    ("8", "Add Dependency"),
    ("9", "Exit"),
)
EXIT_CHOICE = 9


class TaskShell:
    """Menu-driven coordinator for one workspace."""

    def __init__(
        self,
        workspace: TaskWorkspace,
        *,
        console: Optional[Console] = None,
        ask: Optional[Callable[[str], str]] = None,
        show_dependencies: bool = True,
    ):
        """Initialize the shell.

        Args:
            workspace: Workspace every command operates on.
            console: Output console; a default rich console when omitted.
            ask: Prompt function returning one line of input per call.
            show_dependencies: Add a dependency column to task tables.
        """
        self.workspace = workspace
        self.console = console or Console()
        self._ask = ask or (lambda message: Prompt.ask(message, console=self.console))
        self.show_dependencies = show_dependencies
        self._commands: dict[int, Callable[[], None]] = {
            1: self.add_task,
            2: self.show_tasks,
            3: self.show_next_task,
            4: self.show_task_details,
            5: self.sort_tasks,
            6: self.show_task_history,
            7: self.change_task_status,
            8: self.add_dependency,
        }

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def run(self) -> int:
        """Serve menu choices until the user exits or input ends."""
        try:
            while True:
                self.show_menu()
                raw = self._ask("Enter your choice")
                try:
                    choice = int(raw.strip())
                except ValueError:
                    self.console.print("[red]Invalid input. Please enter a number.[/red]")
                    continue
                if choice == EXIT_CHOICE:
                    self.console.print("Exiting...")
                    return 0
                if not self.dispatch(choice):
                    self.console.print("[red]Invalid choice. Please try again.[/red]")
        except (EOFError, KeyboardInterrupt):
            self.console.print("\nExiting...")
            return 0

    def dispatch(self, choice: int) -> bool:
        """Run the command for *choice*. Returns False for unknown choices."""
        command = self._commands.get(choice)
        if command is None:
            return False
        try:
            command()
        except SchedulerError as exc:
            logger.warning("Command {} failed: {}", choice, exc)
            self.console.print(f"[red]An error occurred: {escape(str(exc))}[/red]")
        except EOFError:
            raise
        except Exception as exc:
            logger.exception("Command {} raised an unexpected error", choice)
            self.console.print(f"[red]An error occurred: {escape(str(exc))}[/red]")
        return True

    def show_menu(self) -> None:
        self.console.print("\n[bold]Priority & Time Scheduler[/bold]")
        for key, label in MENU_ITEMS:
            self.console.print(f"{key}. {label}")

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def add_task(self) -> None:
        title = self._ask("Enter title")
        description = self._ask("Enter description")
        priority = self._ask_int("Enter priority (integer)")
        deadline = self._ask("Enter deadline")
        self.workspace.create_task(title, description, priority, deadline)
        self.console.print("[green]Task added successfully.[/green]")

    def show_tasks(self) -> None:
        tasks = self.workspace.list_tasks()
        if not tasks:
            self.console.print("No tasks available.")
            return
        self.console.print(self._task_table("Tasks", tasks))

    def show_next_task(self) -> None:
        task = self.workspace.next_task()
        if task is None:
            self.console.print("No tasks available.")
            return
        self.console.print("[bold]Next Task:[/bold]")
        self._print_task(task)

    def show_task_details(self) -> None:
        title = self._ask("Enter task title")
        task = self.workspace.find_task(title)
        if task is None:
            self.console.print("Task not found.")
            return
        self._print_task(task)

    def sort_tasks(self) -> None:
        try:
            ordered = self.workspace.topological_order()
        except CycleDetected as exc:
            self.console.print(f"[red]{escape(str(exc))}[/red]")
            return
        if not ordered:
            self.console.print("No tasks available.")
            return
        self.console.print(self._task_table("Sorted Tasks", ordered))

    def show_task_history(self) -> None:
        history = self.workspace.drain_history()
        if not history:
            self.console.print("No task history available.")
            return
        self.console.print(self._task_table("Task History", history))

    def change_task_status(self) -> None:
        if not self.workspace.list_tasks():
            self.console.print("No tasks available to change status.")
            return
        title = self._ask("Enter task title")
        if self.workspace.find_task(title) is None:
            self.console.print("Task not found.")
            return
        status = self._ask("Enter new status")
        self.workspace.set_status(title, status)
        self.console.print("[green]Task status updated successfully.[/green]")

    def add_dependency(self) -> None:
        dependent = self._lookup("Enter title of the dependent task")
        if dependent is None:
            return
        prerequisite = self._lookup("Enter title of the task it depends on")
        if prerequisite is None:
            return
        self.workspace.add_dependency(dependent, prerequisite)
        self.console.print(
            f"[green]{escape(dependent.title)} now depends on {escape(prerequisite.title)}.[/green]"
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _ask_int(self, message: str) -> int:
        while True:
            raw = self._ask(message)
            try:
                return int(raw.strip())
            except ValueError:
                self.console.print("[red]Invalid input. Priority should be an integer.[/red]")

    def _lookup(self, message: str) -> Optional[Task]:
        task = self.workspace.find_task(self._ask(message))
        if task is None:
            self.console.print("Task not found.")
        return task

    def _print_task(self, task: Task) -> None:
        self.console.print(f"  Title:       {escape(task.title)}")
        self.console.print(f"  Description: {escape(task.description)}")
        self.console.print(f"  Priority:    {task.priority}")
        self.console.print(f"  Deadline:    {escape(task.deadline)}")
        self.console.print(f"  Status:      {escape(task.status)}")
        if self.show_dependencies and task.dependencies:
            deps = ", ".join(dep.title for dep in task.dependencies)
            self.console.print(f"  Depends on:  {escape(deps)}")

    def _task_table(self, title: str, tasks: Iterable[Task]) -> Table:
        table = Table(title=title)
        table.add_column("Title", style="cyan")
        table.add_column("Description")
        table.add_column("Priority", justify="right")
        table.add_column("Deadline")
        table.add_column("Status")
        if self.show_dependencies:
            table.add_column("Depends on", style="dim")
        for task in tasks:
            row = [
                escape(task.title),
                escape(task.description),
                str(task.priority),
                escape(task.deadline),
                escape(task.status),
            ]
            if self.show_dependencies:
                row.append(escape(", ".join(dep.title for dep in task.dependencies)))
            table.add_row(*row)
        return table
