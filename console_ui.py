#!/usr/bin/env python3
"""
Console UI Module using Rich

Styled output, file tables, progress bars and the interactive prompts used
to confirm a deletion. The prompts are exposed through the ``Prompter``
protocol so a scripted implementation can stand in for the terminal.
"""

from enum import Enum
from typing import Optional, Protocol

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.prompt import Prompt


class Choice(Enum):
    """Answer to the deletion confirmation prompt"""

    YES = "yes"
    NO = "no"
    PICK = "pick"


class Prompter(Protocol):
    def ask_yes_no_pick(self, question: str) -> Choice: ...

    def ask_multi_select(self, items: list[str], title: str) -> list[str]: ...


def parse_selection(response: str, count: int) -> list[int]:
    """Turn a selection like ``1,3,5-7``, ``all`` or ``none`` into 0-based indices

    Raises ValueError on malformed input or numbers outside 1..count.
    """
    response = response.strip().lower()
    if response in ("all", "*"):
        return list(range(count))
    if response in ("none", "-"):
        return []

    indices: list[int] = []
    for part in response.split(","):
        part = part.strip()
        if not part:
            continue
        if "-" in part:
            start_text, end_text = part.split("-", 1)
            start, end = int(start_text), int(end_text)
            if start > end:
                raise ValueError(f"Invalid range: {part}")
            numbers = range(start, end + 1)
        else:
            numbers = [int(part)]
        for number in numbers:
            if not 1 <= number <= count:
                raise ValueError(f"Out of range: {number}")
            if number - 1 not in indices:
                indices.append(number - 1)
    return sorted(indices)


class ConsoleUI:
    """Console UI handler using Rich"""

    def __init__(
        self,
        force_terminal: Optional[bool] = None,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
    ):
        """Initialize consoles; errors go to stderr unless a console is given"""
        self.console = console or Console(force_terminal=force_terminal, highlight=False)
        self.err_console = err_console or console or Console(
            stderr=True, force_terminal=force_terminal, highlight=False
        )

    # Basic styled output methods
    def print_success(self, message: str):
        """Print success message in green"""
        self.console.print(message, style="green")

    def print_error(self, message: str):
        """Print error message in red"""
        self.err_console.print(escape(message), style="red bold")

    def print_warning(self, message: str):
        """Print warning message in yellow"""
        self.console.print(message, style="yellow")

    def print_info(self, message: str):
        """Print info message in cyan"""
        self.console.print(message, style="cyan")

    def print_plain(self, message: str):
        """Print message in plain white"""
        self.console.print(message, style="white")

    def create_progress(self):
        """Create a Rich progress context manager for batch operations"""
        return Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            TextColumn("({task.completed}/{task.total})"),
            TimeElapsedColumn(),
            console=self.console,
            transient=True,
        )

    def show_operation_summary(self, successful: list[str], failed: list[tuple], operation_name: str = "deleted"):
        """Show summary of completed operations"""
        if successful:
            self.print_success(f"Successfully {operation_name} {len(successful)} files")

        if failed:
            self.print_error(f"Failed on {len(failed)} files:")
            for filename, error in failed:
                self.err_console.print(f"[red dim]  • {escape(filename)}: {escape(str(error))}[/red dim]")

    # Interactive prompts
    def prompt(self, question: str, default: Optional[str] = None, choices: Optional[list[str]] = None) -> str:
        """Ask for text input with optional default and choices"""
        return Prompt.ask(question, default=default, choices=choices, console=self.console)

    def ask_yes_no_pick(self, question: str) -> Choice:
        """Ask whether to delete everything, nothing, or pick files by hand"""
        answer = self.prompt(question, default=Choice.NO.value, choices=[c.value for c in Choice])
        return Choice(answer)

    def ask_multi_select(self, items: list[str], title: str = "Select items") -> list[str]:
        """Let the user select a subset of items; all are selected by default"""
        if not items:
            return []

        self.console.print(f"\n[cyan]{title}:[/cyan]")
        for i, item in enumerate(items, 1):
            self.console.print(f"  [green]✓[/green] {i}. {escape(item)}")

        while True:
            response = self.prompt(
                "Enter numbers or ranges to keep selected (e.g., 1,3,5-7), 'all' or 'none'", default="all"
            )

            try:
                return [items[i] for i in parse_selection(response, len(items))]
            except ValueError:
                self.print_error("Invalid selection. Please try again.")
