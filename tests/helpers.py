"""Shared fixtures for filesystem and prompt driven tests."""

from __future__ import annotations

import io
import os
from pathlib import Path

from rich.console import Console

from console_ui import Choice, ConsoleUI

BASE_TIME = 1_700_000_000


def make_file(directory: Path, name: str, age_rank: int, size: int = 10) -> Path:
    """Create *name* with a modification time ``age_rank`` minutes after BASE_TIME."""
    path = directory / name
    path.write_bytes(b"x" * size)
    stamp = BASE_TIME + age_rank * 60
    os.utime(path, (stamp, stamp))
    return path


class CapturingUI(ConsoleUI):
    """ConsoleUI writing stdout and stderr output to in-memory buffers."""

    def __init__(self) -> None:
        self.out = io.StringIO()
        self.err = io.StringIO()
        super().__init__(
            console=Console(file=self.out, width=120, force_terminal=False, highlight=False),
            err_console=Console(file=self.err, width=120, force_terminal=False, highlight=False),
        )

    @property
    def output(self) -> str:
        return self.out.getvalue()

    @property
    def errors(self) -> str:
        return self.err.getvalue()


class ScriptedPrompter:
    """Prompter replaying canned answers instead of reading the terminal."""

    def __init__(self, choice: Choice | None = None, picks: list[str] | None = None) -> None:
        self.choice = choice
        self.picks = picks
        self.questions: list[str] = []
        self.offered: list[str] | None = None

    def ask_yes_no_pick(self, question: str) -> Choice:
        self.questions.append(question)
        if self.choice is None:
            raise AssertionError("unexpected confirmation prompt")
        return self.choice

    def ask_multi_select(self, items: list[str], title: str = "Select items") -> list[str]:
        self.questions.append(title)
        self.offered = list(items)
        if self.picks is None:
            raise AssertionError("unexpected multi-select prompt")
        return list(self.picks)
