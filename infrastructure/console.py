"""Rich-based terminal collaborators: confirmation, error panel, busy status."""

from __future__ import annotations

from collections.abc import Callable
import sys
from typing import IO, TypeVar

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm
from rich.theme import Theme

T = TypeVar("T")

THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "red",
        "success": "green",
        "accent": "#3ea6ff",
    }
)


def make_console(stream: IO[str] | None = None) -> Console:
    return Console(theme=THEME, file=stream or sys.stdout, highlight=False, soft_wrap=True)


class ConsoleConfirmation:
    """Yes/no prompt answered on the terminal."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def prompt(
        self,
        title: str,
        message: str,
        on_accept: Callable[[], object],
        on_decline: Callable[[], object] | None = None,
    ) -> None:
        panel = Panel(escape(message), title=escape(title), border_style="accent", expand=False)
        self.console.print(panel)
        if Confirm.ask(title, console=self.console, default=False):
            on_accept()
        elif on_decline is not None:
            on_decline()


class ConsoleErrorPanel:
    """Prints aggregated errors in a red panel."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def show(self, message: str) -> None:
        panel = Panel(escape(message), title="Error", border_style="error", expand=True)
        self.console.print(panel)


class ConsoleWaitingStatus:
    """Spinner shown while long-running work executes."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def run(self, message: str, work: Callable[[], T]) -> T:
        with self.console.status(message, spinner="dots"):
            return work()
