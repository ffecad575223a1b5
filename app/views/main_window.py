"""MainWindow: line-command front end over the list panels."""

from __future__ import annotations

from collections.abc import Callable
from functools import partial

from loguru import logger
from rich.console import Console
from rich.markup import escape

from app.viewmodels.main_vm import MainVM
from core.models import Category
from core.services.interfaces import RerenderError

HELP_TEXT = (
    "Commands: t <cat> toggle | a <cat> select all | u <cat> deselect all | "
    "j/k <cat> cursor down/up | f <cat> <text> filter | d delete selected | "
    "l last delete log | q quit\n"
    "Categories: container, image, volume, network"
)


class MainWindow:
    """Reads commands, dispatches them to the view-model and redraws."""

    def __init__(self, vm: MainVM, console: Console) -> None:
        self.vm = vm
        self.console = console
        self._handlers: dict[str, Callable[[Category, str], object]] = {
            "t": lambda c, _arg: self.vm.handle_toggle(c),
            "a": lambda c, _arg: self.vm.handle_select_all(c),
            "u": lambda c, _arg: self.vm.handle_deselect_all(c),
            "j": lambda c, _arg: self._move(c, down=True),
            "k": lambda c, _arg: self._move(c, down=False),
            "f": self._filter,
        }

    def _move(self, category: Category, down: bool) -> None:
        panel = self.vm.panels[category]
        if down:
            panel.advance_focus()
        else:
            panel.retreat_focus()
        panel.rerender()

    def _filter(self, category: Category, text: str) -> None:
        panel = self.vm.panels[category]
        panel.set_filter(text)
        panel.rerender()

    def _delete_selected(self) -> None:
        if self.vm.handle_delete_selected() is None:
            self.console.print("[warning]Nothing selected[/warning]")
            return
        result = self.vm.last_result
        if result is not None and result.log_path:
            self.console.print(f"[info]Delete log:[/info] {escape(result.log_path)}")

    def _show_latest_log(self) -> None:
        path = self.vm.latest_delete_log()
        if path is None:
            self.console.print("[warning]No delete log yet[/warning]")
        else:
            self.console.print(f"[info]Latest delete log:[/info] {escape(path)}")

    def show(self) -> None:
        self.vm.controller.rerender_all()
        self.show_status()

    def show_status(self) -> None:
        self.console.print(f"[info]Selected:[/info] {self.vm.selection_summary}")

    def execute(self, line: str) -> bool:
        """Run one command line; return False when the user quits."""
        parts = line.strip().split(maxsplit=2)
        if not parts:
            return True
        cmd = parts[0].lower()
        if cmd == "q":
            return False
        if cmd in ("?", "h", "help"):
            self.console.print(HELP_TEXT)
            return True
        if cmd == "l":
            self._show_latest_log()
            return True
        if cmd == "d":
            action: Callable[[], object] = self._delete_selected
        else:
            handler = self._handlers.get(cmd)
            if handler is None or len(parts) < 2:
                self.console.print(
                    f"[warning]Unknown command: {escape(line.strip())}[/warning]\n{HELP_TEXT}"
                )
                return True
            try:
                category = Category.from_label(parts[1])
            except ValueError as ex:
                self.console.print(f"[warning]{escape(str(ex))}[/warning]")
                return True
            arg = parts[2] if len(parts) > 2 else ""
            action = partial(handler, category, arg)

        try:
            action()
        except RerenderError as ex:
            logger.error("Rerender failed: {}", ex)
            self.console.print(f"[error]{escape(str(ex))}[/error]")
        self.show_status()
        return True

    def run(self, read_line: Callable[[str], str] | None = None) -> int:
        """Loop until `q` or end of input."""
        read = read_line or (lambda prompt: self.console.input(prompt))
        self.show()
        while True:
            try:
                line = read("> ")
            except (EOFError, KeyboardInterrupt):
                break
            if not self.execute(line):
                break
        return 0
