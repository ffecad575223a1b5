"""ListPanel: renders one category's resources as a rich table with a cursor."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from rich.console import Console
from rich.errors import ConsoleError
from rich.markup import escape
from rich.table import Table

from app.views.presentation import HEADERS, display_strings
from core.models import Category, ResourceItem
from core.services.interfaces import RerenderError


class ListPanel:
    """A filterable list of one category's items.

    Implements the panel adapter the selection controller depends on. The
    cursor is an index into the visible (filtered) items.
    """

    def __init__(
        self,
        category: Category,
        console: Console,
        is_selected: Callable[[ResourceItem], bool] = lambda _item: False,
        items: Iterable[ResourceItem] = (),
    ) -> None:
        self.category = category
        self.console = console
        self.is_selected = is_selected
        self._items: list[ResourceItem] = list(items)
        self._filter = ""
        self._cursor = 0

    @property
    def title(self) -> str:
        return f"{self.category.label.capitalize()}s"

    @property
    def cursor(self) -> int:
        return self._cursor

    def set_items(self, items: Iterable[ResourceItem]) -> None:
        """Replace the items, keeping the cursor within range."""
        self._items = list(items)
        self._clamp_cursor()

    def set_filter(self, text: str) -> None:
        self._filter = text.strip().lower()
        self._cursor = 0

    def visible_items(self) -> list[ResourceItem]:
        if not self._filter:
            return list(self._items)
        return [it for it in self._items if self._filter in it.name.lower()]

    def all_items(self) -> list[ResourceItem]:
        return list(self._items)

    def focused_item(self) -> ResourceItem | None:
        visible = self.visible_items()
        if not visible:
            return None
        return visible[min(self._cursor, len(visible) - 1)]

    def advance_focus(self) -> None:
        """Move down one line; stays on the last line."""
        self._cursor += 1
        self._clamp_cursor()

    def retreat_focus(self) -> None:
        self._cursor = max(0, self._cursor - 1)

    def _clamp_cursor(self) -> None:
        last = max(0, len(self.visible_items()) - 1)
        self._cursor = min(max(self._cursor, 0), last)

    def build_table(self) -> Table:
        title = self.title
        if self._filter:
            title = f"{title} (filter: {escape(self._filter)})"
        table = Table(title=title, show_lines=False)
        for header in HEADERS[self.category]:
            table.add_column(header)
        for idx, item in enumerate(self.visible_items()):
            style = "reverse" if idx == self._cursor else None
            table.add_row(*display_strings(item, self.is_selected(item)), style=style)
        return table

    def rerender(self) -> None:
        try:
            self.console.print(self.build_table())
        except (ConsoleError, OSError) as ex:
            raise RerenderError(f"Cannot draw {self.title}: {ex}") from ex
