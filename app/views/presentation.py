"""Display strings for list rows, one builder per category."""

from __future__ import annotations

from collections.abc import Callable

from rich.markup import escape

from core.models import Category, ResourceItem

SELECTED_MARKER = "[green]\\[x][/green]"
UNSELECTED_MARKER = "[ ]"

HEADERS: dict[Category, list[str]] = {
    Category.CONTAINER: ["", "Name", "Status"],
    Category.IMAGE: ["", "Name", "Tag", "Size"],
    Category.VOLUME: ["", "Driver", "Name"],
    Category.NETWORK: ["", "Driver", "Name"],
}


def selection_marker(is_selected: bool) -> str:
    return SELECTED_MARKER if is_selected else UNSELECTED_MARKER


def format_decimal_bytes(size: int | float | None) -> str:
    """Human-readable size using powers of 1000, e.g. 1.2 GB."""
    value = float(size or 0)
    units = ["B", "kB", "MB", "GB", "TB", "PB"]
    idx = 0
    while value >= 1000 and idx < len(units) - 1:
        value /= 1000
        idx += 1
    if idx == 0:
        return f"{int(value)} B"
    return f"{value:.1f} {units[idx]}"


def _container_row(item: ResourceItem) -> list[str]:
    return [item.name, str(item.attrs.get("status", ""))]


def _image_row(item: ResourceItem) -> list[str]:
    return [
        item.name,
        str(item.attrs.get("tag", "")),
        format_decimal_bytes(item.attrs.get("size")),
    ]


def _driver_name_row(item: ResourceItem) -> list[str]:
    return [str(item.attrs.get("driver", "")), item.name]


_ROW_BUILDERS: dict[Category, Callable[[ResourceItem], list[str]]] = {
    Category.CONTAINER: _container_row,
    Category.IMAGE: _image_row,
    Category.VOLUME: _driver_name_row,
    Category.NETWORK: _driver_name_row,
}


def display_strings(item: ResourceItem, is_selected: bool) -> list[str]:
    """Row cells for `item`, starting with its selection marker.

    Cells other than the marker are markup-escaped.
    """
    cells = [escape(cell) for cell in _ROW_BUILDERS[item.category](item)]
    return [selection_marker(is_selected), *cells]
