"""JSON persistence for resource inventories.

An inventory file maps each category's plural label to a list of objects.
Containers and images are keyed by `id`, volumes and networks by `name`.
`InventoryConnector` removes items from a loaded inventory and refuses the
same removals a container engine would.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger

from core.models import CATEGORY_ORDER, Category, ResourceItem
from core.services.interfaces import RemoveError, RemoveOptions


class Inventory:
    """In-memory resources per category, in listing order."""

    def __init__(self, items: dict[Category, list[ResourceItem]] | None = None) -> None:
        self._items: dict[Category, list[ResourceItem]] = {c: [] for c in CATEGORY_ORDER}
        for category, rows in (items or {}).items():
            self._items[category] = list(rows)

    def items(self, category: Category) -> list[ResourceItem]:
        return list(self._items[category])

    def discard(self, item: ResourceItem) -> None:
        self._items[item.category] = [
            it for it in self._items[item.category] if it.item_id != item.item_id
        ]

    def __len__(self) -> int:
        return sum(len(rows) for rows in self._items.values())


def _parse_item(category: Category, row: dict[str, Any]) -> ResourceItem:
    key = category.key_field
    item_id = str(row.get(key) or "").strip()
    if not item_id:
        raise ValueError(f"{category.label} entry without '{key}': {row}")
    name = str(row.get("name") or item_id)
    attrs = {k: v for k, v in row.items() if k not in ("id", "name")}
    return ResourceItem(category=category, item_id=item_id, name=name, attrs=attrs)


def _dump_item(item: ResourceItem) -> dict[str, Any]:
    row: dict[str, Any] = {"name": item.name}
    if item.category.key_field == "id":
        row["id"] = item.item_id
    row.update(item.attrs)
    return row


class JsonInventoryRepository:
    """Load and save inventories in JSON format."""

    def load(self, path: str | Path) -> Inventory:
        """Read the inventory at `path`; unknown top-level keys are ignored."""
        with Path(path).open("r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Inventory must be a JSON object: {path}")

        items: dict[Category, list[ResourceItem]] = {}
        for category in CATEGORY_ORDER:
            rows = data.get(category.inventory_key, [])
            if not isinstance(rows, list):
                raise ValueError(f"'{category.inventory_key}' must be a list")
            items[category] = [_parse_item(category, row) for row in rows]

        inventory = Inventory(items)
        logger.info("Loaded inventory {} ({} items)", path, len(inventory))
        return inventory

    def save(self, path: str | Path, inventory: Inventory) -> None:
        data = {
            c.inventory_key: [_dump_item(it) for it in inventory.items(c)] for c in CATEGORY_ORDER
        }
        with Path(path).open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)


class InventoryConnector:
    """Deletion connector backed by an `Inventory`."""

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def remove(self, item: ResourceItem, options: RemoveOptions) -> None:
        attrs = item.attrs
        if attrs.get("locked"):
            raise RemoveError("resource busy")

        if item.category is Category.CONTAINER:
            if attrs.get("running") and not options.force:
                raise RemoveError(
                    "cannot remove a running container: stop the container before "
                    "removing or force remove"
                )
        elif item.category is Category.IMAGE:
            if attrs.get("children") and not options.prune_children:
                raise RemoveError("image has dependent child images")
        elif attrs.get("in_use") and (item.category is Category.NETWORK or not options.force):
            raise RemoveError(f"{item.category.label} is in use")

        self._inventory.discard(item)
        logger.debug("Removed {} {}", item.category.label, item.name)
