"""Per-category wiring of panel, connector, removal options and lookup."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

from core.models import Category, ResourceItem
from core.services.interfaces import DeletionConnector, PanelAdapter, RemoveOptions

Lookup = Callable[[Sequence[ResourceItem], str], "ResourceItem | None"]


def find_by_id(items: Iterable[ResourceItem], item_id: str) -> ResourceItem | None:
    """Return the item whose identifier is `item_id`, or None."""
    for item in items:
        if item.item_id == item_id:
            return item
    return None


@dataclass
class CategoryBinding:
    """Everything the controller and orchestrator need for one category."""

    category: Category
    panel: PanelAdapter
    connector: DeletionConnector
    options: RemoveOptions = field(default_factory=RemoveOptions)
    lookup: Lookup = find_by_id

    def resolve(self, item_id: str) -> ResourceItem | None:
        """Find the live item for `item_id` among all the panel's items."""
        return self.lookup(self.panel.all_items(), item_id)
