"""SelectionController: mediates between the selection store and list panels."""

from __future__ import annotations

from collections.abc import Mapping

from loguru import logger

from core.models import Category, ResourceItem
from core.services.interfaces import PanelAdapter
from core.services.selection_service import SelectionStore


class SelectionController:
    """Toggle, select-all, deselect-all and counting across categories.

    Every mutation is committed to the store before the panel is asked to
    re-render, so a `RerenderError` never leaves the store half-updated.
    """

    def __init__(self, store: SelectionStore, panels: Mapping[Category, PanelAdapter]) -> None:
        """Initialize with the store and one panel per category.

        Args:
            store: Selection state shared with the orchestrator.
            panels: Panel adapter for each category managed by `store`.
        """
        missing = [c for c in store.categories if c not in panels]
        if missing:
            raise ValueError(f"No panel for categories: {[c.label for c in missing]}")
        self.store = store
        self.panels = panels

    def toggle(self, category: Category) -> bool | None:
        """Toggle the focused item and move the cursor down.

        Returns:
            The new membership state, or None when the panel has no focused item.
        """
        panel = self.panels[category]
        item = panel.focused_item()
        if item is None:
            return None

        selected = self.store.toggle(category, item.item_id)
        logger.debug("Toggled {} {} -> {}", category.label, item.name, selected)

        # Next item under the cursor so a run can be marked by repeated toggles
        panel.advance_focus()
        panel.rerender()
        return selected

    def select_all_visible(self, category: Category) -> int:
        """Select every visible (filtered) item; return the category's new count."""
        panel = self.panels[category]
        self.store.add_many(category, (item.item_id for item in panel.visible_items()))
        count = self.store.count(category)
        logger.debug("Selected all visible {}s: {} selected", category.label, count)
        panel.rerender()
        return count

    def deselect_all(self, category: Category) -> None:
        self.store.clear(category)
        logger.debug("Deselected all {}s", category.label)
        self.panels[category].rerender()

    def clear_everything(self) -> None:
        """Reset every category without touching the panels."""
        self.store.clear_all()

    def rerender_all(self) -> None:
        for category in self.store.categories:
            self.panels[category].rerender()

    def is_selected(self, item: ResourceItem) -> bool:
        return self.store.is_selected(item.category, item.item_id)

    def total_count(self) -> int:
        return self.store.total_count()

    def per_category_counts(self) -> dict[Category, int]:
        return self.store.per_category_counts()

    def has_any_selection(self) -> bool:
        return self.store.has_any_selection()
