"""Per-category selection state decoupled from any UI toolkit.

The store only knows categories and identifiers. Panels, cursors and
rendering live with the controller and its adapters.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from core.models import CATEGORY_ORDER, Category


@dataclass(frozen=True)
class SelectionSnapshot:
    """Immutable copy of every category's selection, in category order."""

    entries: tuple[tuple[Category, tuple[str, ...]], ...]

    def __iter__(self) -> Iterator[tuple[Category, tuple[str, ...]]]:
        return iter(self.entries)

    def counts(self) -> dict[Category, int]:
        """Nonzero counts per category, in category order."""
        return {cat: len(ids) for cat, ids in self.entries if ids}

    @property
    def total(self) -> int:
        return sum(len(ids) for _, ids in self.entries)


class SelectionStore:
    """Holds the set of selected identifiers for each category.

    Sets are kept as insertion-ordered dicts so a snapshot iterates in the
    order items were marked.
    """

    def __init__(self, categories: Iterable[Category] = CATEGORY_ORDER) -> None:
        self._categories: tuple[Category, ...] = tuple(categories)
        if len(set(self._categories)) != len(self._categories):
            raise ValueError("Duplicate category in selection store")
        self._selected: dict[Category, dict[str, None]] = {c: {} for c in self._categories}

    @property
    def categories(self) -> tuple[Category, ...]:
        return self._categories

    def _bucket(self, category: Category) -> dict[str, None]:
        try:
            return self._selected[category]
        except KeyError:
            raise KeyError(f"Category not managed by this store: {category}") from None

    def is_selected(self, category: Category, item_id: str) -> bool:
        return item_id in self._bucket(category)

    def toggle(self, category: Category, item_id: str) -> bool:
        """Flip membership of `item_id` and return the new state."""
        bucket = self._bucket(category)
        if item_id in bucket:
            del bucket[item_id]
            return False
        bucket[item_id] = None
        return True

    def add_many(self, category: Category, item_ids: Iterable[str]) -> None:
        bucket = self._bucket(category)
        for item_id in item_ids:
            bucket[item_id] = None

    def clear(self, category: Category) -> None:
        self._bucket(category).clear()

    def clear_all(self) -> None:
        for bucket in self._selected.values():
            bucket.clear()

    def selected_ids(self, category: Category) -> tuple[str, ...]:
        return tuple(self._bucket(category))

    def count(self, category: Category) -> int:
        return len(self._bucket(category))

    def total_count(self) -> int:
        return sum(len(bucket) for bucket in self._selected.values())

    def per_category_counts(self) -> dict[Category, int]:
        """Nonzero counts in category order."""
        return {c: len(self._selected[c]) for c in self._categories if self._selected[c]}

    def has_any_selection(self) -> bool:
        return self.total_count() > 0

    def snapshot(self) -> SelectionSnapshot:
        return SelectionSnapshot(
            entries=tuple((c, tuple(self._selected[c])) for c in self._categories)
        )
