"""Core domain models for container-engine resources and their categories."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Category(Enum):
    """A resource kind managed by one panel/connector pair.

    Definition order is the deletion order: resources that reference others
    come before the resources they reference.
    """

    CONTAINER = "container"
    IMAGE = "image"
    VOLUME = "volume"
    NETWORK = "network"

    @property
    def label(self) -> str:
        """Singular label used in user-facing messages."""
        return self.value

    @property
    def key_field(self) -> str:
        """Inventory field that identifies an item of this category."""
        if self in (Category.CONTAINER, Category.IMAGE):
            return "id"
        return "name"

    @property
    def inventory_key(self) -> str:
        """Top-level key of this category in an inventory file."""
        return f"{self.value}s"

    @classmethod
    def from_label(cls, label: str) -> Category:
        """Resolve a category from its label, accepting plurals."""
        text = label.strip().lower()
        for category in cls:
            if text in (category.value, category.inventory_key):
                return category
        raise ValueError(f"Unknown category: {label}")


CATEGORY_ORDER: tuple[Category, ...] = tuple(Category)


@dataclass
class ResourceItem:
    """A single listed resource.

    `item_id` is stable across re-renders; `name` is what users read.
    """

    category: Category
    item_id: str
    name: str
    attrs: dict[str, Any] = field(default_factory=dict)
