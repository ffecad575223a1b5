"""Settings access helpers for JSON-based configuration."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.models import Category
from core.services.interfaces import RemoveOptions


class JsonSettings:
    """Lightweight JSON settings reader with dotted-key access."""

    def __init__(self, settings_path: str | Path) -> None:
        self._path = Path(settings_path)
        if not self._path.exists():
            raise FileNotFoundError(f"settings.json not found: {self._path}")
        with self._path.open("r", encoding="utf-8") as f:
            self._data = json.load(f)

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return value for dotted `key`, or `default` if not present."""
        parts = key.split(".")
        node: Any = self._data
        for part in parts:
            if isinstance(node, dict) and part in node:
                node = node[part]
            else:
                return default
        return node


def remove_options_for(settings: JsonSettings | None, category: Category) -> RemoveOptions:
    """Removal policy for `category`.

    Containers, images and volumes are force-removed and images also prune
    their children. Network removal takes no options.
    """
    force = bool(settings.get("delete.force", True)) if settings else True
    prune = bool(settings.get("delete.prune_images", True)) if settings else True

    if category is Category.IMAGE:
        return RemoveOptions(force=force, prune_children=prune)
    if category is Category.NETWORK:
        return RemoveOptions()
    return RemoveOptions(force=force)
