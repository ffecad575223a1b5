from __future__ import annotations

import io

import pytest
from rich.console import Console

from core.models import CATEGORY_ORDER, Category
from core.services.lookup import CategoryBinding
from core.services.selection_service import SelectionStore
from infrastructure.console import THEME
from tests.fakes import FakeConnector, FakePanel


@pytest.fixture
def panels() -> dict[Category, FakePanel]:
    return {c: FakePanel() for c in CATEGORY_ORDER}


@pytest.fixture
def store() -> SelectionStore:
    return SelectionStore()


@pytest.fixture
def connector() -> FakeConnector:
    return FakeConnector()


@pytest.fixture
def bindings(panels, connector) -> dict[Category, CategoryBinding]:
    return {c: CategoryBinding(category=c, panel=panels[c], connector=connector) for c in panels}


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=120, theme=THEME, color_system=None)
