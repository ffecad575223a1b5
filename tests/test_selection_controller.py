import pytest

from core.models import Category
from core.services.interfaces import RerenderError
from core.services.selection_controller import SelectionController
from tests.fakes import make_item


@pytest.fixture
def controller(store, panels):
    panels[Category.CONTAINER].items = [
        make_item(Category.CONTAINER, "c1", "web"),
        make_item(Category.CONTAINER, "c2", "worker"),
        make_item(Category.CONTAINER, "c3", "db"),
    ]
    return SelectionController(store, panels)


def test_toggle_marks_focused_and_advances(controller, panels):
    panel = panels[Category.CONTAINER]
    assert controller.toggle(Category.CONTAINER) is True
    assert controller.toggle(Category.CONTAINER) is True
    assert panel.cursor == 2
    assert panel.rerenders == 2
    assert controller.store.selected_ids(Category.CONTAINER) == ("c1", "c2")


def test_toggle_same_item_twice_unmarks(controller, panels):
    panel = panels[Category.CONTAINER]
    controller.toggle(Category.CONTAINER)
    panel.cursor = 0
    assert controller.toggle(Category.CONTAINER) is False
    assert controller.total_count() == 0


def test_toggle_without_focus_is_noop(controller, panels):
    assert controller.toggle(Category.NETWORK) is None
    assert panels[Category.NETWORK].rerenders == 0
    assert not controller.has_any_selection()


def test_select_all_uses_visible_items_only(controller, panels):
    panel = panels[Category.CONTAINER]
    panel.visible = panel.items[:2]
    assert controller.select_all_visible(Category.CONTAINER) == 2
    assert controller.select_all_visible(Category.CONTAINER) == 2
    assert controller.store.selected_ids(Category.CONTAINER) == ("c1", "c2")


def test_deselect_all_is_idempotent(controller):
    controller.select_all_visible(Category.CONTAINER)
    controller.deselect_all(Category.CONTAINER)
    controller.deselect_all(Category.CONTAINER)
    assert controller.per_category_counts() == {}


def test_rerender_failure_keeps_committed_selection(controller, panels):
    panels[Category.CONTAINER].fail_rerender = True
    with pytest.raises(RerenderError):
        controller.toggle(Category.CONTAINER)
    assert controller.store.is_selected(Category.CONTAINER, "c1")


def test_counts_consistent(controller, panels):
    panels[Category.VOLUME].items = [make_item(Category.VOLUME, "pgdata")]
    controller.select_all_visible(Category.VOLUME)
    controller.toggle(Category.CONTAINER)
    counts = controller.per_category_counts()
    assert counts == {Category.CONTAINER: 1, Category.VOLUME: 1}
    assert controller.total_count() == sum(counts.values())


def test_clear_everything(controller):
    controller.select_all_visible(Category.CONTAINER)
    controller.clear_everything()
    assert not controller.has_any_selection()


def test_missing_panel_rejected(store):
    with pytest.raises(ValueError):
        SelectionController(store, {})
