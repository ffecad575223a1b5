import pytest

from core.models import Category
from core.services.selection_service import SelectionStore


def test_toggle_twice_restores_membership(store):
    assert store.toggle(Category.IMAGE, "sha256:1") is True
    assert store.is_selected(Category.IMAGE, "sha256:1")
    assert store.toggle(Category.IMAGE, "sha256:1") is False
    assert not store.is_selected(Category.IMAGE, "sha256:1")
    assert store.total_count() == 0


def test_add_many_has_set_semantics(store):
    store.add_many(Category.VOLUME, ["a", "b", "a"])
    store.add_many(Category.VOLUME, ["b"])
    assert store.selected_ids(Category.VOLUME) == ("a", "b")


def test_counts_follow_category_order_and_skip_empty(store):
    store.add_many(Category.NETWORK, ["n1"])
    store.add_many(Category.CONTAINER, ["c1", "c2"])
    counts = store.per_category_counts()
    assert list(counts) == [Category.CONTAINER, Category.NETWORK]
    assert counts == {Category.CONTAINER: 2, Category.NETWORK: 1}
    assert store.total_count() == sum(counts.values()) == 3
    assert store.has_any_selection()


def test_clear_and_clear_all(store):
    store.add_many(Category.CONTAINER, ["c1"])
    store.add_many(Category.IMAGE, ["i1"])
    store.clear(Category.CONTAINER)
    store.clear(Category.CONTAINER)
    assert store.per_category_counts() == {Category.IMAGE: 1}
    store.clear_all()
    assert not store.has_any_selection()


def test_snapshot_is_isolated_from_later_changes(store):
    store.add_many(Category.CONTAINER, ["c1", "c2"])
    snap = store.snapshot()
    store.toggle(Category.CONTAINER, "c3")
    store.clear_all()
    assert dict(snap)[Category.CONTAINER] == ("c1", "c2")
    assert snap.counts() == {Category.CONTAINER: 2}
    assert snap.total == 2


def test_custom_category_subset():
    store = SelectionStore([Category.VOLUME, Category.NETWORK])
    assert store.categories == (Category.VOLUME, Category.NETWORK)
    with pytest.raises(KeyError):
        store.toggle(Category.CONTAINER, "c1")


def test_duplicate_categories_rejected():
    with pytest.raises(ValueError):
        SelectionStore([Category.IMAGE, Category.IMAGE])
