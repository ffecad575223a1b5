import pytest
from rich.errors import NotRenderableError

from app.views.list_panel import ListPanel
from app.views.presentation import (
    SELECTED_MARKER,
    UNSELECTED_MARKER,
    display_strings,
    format_decimal_bytes,
)
from core.models import Category
from core.services.interfaces import RerenderError
from tests.fakes import make_item


def test_display_strings_per_category():
    image = make_item(Category.IMAGE, "i1", "nginx", tag="1.27", size=187_654_321)
    assert display_strings(image, True) == [SELECTED_MARKER, "nginx", "1.27", "187.7 MB"]

    volume = make_item(Category.VOLUME, "pgdata", driver="local")
    assert display_strings(volume, False) == [UNSELECTED_MARKER, "local", "pgdata"]

    container = make_item(Category.CONTAINER, "c1", "web", status="Up 2 hours")
    assert display_strings(container, False)[1:] == ["web", "Up 2 hours"]


def test_format_decimal_bytes():
    assert format_decimal_bytes(None) == "0 B"
    assert format_decimal_bytes(999) == "999 B"
    assert format_decimal_bytes(1_200_000_000) == "1.2 GB"


@pytest.fixture
def panel(console):
    items = [
        make_item(Category.NETWORK, "app_default", driver="bridge"),
        make_item(Category.NETWORK, "scratch", driver="bridge"),
        make_item(Category.NETWORK, "host", driver="host"),
    ]
    return ListPanel(Category.NETWORK, console, items=items)


def test_panel_cursor_stays_in_range(panel):
    assert panel.focused_item().name == "app_default"
    panel.advance_focus()
    panel.advance_focus()
    panel.advance_focus()
    assert panel.focused_item().name == "host"
    panel.retreat_focus()
    assert panel.focused_item().name == "scratch"


def test_panel_filter_limits_visible_but_not_all(panel):
    panel.set_filter("SC")
    assert [it.name for it in panel.visible_items()] == ["scratch"]
    assert len(panel.all_items()) == 3
    panel.set_filter("zzz")
    assert panel.focused_item() is None


def test_panel_set_items_clamps_cursor(panel):
    panel.advance_focus()
    panel.advance_focus()
    panel.set_items(panel.all_items()[:1])
    assert panel.cursor == 0


def test_panel_renders_selection_marker(panel, console):
    panel.is_selected = lambda item: item.name == "scratch"
    panel.rerender()
    output = console.file.getvalue()
    assert "Networks" in output
    assert "[x]" in output
    assert "[ ]" in output


def test_panel_rerender_error(panel, monkeypatch):
    def broken(*_args, **_kwargs):
        raise NotRenderableError("no")

    monkeypatch.setattr(panel.console, "print", broken)
    with pytest.raises(RerenderError):
        panel.rerender()


def test_resource_text_is_not_read_as_markup(console):
    item = make_item(Category.CONTAINER, "c1", "[red]web", status="Up [/x]")
    assert display_strings(item, False)[1:] == ["\\[red]web", "Up \\[/x]"]

    panel = ListPanel(Category.CONTAINER, console, items=[item])
    panel.set_filter("[red]")
    panel.rerender()

    output = console.file.getvalue()
    assert "[red]web" in output
    assert "Up [/x]" in output
    assert "(filter: [red])" in output
