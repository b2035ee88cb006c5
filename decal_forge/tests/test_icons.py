import pytest
from decal_forge.web.icons import ICON_NAMES, Icon, resolve, to_lucide_id


@pytest.mark.parametrize("name, lucide", [
    ("Home", "home"),
    ("LayoutGrid", "layout-grid"),
    ("X", "x"),
    ("BarChart3", "bar-chart-3"),
    ("RefreshCcw", "refresh-ccw"),
    ("ImageIcon", "image"),
    ("Trash2", "trash-2"),
])
def test_lucide_ids(name, lucide):
    assert resolve(name) == Icon(name=name, lucide=lucide)


def test_every_name_resolves():
    for name in ICON_NAMES:
        assert resolve(name) is not None


def test_unknown_name_returns_none():
    assert resolve("Dragon") is None
    assert resolve("home") is None
    assert resolve("") is None


def test_render_with_attributes():
    html = resolve("Heart").render(class_="w-4 h-4", aria_hidden="true")
    assert html == '<i data-lucide="heart" class="w-4 h-4" aria-hidden="true"></i>'


def test_render_escapes_values():
    html = resolve("Star").render(title='"><script>')
    assert "<script>" not in html


def test_to_lucide_id_plain():
    assert to_lucide_id("ShoppingCart") == "shopping-cart"
