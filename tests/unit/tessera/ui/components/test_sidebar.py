import pytest

from tessera.ui.components.layout.sidebar import (
    HIDE_AWAY_ATTR,
    SHOW_ATTR,
    SidebarStyle,
    border_class,
    hide_on_click_away,
    hide_position,
    hide_sidebar,
    padding_size,
    position_class,
    show_sidebar,
    sidebar,
    sidebar_document,
    size_class,
)
from tessera.ui.js import JS, Document, Element


class TestResolvers:
    def test_border_follows_edge(self):
        assert border_class("extra_small", "start") == "border-e"
        assert border_class("large", "end") == "border-s-4"
        assert border_class("none", "end") == "border-0"
        assert border_class(None, None) == "border-e"

    def test_border_keeps_known_size_for_unknown_edge(self):
        assert border_class("small", "middle") == "small"

    def test_hide_position(self):
        assert hide_position("left") == "-translate-x-full md:translate-x-0"
        assert hide_position("right") == "translate-x-full md:translate-x-0"
        assert hide_position(None) is None
        assert hide_position("top") is None
        assert hide_position("-translate-x-1/2") is None

    def test_misc(self):
        assert position_class("end") == "top-0 end-0"
        assert size_class(None) == "w-80"
        assert size_class("extra_large") == "w-96"
        assert padding_size(None) == "p-0"


class TestSidebarStyle:
    def test_defaults(self):
        assert SidebarStyle().classes() == (
            "fixed h-screen transition-transform border-e bg-white text-[#3E3E3E] border-[#DADADA] top-0 start-0 w-80"
        )

    def test_off_canvas_end(self):
        classes = SidebarStyle(position="end", hide_position="right", rounded="small").classes().split()
        assert "border-s" in classes
        assert "translate-x-full" in classes
        assert "end-0" in classes
        assert "rounded" in classes


class TestCommands:
    def doc(self):
        return Document(Element.parse("#nav", SidebarStyle(hide_position="left").classes(), visible=True))

    def test_show_drops_offset(self):
        doc = self.doc()
        show_sidebar("nav", "left").apply(doc)
        assert "-translate-x-full" not in doc["#nav"].classes
        assert "transform-none" in doc["#nav"].classes

    def test_show_then_hide_restores(self):
        doc = self.doc()
        before = doc.snapshot()
        show_sidebar("nav", "left").apply(doc)
        hide_sidebar("nav", "left").apply(doc)
        assert doc.snapshot() == before

    def test_without_position_only_toggles_transform(self):
        assert [args["names"] for _, args in show_sidebar("nav")] == [[], ["transform-none"]]


class TestClickAway:
    @pytest.fixture
    def doc(self):
        doc = sidebar_document(
            "nav",
            SidebarStyle(hide_position="left"),
            on_show=JS().dispatch("nav:opened"),
            on_hide_away=JS().dispatch("nav:dismissed"),
        )
        hide_on_click_away("nav").apply(doc)
        return doc

    def test_binding(self, doc):
        assert doc.click_away_bindings == [(HIDE_AWAY_ATTR, "#nav", "#nav")]

    def test_show_through_attr_runs_on_show(self, doc):
        JS().exec(SHOW_ATTR, to="#nav").apply(doc)
        assert "transform-none" in doc["#nav"].classes
        assert doc.events == [("nav:opened", None, {})]

    def test_click_outside_hides(self, doc):
        before = doc.snapshot()
        JS().exec(SHOW_ATTR, to="#nav").apply(doc)
        doc.click("body")
        assert doc.snapshot() == before
        assert "-translate-x-full" in doc["#nav"].classes
        assert [event for event, _, _ in doc.events] == ["nav:opened", "nav:dismissed"]

    def test_click_inside_keeps_it_open(self, doc):
        JS().exec(SHOW_ATTR, to="#nav").apply(doc)
        doc.click("#nav")
        assert "transform-none" in doc["#nav"].classes


class TestRender:
    def test_aside(self, tree):
        node = sidebar("menu", id="nav", hide_position="left", padding="medium", space="small")
        assert node.tag == "aside"
        assert "Sidebar" in tree.attr(node, "aria-label")
        assert tree.with_class(node, "-translate-x-full")
        assert tree.with_class(node, "p-3")
        assert tree.with_class(node, "space-y-3")

    def test_attrs_and_mount_binding(self, tree):
        node = sidebar("menu", id="nav", hide_position="left", on_hide_away=JS().dispatch("nav:dismissed"))
        assert "nav:dismissed" in tree.attr(node, HIDE_AWAY_ATTR)
        assert "transform-none" in tree.attr(node, SHOW_ATTR)
        assert "on_mount" in node.event_triggers

    def test_close_row(self, tree):
        node = sidebar("menu", id="nav")
        assert tree.with_class(node, "md:hidden")
        assert len(tree.tags(node, "button")) == 1
        assert tree.with_class(node, "sr-only")
        assert tree.with_class(node, "hero-x-mark")
