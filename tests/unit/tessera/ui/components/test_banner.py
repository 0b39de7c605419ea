import pytest

from tessera.ui.components.feedback.banner import (
    BannerStyle,
    banner,
    banner_dismiss,
    border_class,
    color_variant,
    dismiss_size,
    hide,
    hide_banner,
    padding_size,
    position_class,
    rounded_size,
    show,
    show_banner,
    space_class,
    vertical_position,
)
from tessera.ui.js import JS, Document, Element, pop_in, pop_out


class TestResolvers:
    @pytest.mark.parametrize(
        "value, expected",
        [("extra_small", "p-2"), ("small", "p-3"), ("medium", "p-4"), ("large", "p-5"), ("extra_large", "p-6"), ("none", "p-0")],
    )
    def test_padding(self, value, expected):
        assert padding_size(value) == expected

    def test_padding_default_and_pass_through(self):
        assert padding_size(None) == "p-2"
        assert padding_size("p-[7px]") == "p-[7px]"

    def test_space(self):
        assert space_class("none") == "space-y-0"
        assert space_class("extra_large") == "space-y-6"
        assert space_class(None) == "space-y-2"

    def test_dismiss_size(self):
        assert dismiss_size("small") == "size-4"
        assert dismiss_size("extra_large") == "size-7"
        assert dismiss_size(None) == "size-4"

    def test_vertical_position(self):
        assert vertical_position("none", "top") == "top-0"
        assert vertical_position("medium", "bottom") == "bottom-3"
        assert vertical_position("extra_large", "top") == "top-5"
        assert vertical_position(None, None) == "top-0"

    def test_vertical_position_keeps_known_size_for_unknown_edge(self):
        assert vertical_position("small", "middle") == "small"

    def test_position(self):
        assert position_class("small", "top_left") == "left-2 ml-2"
        assert position_class("large", "bottom_right") == "right-4"
        assert position_class("large", "center") == "mx-auto"
        assert position_class("none", "full") == "inset-x-0"
        assert position_class(None, None) == "inset-x-0"

    def test_position_keeps_known_size_for_unknown_corner(self):
        assert position_class("large", "middle") == "large"

    def test_rounded(self):
        assert rounded_size("small", "top") == "rounded-b"
        assert rounded_size("medium", "bottom") == "rounded-t-md"
        assert rounded_size("extra_large", "all") == "rounded-xl"
        assert rounded_size("none", "all") == "rounded-none"
        assert rounded_size("large", "sideways") == "rounded-none"

    def test_border(self):
        assert border_class("extra_small", "top") == "border-b"
        assert border_class("extra_small", "bottom") == "border"
        assert border_class("large", "full") == "border-4"
        assert border_class("none", "full") == "border-0"
        assert border_class("border-dashed", "top") == "border-dashed"
        assert border_class(None, None) == "border-b"

    def test_border_keeps_known_size_for_unknown_position(self):
        assert border_class("extra_small", "none") == "extra_small"
        assert border_class("large", "sideways") == "large"

    def test_color(self):
        assert color_variant("default", "white") == "bg-white text-[#3E3E3E] border-[#DADADA]"
        assert color_variant("outline", "danger") == "bg-transparent text-[#E73B3B] border-[#E73B3B]"
        assert color_variant(None, None) == "bg-white text-[#3E3E3E] border-[#DADADA]"


class TestBannerStyle:
    def test_default_classes(self):
        assert BannerStyle().classes() == (
            "overflow-hidden fixed top-0 rounded-none border-b bg-white text-[#3E3E3E] border-[#DADADA] "
            "inset-x-0 space-y-2 p-2 font-normal"
        )

    def test_overrides(self):
        classes = BannerStyle(vertical_position="bottom", vertical_size="small", padding="p-[9px]", class_name="z-40").classes()
        assert "bottom-2" in classes.split()
        assert "p-[9px]" in classes.split()
        assert classes.endswith("z-40")

    def test_border_position_none_drops_bottom_border(self):
        classes = BannerStyle(border_position="none").classes().split()
        assert "border-b" not in classes
        assert "border" not in classes

    def test_idempotent(self):
        assert BannerStyle(color="info").classes() == BannerStyle(color="info").classes()


class TestCommands:
    def test_show_and_hide(self):
        assert show("#b") == JS().show("#b", transition=pop_in())
        assert hide("#b") == JS().hide("#b", transition=pop_out())

    def test_by_id_appends_to_chain(self):
        base = JS().add_class("seen", to="body")
        js = show_banner("promo", base)
        assert [op for op, _ in js] == ["add_class", "show"]
        assert js.to_json()[1][1]["to"] == "#promo"
        assert hide_banner("promo") == hide("#promo")

    def test_reveal_then_conceal_restores_classes(self):
        doc = Document(Element.parse("#promo", BannerStyle().classes()))
        before = doc.snapshot()
        show_banner("promo").apply(doc)
        assert doc["#promo"].visible
        hide_banner("promo").apply(doc)
        assert doc.snapshot() == before


class TestRender:
    def test_root(self, tree):
        node = banner("Hello", id="promo", color="primary", aria_live="polite")
        assert node.tag == "div"
        assert "promo" in str(node.id)
        assert "polite" in tree.attr(node, "aria-live")
        assert tree.with_class(node, "fixed")

    def test_dismiss_button(self, tree):
        node = banner("Hello", id="promo")
        buttons = tree.tags(node, "button")
        assert len(buttons) == 1
        assert "close" in tree.attr(buttons[0], "aria-label")
        assert tree.with_class(node, "hero-x-mark-solid")

    def test_not_dismissible(self, tree):
        assert tree.tags(banner("Hello", id="promo", dismissible=False), "button") == []

    def test_dismiss_size(self, tree):
        node = banner_dismiss("promo", size="large")
        assert tree.with_class(node, "size-6")

    def test_requires_id(self):
        with pytest.raises(TypeError):
            banner("Hello")
