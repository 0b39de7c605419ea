import pytest

from tessera.ui.components.layout.gallery import (
    GalleryStyle,
    column_class,
    gallery,
    gallery_media,
    grid_cols,
    grid_gap,
    rounded_size,
    shadow_class,
)


@pytest.mark.parametrize(
    "cols, expected",
    [("one", "grid-cols-1"), ("two", "grid-cols-2"), ("three", "grid-cols-2 md:grid-cols-3"), ("twelve", "grid-cols-2 md:grid-cols-12")],
)
def test_grid_cols(cols, expected):
    assert grid_cols(cols) == expected


def test_columns_and_gap():
    assert column_class("four") == "columns-2 md:columns-4"
    assert column_class(None) == "columns-1"
    assert grid_gap("medium") == "gap-3 [&.gallery-masonary_.gallery-media]:mb-3"
    assert grid_gap("quadruple_large") == "gap-8 [&.gallery-masonary_.gallery-media]:mb-8"
    assert grid_gap(None) is None


def test_media_resolvers():
    assert rounded_size("full") == "rounded-full"
    assert rounded_size(None) is None
    assert shadow_class("large") == "shadow-lg"
    assert shadow_class(None) == "shadow-none"


class TestGalleryStyle:
    def test_grid(self):
        assert GalleryStyle(cols="three", gap="small").classes() == (
            "grid gap-2 [&.gallery-masonary_.gallery-media]:mb-2 grid-cols-2 md:grid-cols-3"
        )

    def test_masonry_uses_columns(self):
        style = GalleryStyle(type="masonary", cols="three")
        assert style.masonry
        assert style.classes() == "gallery-masonary columns-2 md:columns-3"

    def test_bare_grid(self):
        assert GalleryStyle().classes() == "grid"


def test_render(tree):
    node = gallery(gallery_media(src="/1.png"), gallery_media(src="/2.png", rounded="large"), cols="two")
    assert tree.with_class(node, "grid-cols-2")
    assert len(tree.tags(node, "img")) == 2
    assert len(tree.with_class(node, "gallery-media")) == 2
    assert len(tree.with_class(node, "rounded-lg")) == 1
    assert len(tree.with_class(node, "rounded-none")) == 1
