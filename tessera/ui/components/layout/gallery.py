from dataclasses import dataclass
from typing import Any, Optional

import reflex as rx

from tessera.ui.components.common import element_props
from tessera.ui.styling import Resolver, by_size, class_names
from tessera.ui.tokens import COLUMNS, EXTENDED_SIZES

GALLERY_TYPES = ("default", "masonary", "featured")

grid_cols = Resolver(
    {
        name: f"grid-cols-{n}" if n <= 2 else f"grid-cols-2 md:grid-cols-{n}"
        for n, name in enumerate(COLUMNS, start=1)
    },
    None,
    name="gallery.grid_cols",
)

column_class = Resolver(
    {name: f"columns-{n}" if n <= 2 else f"columns-2 md:columns-{n}" for n, name in enumerate(COLUMNS, start=1)},
    "columns-1",
    name="gallery.columns",
)

grid_gap = Resolver(
    {size: f"gap-{n} [&.gallery-masonary_.gallery-media]:mb-{n}" for n, size in enumerate(EXTENDED_SIZES, start=1)},
    None,
    name="gallery.gap",
)

rounded_size = Resolver(
    {
        **by_size("rounded-sm", "rounded", "rounded-md", "rounded-lg", "rounded-xl"),
        "full": "rounded-full",
        "none": "rounded-none",
    },
    None,
    name="gallery.rounded",
)

shadow_class = Resolver(
    {**by_size("shadow-sm", "shadow", "shadow-md", "shadow-lg", "shadow-xl"), "none": "shadow-none"},
    "shadow-none",
    name="gallery.shadow",
)


@dataclass(frozen=True)
class GalleryStyle:
    type: str = "default"
    cols: Any = None
    gap: Any = None
    class_name: Optional[str] = None

    @property
    def masonry(self) -> bool:
        return self.type == "masonary"

    def classes(self) -> str:
        if self.masonry:
            return class_names("gallery-masonary", grid_gap(self.gap), column_class(self.cols), self.class_name)
        return class_names("grid", grid_gap(self.gap), grid_cols(self.cols), self.class_name)


def gallery(
    *children: rx.Component,
    id: Optional[str] = None,
    type: str = "default",
    cols: Any = None,
    gap: Any = None,
    class_name: Optional[str] = None,
    **rest: Any,
) -> rx.Component:
    """
    Render an image gallery.

    Args:
        *children: `gallery_media` items.
        id (str | None, optional): Element id. Defaults to None.
        type (str, optional): "default", "masonary" (CSS columns) or "featured". Defaults to "default".
        cols (str | None, optional): Column count, "one" to "twelve". Defaults to None.
        gap (str | None, optional): Gap between items, "extra_small" to "quadruple_large". Defaults to None.
        class_name (str | None, optional): Extra classes. Defaults to None.

    Returns:
        rx.Component: The gallery grid.
    """
    style = GalleryStyle(type=type, cols=cols, gap=gap, class_name=class_name)
    return rx.el.div(*children, class_name=style.classes(), **element_props(id=id, rest=rest))


def gallery_media(
    src: str,
    alt: str = "",
    id: Optional[str] = None,
    rounded: Any = "none",
    shadow: Any = "shadow-none",
    class_name: Optional[str] = None,
    **rest: Any,
) -> rx.Component:
    return rx.el.div(
        rx.el.img(
            src=src,
            alt=alt,
            class_name=class_names(
                "gallery-media h-auto max-w-full", rounded_size(rounded), shadow_class(shadow), class_name
            ),
            **element_props(rest=rest),
        ),
        **element_props(id=id),
    )
