from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence

import reflex as rx

from tessera.ui.components.common import element_props, icon
from tessera.ui.styling import Resolver, by_size, class_names

BASE_CLASSES = "flex items-center transition-all ease-in-ou duration-100 group"
DEFAULT_SEPARATOR = "hero-chevron-right"

color_class = Resolver(
    {
        "white": "text-white hover:[&>li_a]:text-[#ededed]",
        "primary": "text-[#4363EC] hover:[&>li_a]:text-[#072ed3]",
        "secondary": "text-[#6B6E7C] hover:[&>li_a]:text-[#60636f]",
        "success": "text-[#047857] hover:[&>li_a]:text-[#d4fde4]",
        "warning": "text-[#FF8B08] hover:[&>li_a]:text-[#fff1cd]",
        "danger": "text-[#E73B3B] hover:[&>li_a]:text-[#ffcdcd]",
        "info": "text-[#004FC4] hover:[&>li_a]:text-[#cce1ff]",
        "misc": "text-[#52059C] hover:[&>li_a]:text-[#ffe0ff]",
        "dawn": "text-[#4D4137] hover:[&>li_a]:text-[#FFECDA]",
        "light": "text-[#707483] hover:[&>li_a]:text-[#d2d8e9]",
        "dark": "text-[#1E1E1E] hover:[&>li_a]:text-[#869093]",
    },
    "text-[#1E1E1E] hover:[&>li_a]:text-[#869093]",
    name="breadcrumb.color",
)

size_class = Resolver(
    by_size(
        "text-xs gap-1.5 [&>li]:gap-1.5 [&>li>.separator-icon]:size-3 [&>li>.breadcrumb-icon]:size-4",
        "text-sm gap-2 [&>li]:gap-2 [&>li>.separator-icon]:size-3.5 [&>li>.breadcrumb-icon]:size-5",
        "text-base gap-2.5 [&>li]:gap-2.5 [&>li>.separator-icon]:size-4 [&>li>.breadcrumb-icon]:size-6",
        "text-lg gap-3 [&>li]:gap-3 [&>li>.separator-icon]:size-5 [&>li>.breadcrumb-icon]:size-7",
        "text-xl gap-3.5 [&>li]:gap-3.5 [&>li>.separator-icon]:size-6 [&>li>.breadcrumb-icon]:size-8",
    ),
    "text-sm gap-2 [&>li]:gap-2 [&>li>.separator-icon]:size-3.5 [&>li>.breadcrumb-icon]:size-5",
    name="breadcrumb.size",
)


@dataclass(frozen=True)
class BreadcrumbItem:
    """One crumb. `link` turns the content into a link; `separator` overrides the trail's separator."""

    content: Any
    icon: Optional[str] = None
    link: Optional[str] = None
    separator: Optional[str] = None
    class_name: Optional[str] = None


@dataclass(frozen=True)
class Crumb:
    """How a single item renders: whether it is linked and which separator (if any) follows it."""

    item: BreadcrumbItem
    linked: bool
    separator: Optional[str]


@dataclass(frozen=True)
class BreadcrumbStyle:
    color: Any = "dark"
    size: Any = "small"
    class_name: Optional[str] = None

    def classes(self) -> str:
        return class_names(BASE_CLASSES, color_class(self.color), size_class(self.size), self.class_name)


def plan(items: Sequence[BreadcrumbItem], separator: Optional[str] = DEFAULT_SEPARATOR) -> list[Crumb]:
    """Lay out a trail: every item but the last is followed by its own separator, or the trail's."""
    last = len(items) - 1
    return [
        Crumb(
            item=item,
            linked=item.link is not None,
            separator=None if index == last else (item.separator or separator or DEFAULT_SEPARATOR),
        )
        for index, item in enumerate(items)
    ]


def separator_mark(name: str, class_name: Optional[str] = None) -> rx.Component:
    """Render a separator: ``hero-*`` names as an icon, anything else as text."""
    if name.startswith("hero-"):
        return icon(name, class_name=class_name or "separator-icon")
    return rx.el.span(name, class_name=class_name or "separator-text")


def _crumb(crumb: Crumb) -> rx.Component:
    item = crumb.item
    return rx.el.li(
        icon(item.icon, class_name="breadcrumb-icon") if item.icon else rx.fragment(),
        (
            rx.el.div(rx.el.a(item.content, href=item.link), class_name="breadcrumb-link")
            if crumb.linked
            else rx.el.div(item.content, class_name="breadcrumb-text")
        ),
        separator_mark(crumb.separator) if crumb.separator else rx.fragment(),
        class_name=class_names("flex items-center", item.class_name),
    )


def breadcrumb(
    *children: rx.Component,
    items: Iterable[BreadcrumbItem] = (),
    id: Optional[str] = None,
    separator: str = DEFAULT_SEPARATOR,
    color: Any = "dark",
    size: Any = "small",
    class_name: Optional[str] = None,
    **rest: Any,
) -> rx.Component:
    """
    Render a breadcrumb trail.

    Args:
        *children: Extra content appended after the items.
        items (Iterable[BreadcrumbItem]): The crumbs, in order.
        id (str | None, optional): Element id. Defaults to None.
        separator (str, optional): Separator between items, an icon name (``hero-*``) or text. Defaults to
            "hero-chevron-right".
        color (str, optional): Color theme. Defaults to "dark".
        size (str, optional): Text, gap and icon size. Defaults to "small".
        class_name (str | None, optional): Extra classes. Defaults to None.

    Returns:
        rx.Component: A ``<ul>`` with one ``<li>`` per item.
    """
    style = BreadcrumbStyle(color=color, size=size, class_name=class_name)
    return rx.el.ul(
        *[_crumb(crumb) for crumb in plan(list(items), separator)],
        *children,
        class_name=style.classes(),
        **element_props(id=id, rest=rest),
    )
