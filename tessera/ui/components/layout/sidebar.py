from dataclasses import dataclass
from typing import Any, Optional

import reflex as rx

from tessera.ui.components.common import element_props, icon
from tessera.ui.i18n import gettext
from tessera.ui.js import JS, Document, Element
from tessera.ui.styling import PairResolver, Resolver, by_size, class_names, on
from tessera.ui.theme import color_variants

SHOW_ATTR = "data-show"
HIDE_AWAY_ATTR = "data-hide-away"

color_variant = PairResolver(
    color_variants("sidebar"), color_variants("sidebar")[("default", "white")], name="sidebar.color"
)

# Off-canvas offset on small screens; always in place from `md` up.
hide_position = Resolver(
    {"left": "-translate-x-full md:translate-x-0", "right": "translate-x-full md:translate-x-0"},
    None,
    name="sidebar.hide_position",
    pass_through=False,
)

position_class = Resolver({"start": "top-0 start-0", "end": "top-0 end-0"}, "top-0 start-0", name="sidebar.position")

border_class = PairResolver(
    {
        **on("start", by_size("border-e", "border-e-2", "border-e-[3px]", "border-e-4", "border-e-[5px]")),
        **on("end", by_size("border-s", "border-s-2", "border-s-[3px]", "border-s-4", "border-s-[5px]")),
    },
    "border-e",
    name="sidebar.border",
    first_wildcards={"none": "border-0"},
    keep_first=True,
)

size_class = Resolver(by_size("w-60", "w-64", "w-72", "w-80", "w-96"), "w-80", name="sidebar.size")

rounded_size = Resolver(
    {**by_size("rounded-sm", "rounded", "rounded-md", "rounded-lg", "rounded-xl"), "none": "rounded-none"},
    None,
    name="sidebar.rounded",
)

space_class = Resolver(
    by_size("space-y-2", "space-y-3", "space-y-4", "space-y-5", "space-y-6"),
    None,
    name="sidebar.space",
)

padding_size = Resolver(
    {**by_size("p-1", "p-2", "p-3", "p-4", "p-5"), "none": "p-0"},
    "p-0",
    name="sidebar.padding",
)


@dataclass(frozen=True)
class SidebarStyle:
    variant: Any = "default"
    color: Any = "white"
    size: Any = "large"
    border: Any = "extra_small"
    rounded: Any = None
    position: Any = "start"
    hide_position: Any = None
    class_name: Optional[str] = None

    def classes(self) -> str:
        return class_names(
            "fixed h-screen transition-transform",
            border_class(self.border, self.position),
            hide_position(self.hide_position),
            color_variant(self.variant, self.color),
            position_class(self.position),
            size_class(self.size),
            rounded_size(self.rounded),
            self.class_name,
        )


# ---- JS commands ----


def show_sidebar(id: str, position: Any = None, js: Optional[JS] = None) -> JS:
    """Slide sidebar `id` in: drop its off-canvas offset for `position` ("left" / "right")."""
    return (js or JS()).remove_class(hide_position(position), to=f"#{id}").add_class("transform-none", to=f"#{id}")


def hide_sidebar(id: str, position: Any = None, js: Optional[JS] = None) -> JS:
    return (js or JS()).remove_class("transform-none", to=f"#{id}").add_class(hide_position(position), to=f"#{id}")


def hide_on_click_away(id: str) -> JS:
    """Bind clicks outside sidebar `id` to the chain stored on its ``data-hide-away``."""
    return JS().exec_on_click_away(HIDE_AWAY_ATTR, to=f"#{id}")


def sidebar_attrs(
    id: str, position: Any = None, on_show: Optional[JS] = None, on_hide_away: Optional[JS] = None
) -> dict[str, str]:
    return {
        SHOW_ATTR: show_sidebar(id, position, on_show).to_attr(),
        HIDE_AWAY_ATTR: hide_sidebar(id, position, on_hide_away).to_attr(),
    }


def sidebar_document(
    id: str,
    style: Optional[SidebarStyle] = None,
    on_show: Optional[JS] = None,
    on_hide_away: Optional[JS] = None,
) -> Document:
    """Model of a mounted sidebar: displayed, still off canvas when `style` sets a `hide_position`."""
    style = style or SidebarStyle()
    attrs = sidebar_attrs(id, style.hide_position, on_show, on_hide_away)
    return Document(Element.parse(f"#{id}", style.classes(), visible=True, attrs=attrs))


# ---- Components ----


def sidebar(
    *children: rx.Component,
    id: str,
    variant: Any = "default",
    color: Any = "white",
    size: Any = "large",
    border: Any = "extra_small",
    rounded: Any = None,
    position: Any = "start",
    hide_position: Any = None,
    space: Any = None,
    padding: Any = "none",
    class_name: Optional[str] = None,
    on_hide: Optional[JS] = None,
    on_show: Optional[JS] = None,
    on_hide_away: Optional[JS] = None,
    **rest: Any,
) -> rx.Component:
    """
    Render a fixed, full-height sidebar.

    On small screens the sidebar can start off canvas (`hide_position`) and be toggled with `show_sidebar` /
    `hide_sidebar`. The close row is only shown below the `md` breakpoint.

    A click outside the sidebar runs `hide_sidebar` too. That chain is stored on ``data-hide-away`` and the
    `show_sidebar` chain on ``data-show``, so ``JS().exec("data-show", to="#nav")`` opens sidebar ``nav`` along with
    its `on_show` chain.

    Args:
        *children: Sidebar content.
        id (str): Element id.
        variant (str, optional): default, outline, transparent, shadow or unbordered. Defaults to "default".
        color (str, optional): Color theme. Defaults to "white".
        size (str, optional): Width. Defaults to "large" ("w-80").
        border (str, optional): Width of the inner-edge border. Defaults to "extra_small".
        position (str, optional): "start" or "end" edge of the viewport. Defaults to "start".
        hide_position (str | None, optional): "left" or "right" off-canvas offset. Defaults to None.
        space (str | None, optional): Vertical spacing of the content. Defaults to None.
        padding (str, optional): Content padding. Defaults to "none".
        on_hide (JS | None, optional): Chain run before the sidebar hides. Defaults to None.
        on_show (JS | None, optional): Chain run before the sidebar shows through ``data-show``. Defaults to None.
        on_hide_away (JS | None, optional): Chain run before the sidebar hides on a click outside it. Defaults to
            None.

    Returns:
        rx.Component: The ``<aside>`` element.
    """
    style = SidebarStyle(
        variant=variant,
        color=color,
        size=size,
        border=border,
        rounded=rounded,
        position=position,
        hide_position=hide_position,
        class_name=class_name,
    )
    close = hide_sidebar(id, hide_position, on_hide)
    return rx.el.aside(
        rx.el.div(
            rx.el.div(
                rx.el.button(
                    icon("hero-x-mark"),
                    rx.el.span(gettext("Close menu"), class_name="sr-only"),
                    type="button",
                    on_click=close.to_event(),
                ),
                class_name="flex justify-end pt-2 px-2 mb-1 md:hidden",
            ),
            rx.el.div(*children, class_name=class_names(space_class(space), padding_size(padding))),
            class_name="h-full overflow-y-auto",
        ),
        class_name=style.classes(),
        **element_props(
            id=id, rest=rest, aria_label="Sidebar", **sidebar_attrs(id, hide_position, on_show, on_hide_away)
        ),
        on_mount=hide_on_click_away(id).to_event(),
    )
