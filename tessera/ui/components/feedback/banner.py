from dataclasses import dataclass
from typing import Any, Optional

import reflex as rx

from tessera.ui.components.common import element_props, icon
from tessera.ui.i18n import gettext
from tessera.ui.js import JS, VisibilityState, pop_in, pop_out
from tessera.ui.styling import SIZE_STEPS, PairResolver, Resolver, by_size, class_names, on
from tessera.ui.theme import color_variants

# "none" followed by the five size steps, i.e. offsets 0..5
_OFFSETS = ("none",) + SIZE_STEPS

color_variant = PairResolver(color_variants("banner"), "bg-white text-[#3E3E3E] border-[#DADADA]", name="banner.color")

padding_size = Resolver(
    {**by_size("p-2", "p-3", "p-4", "p-5", "p-6"), "none": "p-0"},
    "p-2",
    name="banner.padding",
)

space_class = Resolver(
    {"none": "space-y-0", **by_size("space-y-2", "space-y-3", "space-y-4", "space-y-5", "space-y-6")},
    "space-y-2",
    name="banner.space",
)

dismiss_size = Resolver(by_size("size-3.5", "size-4", "size-5", "size-6", "size-7"), "size-4", name="banner.dismiss_size")

vertical_position = PairResolver(
    {(size, edge): f"{edge}-{step}" for edge in ("top", "bottom") for step, size in enumerate(_OFFSETS)},
    "top-0",
    name="banner.vertical_position",
    keep_first=True,
)

position_class = PairResolver(
    {
        (size, corner): f"left-{step} ml-{step}" if corner.endswith("left") else f"right-{step}"
        for corner in ("top_left", "top_right", "bottom_left", "bottom_right")
        for step, size in enumerate(_OFFSETS)
    },
    "inset-x-0",
    name="banner.position",
    second_wildcards={"center": "mx-auto", "full": "inset-x-0"},
    keep_first=True,
)

rounded_size = PairResolver(
    {
        **on("top", by_size("rounded-b-sm", "rounded-b", "rounded-b-md", "rounded-b-lg", "rounded-b-xl")),
        **on("bottom", by_size("rounded-t-sm", "rounded-t", "rounded-t-md", "rounded-t-lg", "rounded-t-xl")),
        **on("all", by_size("rounded-sm", "rounded", "rounded-md", "rounded-lg", "rounded-xl")),
    },
    "rounded-none",
    name="banner.rounded",
    first_wildcards={"none": "rounded-none"},
)

border_class = PairResolver(
    {
        **on("top", by_size("border-b", "border-b-2", "border-b-[3px]", "border-b-4", "border-b-[5px]")),
        **on("bottom", by_size("border", "border-b-2", "border-b-[3px]", "border-b-4", "border-b-[5px]")),
        **on("full", by_size("border", "border-2", "border-[3px]", "border-4", "border-[5px]")),
    },
    "border-b",
    name="banner.border",
    first_wildcards={"none": "border-0"},
    keep_first=True,
)


@dataclass(frozen=True)
class BannerStyle:
    variant: Any = "default"
    color: Any = "white"
    border: Any = "extra_small"
    border_position: Any = "top"
    rounded: Any = "none"
    rounded_position: Any = "none"
    space: Any = "extra_small"
    vertical_position: Any = "top"
    vertical_size: Any = "none"
    position: Any = "full"
    position_size: Any = "none"
    font_weight: Any = "font-normal"
    padding: Any = "extra_small"
    class_name: Optional[str] = None

    def classes(self) -> str:
        return class_names(
            "overflow-hidden fixed",
            vertical_position(self.vertical_size, self.vertical_position),
            rounded_size(self.rounded, self.rounded_position),
            border_class(self.border, self.border_position),
            color_variant(self.variant, self.color),
            position_class(self.position_size, self.position),
            space_class(self.space),
            padding_size(self.padding),
            self.font_weight,
            self.class_name,
        )


# ---- JS commands ----


def show(selector: str, js: Optional[JS] = None) -> JS:
    """Reveal `selector` with the pop-in transition."""
    return (js or JS()).show(selector, transition=pop_in())


def hide(selector: str, js: Optional[JS] = None) -> JS:
    """Conceal `selector` with the pop-out transition."""
    return (js or JS()).hide(selector, transition=pop_out())


def show_banner(id: str, js: Optional[JS] = None) -> JS:
    return show(f"#{id}", js)


def hide_banner(id: str, js: Optional[JS] = None) -> JS:
    return hide(f"#{id}", js)


# ---- Components ----


def banner_dismiss(
    id: str,
    size: Any = "small",
    class_name: Optional[str] = None,
    params: Optional[dict[str, Any]] = None,
) -> rx.Component:
    """
    Render the dismiss button of a banner.

    Clicking it records the dismissal on the server, dispatches a ``tessera:dismiss`` DOM event carrying
    ``{"id": id, **params}`` and plays the banner's conceal transition.

    Args:
        id (str): Id of the banner to dismiss.
        size (str, optional): Icon size. Defaults to "small".
        class_name (str | None, optional): Extra icon classes. Defaults to None.
        params (dict | None, optional): Extra event detail. Defaults to ``{"kind": "banner"}``.

    Returns:
        rx.Component: The dismiss button.
    """
    detail = {"id": id, **(params if params is not None else {"kind": "banner"})}
    js = hide_banner(id, JS().dispatch("tessera:dismiss", to=f"#{id}", detail=detail))
    return rx.el.button(
        icon(
            "hero-x-mark-solid",
            class_name=class_names("banner-icon opacity-80 group-hover:opacity-70", dismiss_size(size), class_name),
        ),
        type="button",
        class_name="group shrink-0",
        custom_attrs={"aria-label": gettext("close")},
        on_click=[VisibilityState.dismiss(id), js.to_event()],
    )


def banner(
    *children: rx.Component,
    id: str,
    variant: Any = "default",
    color: Any = "white",
    border: Any = "extra_small",
    border_position: Any = "top",
    rounded: Any = "none",
    rounded_position: Any = "none",
    space: Any = "extra_small",
    vertical_position: Any = "top",
    vertical_size: Any = "none",
    position: Any = "full",
    position_size: Any = "none",
    font_weight: Any = "font-normal",
    padding: Any = "extra_small",
    class_name: Optional[str] = None,
    dismissible: bool = True,
    params: Optional[dict[str, Any]] = None,
    **rest: Any,
) -> rx.Component:
    """
    Render a fixed banner pinned to the top or bottom edge of the viewport.

    Args:
        *children: Banner content.
        id (str): Element id, used by `show_banner` / `hide_banner`.
        variant (str, optional): default, outline, transparent, shadow or unbordered. Defaults to "default".
        color (str, optional): Color theme. Defaults to "white".
        border (str, optional): Border width. Defaults to "extra_small".
        border_position (str, optional): top, bottom, full or none. Defaults to "top".
        rounded (str, optional): Corner radius. Defaults to "none".
        rounded_position (str, optional): top, bottom, all or none. Defaults to "none".
        space (str, optional): Vertical spacing between children. Defaults to "extra_small".
        vertical_position (str, optional): top or bottom. Defaults to "top".
        vertical_size (str, optional): Offset from that edge. Defaults to "none".
        position (str, optional): top_left, top_right, bottom_left, bottom_right, center or full. Defaults to "full".
        position_size (str, optional): Offset for corner positions. Defaults to "none".
        font_weight (str, optional): Font weight class. Defaults to "font-normal".
        padding (str, optional): Inner padding. Defaults to "extra_small".
        class_name (str | None, optional): Extra classes. Defaults to None.
        dismissible (bool, optional): Render the dismiss button. Defaults to True.
        params (dict | None, optional): Extra detail for the dismiss event. Defaults to None.
        **rest: Extra HTML attributes (``aria_live="polite"`` becomes ``aria-live``).

    Returns:
        rx.Component: The banner.

    Unrecognized style strings are used as classes verbatim; None falls back to the default.
    """
    style = BannerStyle(
        variant=variant,
        color=color,
        border=border,
        border_position=border_position,
        rounded=rounded,
        rounded_position=rounded_position,
        space=space,
        vertical_position=vertical_position,
        vertical_size=vertical_size,
        position=position,
        position_size=position_size,
        font_weight=font_weight,
        padding=padding,
        class_name=class_name,
    )
    return rx.el.div(
        rx.el.div(
            rx.el.div(*children),
            banner_dismiss(id, params=params) if dismissible else rx.fragment(),
            class_name="flex gap-2 items-center justify-between",
        ),
        class_name=style.classes(),
        **element_props(id=id, rest=rest),
    )
